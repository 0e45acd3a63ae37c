from __future__ import annotations

from collections.abc import Sequence as _SequenceABC
from typing import Any

import numpy as np

# bool, signed/unsigned int, float, complex
_NUMERIC_KINDS = "biufc"


def is_sequence_like(value: Any) -> bool:
    return isinstance(value, _SequenceABC) and not isinstance(value, (str, bytes, bytearray))


def placeholder_matrix() -> np.ndarray:
    """Degenerate ``0 x 0`` matrix used when no matrix is supplied."""
    return frozen(np.empty((0, 0), dtype=np.float64))


def frozen(array: np.ndarray) -> np.ndarray:
    array.flags.writeable = False
    return array


def coerce_matrix(candidate: Any) -> np.ndarray:
    """Return a private, read-only ndarray copy of ``candidate``.

    Shape is deliberately not validated here: a non-square or non-2D value
    is accepted and only rejected when an inverse is requested.
    """
    if candidate is None:
        return placeholder_matrix()

    if isinstance(candidate, (str, bytes, bytearray)):
        raise TypeError("Matrix data must be numeric, not a string.")

    to_array = getattr(candidate, "__array__", None)
    if not callable(to_array) and not is_sequence_like(candidate) and not np.isscalar(candidate):
        raise TypeError(
            "Matrix data must be provided as a nested sequence or a NumPy array."
        )

    try:
        array = np.array(candidate, copy=True)
    except ValueError as exc:
        # NumPy refuses ragged nested sequences.
        raise TypeError("Matrix rows must all have the same length.") from exc

    if array.dtype.kind not in _NUMERIC_KINDS:
        raise TypeError(f"Matrix entries must be numeric, got dtype {array.dtype}.")

    return frozen(array)


def coerce_rhs(candidate: Any) -> np.ndarray:
    array = np.asarray(candidate)
    if array.dtype.kind not in _NUMERIC_KINDS:
        raise TypeError(f"Right-hand side must be numeric, got dtype {array.dtype}.")
    return array
