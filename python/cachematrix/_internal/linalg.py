"""Dense inversion primitive backed by LAPACK ``gesv``.

A matrix counts as singular when LAPACK hits an exactly zero pivot, when
the input or result is non-finite, or when the 1-norm condition estimate
reaches ``1 / eps`` of the working dtype (the inverse is then numerical
noise). Between ``1 / sqrt(eps)`` and ``1 / eps`` the inverse is kept but
an :class:`IllConditionedWarning` is issued.
"""
from __future__ import annotations

import warnings
from typing import Any

import numpy as np

from .errors import InvalidDimensionsError, SingularMatrixError
from .warnings import IllConditionedWarning


_WARN_ILL_CONDITIONED: bool = True


def configure(*, warn_ill_conditioned: bool) -> None:
    global _WARN_ILL_CONDITIONED
    _WARN_ILL_CONDITIONED = bool(warn_ill_conditioned)


def _work_dtype(dtype: np.dtype) -> np.dtype:
    # LAPACK only handles single/double precision real and complex.
    if dtype.kind == "c":
        return np.dtype(np.complex64 if dtype == np.complex64 else np.complex128)
    if dtype.kind == "f" and dtype in (np.float16, np.float32):
        return np.dtype(np.float32)
    return np.dtype(np.float64)


def require_square(matrix: np.ndarray) -> int:
    if matrix.ndim != 2:
        raise InvalidDimensionsError(
            f"Inverse requires a 2D matrix, got an array with {matrix.ndim} dimension(s)."
        )
    rows, cols = matrix.shape
    if rows != cols:
        raise InvalidDimensionsError(
            f"Inverse requires a square matrix, got shape {rows}x{cols}."
        )
    return int(rows)


def require_rhs_shape(n: int, rhs: np.ndarray) -> None:
    if rhs.ndim not in (1, 2) or rhs.shape[0] != n:
        raise InvalidDimensionsError(
            f"Right-hand side of shape {rhs.shape} does not match a {n}x{n} matrix."
        )


def solve(matrix: np.ndarray, rhs: Any | None = None) -> np.ndarray:
    """Solve ``matrix @ X = rhs``; ``rhs`` defaults to the identity.

    Raises :class:`InvalidDimensionsError` for non-square input and
    :class:`SingularMatrixError` when no unique solution exists.
    """
    n = require_square(matrix)
    dtype = _work_dtype(matrix.dtype)

    if rhs is None:
        b = np.eye(n, dtype=dtype)
    else:
        b = np.asarray(rhs)
        require_rhs_shape(n, b)
        dtype = np.result_type(dtype, _work_dtype(b.dtype))
        b = b.astype(dtype, copy=False)

    if n == 0:
        return np.empty(b.shape, dtype=dtype)

    a = matrix.astype(dtype, copy=False)
    if not np.all(np.isfinite(a)):
        raise SingularMatrixError("Matrix contains non-finite entries and has no usable inverse.")

    try:
        x = np.linalg.solve(a, b)
    except np.linalg.LinAlgError as exc:
        raise SingularMatrixError(f"Matrix is singular: {exc}") from exc

    if not np.all(np.isfinite(x)):
        raise SingularMatrixError("Matrix is numerically singular (solution is not finite).")
    return x


def condition_estimate(matrix: np.ndarray, inverse: np.ndarray) -> float:
    """1-norm condition number from an already computed inverse."""
    if matrix.size == 0:
        return 1.0
    return float(np.linalg.norm(matrix, 1) * np.linalg.norm(inverse, 1))


def invert(matrix: np.ndarray) -> np.ndarray:
    """Dense inverse of a square, non-singular matrix."""
    inverse = solve(matrix)

    eps = float(np.finfo(inverse.dtype).eps)
    cond = condition_estimate(matrix, inverse)
    if cond * eps >= 1.0:
        raise SingularMatrixError(
            f"Matrix is computationally singular (1-norm condition ~{cond:.3g})."
        )

    if _WARN_ILL_CONDITIONED and cond * np.sqrt(eps) >= 1.0:
        warnings.warn(
            f"Matrix is ill-conditioned (1-norm condition ~{cond:.3g}); "
            "the cached inverse may be inaccurate.",
            IllConditionedWarning,
            stacklevel=4,
        )
    return inverse
