"""cachematrix exception types.

Both concrete errors double as the builtin/NumPy error a caller would
otherwise expect, so existing ``except LinAlgError`` or ``except ValueError``
blocks keep working.
"""
from __future__ import annotations

import numpy as np


class CacheMatrixError(Exception):
    """Base class for all cachematrix errors."""


class SingularMatrixError(CacheMatrixError, np.linalg.LinAlgError):
    """The matrix has no inverse (exactly singular as far as LAPACK can tell)."""


class InvalidDimensionsError(CacheMatrixError, ValueError):
    """The matrix is not 2D and square, or an operand's shape does not match."""
