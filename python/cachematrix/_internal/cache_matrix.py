from __future__ import annotations

import threading
from typing import Any

import numpy as np

from . import formatting as _formatting
from . import linalg as _linalg
from .coercion import coerce_matrix, coerce_rhs, frozen
from .observability import CacheObservability, CacheStats


class CacheMatrix:
    """A matrix that remembers its inverse.

    The inverse is computed on the first :meth:`inverse` call and returned
    from the cache afterwards. Replacing the matrix with :meth:`set` or
    calling :meth:`clear_cache` drops it again.

    Both the stored matrix and the cached inverse are read-only arrays, so
    the cache can only be invalidated through this object.
    """

    def __init__(self, matrix: Any = None) -> None:
        self._lock = threading.RLock()
        self._value = coerce_matrix(matrix)
        self._inverse: np.ndarray | None = None
        self._observability = CacheObservability()

    def set(self, matrix: Any) -> None:
        """Replace the matrix and drop any cached inverse."""
        value = coerce_matrix(matrix)
        with self._lock:
            self._value = value
            if self._inverse is not None:
                self._inverse = None
                self._observability.record_invalidation()

    def get(self) -> np.ndarray:
        return self._value

    def inverse(self) -> np.ndarray:
        """Return the inverse of the current matrix, computing it on a miss.

        Raises InvalidDimensionsError if the matrix is not square and
        SingularMatrixError if it is not invertible. A failed computation
        leaves the cache empty.
        """
        return self._lookup("inverse")

    def cached_solution(self) -> np.ndarray | None:
        """Peek at the cached inverse without computing it."""
        return self._inverse

    def clear_cache(self) -> None:
        with self._lock:
            if self._inverse is not None:
                self._inverse = None
                self._observability.record_clear()

    def solve(self, rhs: Any) -> np.ndarray:
        """Solve ``matrix @ x = rhs`` using the cached inverse."""
        b = coerce_rhs(rhs)
        with self._lock:
            n = _linalg.require_square(self._value)
            _linalg.require_rhs_shape(n, b)
            inverse = self._lookup("solve")
        return inverse @ b

    @property
    def is_cached(self) -> bool:
        return self._inverse is not None

    @property
    def shape(self) -> tuple[int, ...]:
        return tuple(self._value.shape)

    @property
    def stats(self) -> CacheStats:
        return self._observability.stats

    @property
    def last_hit(self) -> bool | None:
        return self._observability.last_hit

    def last_lookup(self, op: str | None = None) -> dict[str, Any] | None:
        return self._observability.last(op)

    def reset_stats(self) -> None:
        self._observability.reset()

    def _lookup(self, op: str) -> np.ndarray:
        with self._lock:
            cached = self._inverse
            if cached is not None:
                self._observability.record_lookup(op, hit=True, shape=self._value.shape)
                return cached

            value = self._value
            self._observability.record_lookup(op, hit=False, shape=value.shape)
            inverse = frozen(_linalg.invert(value))
            self._inverse = inverse
            return inverse

    def __array__(self, dtype: Any = None, copy: bool | None = None) -> np.ndarray:
        if copy:
            return np.array(self._value, dtype=dtype, copy=True)
        if copy is False and dtype is not None and np.dtype(dtype) != self._value.dtype:
            raise ValueError(
                f"Unable to return a {np.dtype(dtype)} view of a {self._value.dtype} "
                "matrix without copying."
            )
        return np.asarray(self._value, dtype=dtype)

    def __str__(self) -> str:
        return _formatting.matrix_str(self, self._value, cached=self.is_cached)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} shape={self.shape} cached={self.is_cached}>"


class LazyMatrix(CacheMatrix):
    """Same cache, exposed through a single ``get_solution`` accessor."""

    def get_solution(self) -> np.ndarray:
        return self._lookup("get_solution")


def cache_solve(matrix: CacheMatrix) -> np.ndarray:
    """Return the inverse held by ``matrix``, computing and caching it if needed."""
    if not isinstance(matrix, CacheMatrix):
        raise TypeError(
            f"cache_solve expects a CacheMatrix, got {type(matrix).__name__}"
        )
    return matrix._lookup("cache_solve")


def make_cache_matrix(matrix: Any = None) -> CacheMatrix:
    return CacheMatrix(matrix)


def make_lazy_matrix(matrix: Any = None) -> LazyMatrix:
    return LazyMatrix(matrix)
