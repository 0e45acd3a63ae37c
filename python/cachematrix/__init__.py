"""Matrices that compute their inverse once and keep it until replaced."""
from __future__ import annotations

try:
    from ._version import version as __version__
except ImportError:
    __version__ = "unknown"

from ._internal import formatting as _formatting
from ._internal import linalg as _linalg
from ._internal.cache_matrix import (
    CacheMatrix,
    LazyMatrix,
    cache_solve,
    make_cache_matrix,
    make_lazy_matrix,
)
from ._internal.errors import (
    CacheMatrixError,
    InvalidDimensionsError,
    SingularMatrixError,
)
from ._internal.observability import CacheStats, LookupRecord
from ._internal.warnings import CacheMatrixWarning, IllConditionedWarning


def configure(
    *,
    edge_items: int | None = None,
    warn_ill_conditioned: bool | None = None,
) -> None:
    """Set process-wide display and warning options.

    ``edge_items`` is the number of leading and trailing rows/columns shown
    by ``str(matrix)`` (default 4); ``warn_ill_conditioned`` toggles
    :class:`IllConditionedWarning` when an inverse is computed (default on).
    Options left as ``None`` keep their current value.
    """
    if edge_items is not None:
        _formatting.configure(edge_items=edge_items)
    if warn_ill_conditioned is not None:
        _linalg.configure(warn_ill_conditioned=warn_ill_conditioned)


__all__ = [
    "CacheMatrix",
    "LazyMatrix",
    "cache_solve",
    "make_cache_matrix",
    "make_lazy_matrix",
    "CacheStats",
    "LookupRecord",
    "CacheMatrixError",
    "SingularMatrixError",
    "InvalidDimensionsError",
    "CacheMatrixWarning",
    "IllConditionedWarning",
    "configure",
    "__version__",
]
