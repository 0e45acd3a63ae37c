from __future__ import annotations

import time
from dataclasses import asdict, dataclass
from typing import Any, Dict, Tuple


@dataclass
class CacheStats:
    hits: int = 0
    misses: int = 0
    invalidations: int = 0
    clears: int = 0

    @property
    def lookups(self) -> int:
        return self.hits + self.misses


@dataclass
class LookupRecord:
    op: str
    hit: bool
    shape: Tuple[int, ...]
    trace_tag: str
    timestamp: float


class CacheObservability:
    """Hit/miss bookkeeping for a single cached inverse.

    A cache hit is reported through ``last_hit`` and the ``hits`` counter
    rather than printed, so tests can assert on it.
    """

    def __init__(self) -> None:
        self._stats = CacheStats()
        self._counter = 0
        self._last: Dict[str, Dict[str, Any]] = {}

    @property
    def stats(self) -> CacheStats:
        return CacheStats(**asdict(self._stats))

    @property
    def last_hit(self) -> bool | None:
        payload = self._last.get("__latest__")
        if payload is None:
            return None
        return bool(payload["hit"])

    def record_lookup(self, op: str, *, hit: bool, shape: Tuple[int, ...]) -> dict[str, Any]:
        if hit:
            self._stats.hits += 1
        else:
            self._stats.misses += 1

        self._counter += 1
        record = LookupRecord(
            op=op,
            hit=hit,
            shape=tuple(int(d) for d in shape),
            trace_tag=f"{op}:{self._counter}",
            timestamp=time.time(),
        )
        payload = asdict(record)
        self._last["__latest__"] = payload
        self._last[op] = payload
        return payload

    def record_invalidation(self) -> None:
        self._stats.invalidations += 1

    def record_clear(self) -> None:
        self._stats.clears += 1

    def last(self, op: str | None = None) -> dict[str, Any] | None:
        key = op or "__latest__"
        payload = self._last.get(key)
        if payload is None:
            return None
        return dict(payload)

    def reset(self) -> None:
        self._stats = CacheStats()
        self._counter = 0
        self._last.clear()
