"""
adapters/memory_cache.py
──────────────────────────────────────────────────────────────────────────────
Implements CachePort with an in-process cachetools.TLRUCache.

Key behaviour:
  - Each entry carries its own TTL (TLRUCache "time-to-use" callback), so a
    single store can hold entries written with different lifetimes.
  - Bounded: least-recently-used entries are evicted beyond ``maxsize``.
  - The lock guards only cache bookkeeping.  ``compute`` runs outside it, so
    two threads missing the same key may both compute (no single-flight).
  - ``timer`` is injectable so tests can move time forward deterministically.
"""
from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass
from typing import Callable

from cachetools import TLRUCache

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Entry:
    body: str
    ttl: float


def _time_to_use(_key: str, entry: _Entry, now: float) -> float:
    return now + entry.ttl


class MemoryCacheAdapter:
    """In-memory get-or-compute cache.

    Args:
        maxsize: Maximum number of stored response bodies.
        timer:   Monotonic clock returning seconds (default time.monotonic).
    """

    def __init__(
        self,
        maxsize: int = 4096,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        self._cache: TLRUCache = TLRUCache(maxsize=maxsize, ttu=_time_to_use, timer=timer)
        self._lock = threading.Lock()
        logger.debug("MemoryCacheAdapter ready | maxsize=%d", maxsize)

    # ── CachePort implementation ───────────────────────────────────────────

    def get_or_compute(
        self,
        key: str,
        ttl_seconds: int,
        compute: Callable[[], str],
    ) -> str:
        with self._lock:
            entry = self._cache.get(key)
        if entry is not None:
            logger.debug("cache hit | key=%s", key)
            return entry.body

        logger.debug("cache miss | key=%s ttl=%ds", key, ttl_seconds)
        body = compute()
        with self._lock:
            self._cache[key] = _Entry(body=body, ttl=ttl_seconds)
        return body

    # ── Housekeeping ───────────────────────────────────────────────────────

    def clear(self) -> None:
        """Drop every stored entry."""
        with self._lock:
            self._cache.clear()

    def __len__(self) -> int:
        with self._lock:
            self._cache.expire()
            return len(self._cache)
