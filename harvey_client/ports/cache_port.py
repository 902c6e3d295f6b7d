"""
ports/cache_port.py
──────────────────────────────────────────────────────────────────────────────
Abstract interface for the response-body cache.

The client stores raw JSON bodies (strings), never decoded objects, so any
key/value store can back it.

Current implementation: MemoryCacheAdapter (cachetools TLRUCache)
To swap: write a new adapter (e.g. RedisCacheAdapter) implementing this
Protocol and change ONE line in services/container.py.
"""
from __future__ import annotations

from typing import Callable, Protocol, runtime_checkable


@runtime_checkable
class CachePort(Protocol):
    """Contract for a get-or-compute cache with per-entry expiry."""

    def get_or_compute(
        self,
        key: str,
        ttl_seconds: int,
        compute: Callable[[], str],
    ) -> str:
        """Return the cached body for ``key``, computing it on a miss.

        On a miss ``compute`` is invoked once for this call and its result
        stored with expiry ``now + ttl_seconds``.  There is no single-flight
        guarantee: concurrent misses for the same key may each compute.

        Args:
            key:         Cache key (see services/cache_keys.py).
            ttl_seconds: Lifetime of a freshly stored entry.
            compute:     Zero-argument callable producing the body.

        Returns:
            Raw response body.

        Raises:
            Whatever ``compute`` raises; nothing is stored in that case.
        """
        ...
