"""
services/container.py
──────────────────────────────────────────────────────────────────────────────
Dependency Injection container.

THIS IS THE ONLY FILE THAT NAMES CONCRETE ADAPTER CLASSES.

Replace the cache backend:
  - cache = MemoryCacheAdapter(maxsize=settings.cache_maxsize)
  + cache = RedisCacheAdapter(settings)

Thread safety:
  @lru_cache(maxsize=1) makes get_client() return the same instance across
  calls, so every caller in the process shares one session and one cache.
"""
from __future__ import annotations

import logging
from functools import lru_cache

from harvey_client.adapters.http_fetcher import HttpFetcherAdapter
from harvey_client.adapters.memory_cache import MemoryCacheAdapter
from harvey_client.config.settings import Settings, get_settings
from harvey_client.services.client import HarveyClient

logger = logging.getLogger(__name__)


def build_client(settings: Settings) -> HarveyClient:
    """Wire a HarveyClient from explicit settings.

    Raises:
        ConfigurationError: If HARVEY_URL is empty.
    """
    fetcher = HttpFetcherAdapter(settings)                          # FetcherPort
    cache = MemoryCacheAdapter(maxsize=settings.cache_maxsize)      # CachePort

    logger.info(
        "HarveyClient ready | api_url=%s language=%s cache_ttl=%ds",
        settings.api_url,
        settings.language,
        settings.cache_ttl,
    )
    return HarveyClient(fetcher=fetcher, cache=cache, settings=settings)


@lru_cache(maxsize=1)
def get_client() -> HarveyClient:
    """Build and return the process-wide HarveyClient singleton.

    Configuration is read from ``HARVEY_*`` environment variables (see
    config/settings.py).  The ``@lru_cache`` ensures this runs only once
    per process lifetime.
    """
    return build_client(get_settings())
