"""
config/settings.py
──────────────────────────────────────────────────────────────────────────────
Single source of truth for all tuneable parameters.

All values can be overridden via environment variables or a .env file placed
at the project root.  The frozen dataclass ensures settings are never mutated
at runtime.

  HARVEY_URL        → base URL of the Harvey API (without the /api suffix)
  HARVEY_USERNAME   → HTTP Basic user
  HARVEY_PASSWORD   → HTTP Basic password
  HARVEY_CACHE_TTL  → seconds a cached response body stays valid
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root (two levels up from this file)
load_dotenv(Path(__file__).parent.parent.parent / ".env")

CACHE_TTL = 86400  # 24 hours
DEFAULT_LANGUAGE = "sk_SK"
RESULTS_PER_PAGE = 15


def _env(key: str, default: str) -> str:
    return os.getenv(key, default)


def _env_int(key: str, default: int) -> int:
    return int(os.getenv(key, str(default)))


@dataclass(frozen=True)
class Settings:
    """Immutable client settings loaded from environment variables."""

    # ── API endpoint & credentials ─────────────────────────────────────────
    api_url: str = field(default_factory=lambda: _env("HARVEY_URL", ""))
    username: str = field(default_factory=lambda: _env("HARVEY_USERNAME", ""))
    password: str = field(default_factory=lambda: _env("HARVEY_PASSWORD", ""))

    # Sent as Accept-Language on every request
    language: str = field(
        default_factory=lambda: _env("HARVEY_LANGUAGE", DEFAULT_LANGUAGE)
    )

    # ── Caching ────────────────────────────────────────────────────────────
    cache_ttl: int = field(
        default_factory=lambda: _env_int("HARVEY_CACHE_TTL", CACHE_TTL)
    )
    cache_maxsize: int = field(
        default_factory=lambda: _env_int("HARVEY_CACHE_MAXSIZE", 4096)
    )

    # ── Paging ─────────────────────────────────────────────────────────────
    per_page: int = field(
        default_factory=lambda: _env_int("HARVEY_PER_PAGE", RESULTS_PER_PAGE)
    )

    # ── HTTP timeout (seconds) ─────────────────────────────────────────────
    http_timeout: int = field(default_factory=lambda: _env_int("HARVEY_TIMEOUT", 30))


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Returns a cached singleton Settings instance.

    Use this everywhere instead of instantiating Settings() directly —
    it guarantees a single object is shared across the entire process.
    """
    return Settings()
