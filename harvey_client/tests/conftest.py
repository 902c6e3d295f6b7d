"""
tests/conftest.py
──────────────────────────────────────────────────────────────────────────────
Shared pytest fixtures and mock adapter implementations.

Mock adapters implement the Port Protocols via structural subtyping — they do
NOT inherit from any base class.  pytest uses them to test service logic
without any network access.

Fixture hierarchy:
  fetcher  → RecordingFetcher (implements FetcherPort, canned JSON per path)
  timer    → FakeTimer (manually advanced clock)
  cache    → MemoryCacheAdapter driven by the fake timer
  lookup   → LookupService wired with fetcher + cache
  client   → HarveyClient wired with fetcher + cache
"""
from __future__ import annotations

import json
from typing import Any

import pytest

from harvey_client.adapters.memory_cache import MemoryCacheAdapter
from harvey_client.config.settings import Settings
from harvey_client.services.client import HarveyClient
from harvey_client.services.lookup import LookupService


# ── Settings fixture ───────────────────────────────────────────────────────

@pytest.fixture(scope="session")
def settings() -> Settings:
    """Return a Settings instance with sane test defaults."""
    return Settings(
        api_url="https://harvey.example.test",
        username="user",
        password="secret",
        language="sk_SK",
        cache_ttl=60,
        cache_maxsize=128,
        per_page=15,
        http_timeout=5,
    )


# ── Canned API data ────────────────────────────────────────────────────────

_ROUTES: dict[str, Any] = {
    "isco-revision": [{"id": 3, "title": "ISCO-08 rev. 3"}],
    "isco/7233011": {"id": 101, "code": "7233011", "title": "Agromechatronik"},
    "school/42": {"id": 42, "name": "Stredná odborná škola"},
}


# ── Mock adapters ──────────────────────────────────────────────────────────

class RecordingFetcher:
    """In-memory fake transport.

    Returns canned JSON per path and records every call as
    ``(path, query, body)`` so tests can count upstream round trips.
    """

    def __init__(self, routes: dict[str, Any] | None = None) -> None:
        self.routes: dict[str, Any] = dict(_ROUTES if routes is None else routes)
        self.calls: list[tuple[str, dict | None, Any]] = []

    def fetch(self, path: str, query: dict | None = None, body: Any = None) -> str:
        self.calls.append((path, query, body))
        payload = self.routes.get(path, [])
        if callable(payload):
            payload = payload(query, body)
        if isinstance(payload, Exception):
            raise payload
        return payload if isinstance(payload, str) else json.dumps(payload)

    def calls_to(self, path: str) -> list[tuple[str, dict | None, Any]]:
        return [c for c in self.calls if c[0] == path]


class FakeTimer:
    """Monotonic clock that only moves when told to."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


# ── pytest fixtures ────────────────────────────────────────────────────────

@pytest.fixture
def fetcher():
    return RecordingFetcher()


@pytest.fixture
def timer():
    return FakeTimer()


@pytest.fixture
def cache(timer):
    return MemoryCacheAdapter(maxsize=128, timer=timer)


@pytest.fixture
def lookup(fetcher, cache, settings):
    return LookupService(fetcher=fetcher, cache=cache, settings=settings)


@pytest.fixture
def client(fetcher, cache, settings):
    return HarveyClient(fetcher=fetcher, cache=cache, settings=settings)
