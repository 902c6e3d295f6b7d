"""
services/lookup.py
──────────────────────────────────────────────────────────────────────────────
Generic lookup engine shared by every resource kind.

Every call has the same shape:
  1. Build the path (and, for searches, the wire query)
  2. Derive the cache key (services/cache_keys.py)
  3. CachePort.get_or_compute → FetcherPort.fetch on a miss
  4. Decode the JSON body and return it untouched

Only raw bodies are cached; decoding happens on every call so callers can
never mutate a cached object.
"""
from __future__ import annotations

import json
import logging
from typing import Any
from urllib.parse import quote

from harvey_client.config.settings import Settings
from harvey_client.domain.exceptions import DecodeError
from harvey_client.domain.models import Pagination, Resource
from harvey_client.domain.schema import PAGE, PER_PAGE, bind, get_schema
from harvey_client.ports.cache_port import CachePort
from harvey_client.ports.fetcher_port import FetcherPort
from harvey_client.services.cache_keys import build_key, drop_empty, identifier_key

logger = logging.getLogger(__name__)


class LookupService:
    """Cached GET / search against /api/<resource>.

    Args:
        fetcher:  Any object satisfying FetcherPort.
        cache:    Any object satisfying CachePort.
        settings: Provides cache TTL and the default page size.
    """

    def __init__(
        self,
        fetcher: FetcherPort,
        cache: CachePort,
        settings: Settings,
    ) -> None:
        self._fetcher = fetcher
        self._cache = cache
        self._ttl = settings.cache_ttl
        self._per_page = settings.per_page

    # ── Public API ─────────────────────────────────────────────────────────

    def get(self, resource: Resource, identifier: Any) -> Any:
        """Fetch a single record: GET /api/<resource>/<identifier>."""
        path = Resource(resource).value
        return self._cached(
            identifier_key(path, identifier),
            f"{path}/{quote(str(identifier), safe='')}",
        )

    def search(self, resource: Resource, *args: Any, **kwargs: Any) -> Any:
        """Run a declared search operation.

        Positional arguments follow the schema declaration order
        (domain/schema.py); keyword arguments may be mixed in.
        """
        path = Resource(resource).value
        query = self.build_query(resource, bind(resource, args, kwargs))
        return self._cached(build_key(f"search-{path}", query), path, query=query)

    def search_with_body(self, resource: Resource, body: dict[str, Any]) -> Any:
        """Cached GET carrying a JSON body (bulk lookups)."""
        path = Resource(resource).value
        return self._cached(build_key(f"search-{path}", body), path, body=body)

    def fetch_uncached(self, resource: Resource, query: dict[str, Any]) -> Any:
        """Issue a request that bypasses the cache entirely."""
        return decode(self._fetcher.fetch(Resource(resource).value, query))

    def build_query(self, resource: Resource, bound: dict[str, Any]) -> dict[str, Any]:
        """Turn bound arguments into the wire query (filters + pagination)."""
        schema = get_schema(resource)
        per_page = bound.get(PER_PAGE)
        pagination = Pagination(
            page=bound.get(PAGE) or 1,
            per_page=self._per_page if per_page is None else per_page,
        )
        filters = {
            schema.wire_name(name): value
            for name, value in bound.items()
            if name not in (PAGE, PER_PAGE)
        }
        query = drop_empty(filters)
        query.update(pagination.to_query())
        return query

    # ── Private helpers ────────────────────────────────────────────────────

    def _cached(
        self,
        key: str,
        path: str,
        query: dict[str, Any] | None = None,
        body: Any = None,
    ) -> Any:
        raw = self._cache.get_or_compute(
            key,
            self._ttl,
            lambda: self._fetcher.fetch(path, query, body),
        )
        return decode(raw)


def decode(raw: str) -> Any:
    """Decode a JSON response body.

    Raises:
        DecodeError: If ``raw`` is not valid JSON.
    """
    try:
        return json.loads(raw)
    except (TypeError, ValueError) as exc:
        raise DecodeError(f"Malformed JSON from Harvey API: {str(raw)[:200]!r}") from exc


def records_of(payload: Any) -> list[Any]:
    """Return the list of records in a decoded search response.

    Accepts a plain JSON list or a collection object ("hydra:member" or
    "items"); anything else yields an empty list.
    """
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict):
        for member_key in ("hydra:member", "items"):
            if isinstance(payload.get(member_key), list):
                return payload[member_key]
    return []
