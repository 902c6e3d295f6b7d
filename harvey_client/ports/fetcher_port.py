"""
ports/fetcher_port.py
──────────────────────────────────────────────────────────────────────────────
Abstract interface for the HTTP transport.

Current implementation: HttpFetcherAdapter (requests.Session)
Tests use an in-memory recording fetcher (tests/conftest.py).
"""
from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class FetcherPort(Protocol):
    """Contract for issuing GET requests against /api/<path>."""

    def fetch(
        self,
        path: str,
        query: dict[str, Any] | None = None,
        body: Any = None,
    ) -> str:
        """Issue one GET request and return the raw response body.

        Args:
            path:  Resource path relative to /api/, e.g. "isco/7233011".
            query: Query-string parameters; list values repeat the key.
            body:  Optional JSON body sent with the GET (bulk lookups only).

        Returns:
            Raw response body text.

        Raises:
            TransportError:  On connection failure or timeout.
            HTTPStatusError: On any non-2xx response.
        """
        ...
