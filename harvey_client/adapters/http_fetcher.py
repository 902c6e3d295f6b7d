"""
adapters/http_fetcher.py
──────────────────────────────────────────────────────────────────────────────
Implements FetcherPort using a requests.Session.

Key behaviour:
  - One Session per adapter, configured once with HTTP Basic credentials and
    the fixed Accept / Content-Type / Accept-Language headers
  - Every call is a GET on {HARVEY_URL}/api/<path>
  - Booleans in the query string are sent as "true" / "false"; list values
    repeat the key (requests' default encoding)
  - An optional JSON body is sent with the GET (bulk ISCO→ESCO lookup)
  - No retries: transport failures and non-2xx answers raise immediately

Required env vars:
  HARVEY_URL, HARVEY_USERNAME, HARVEY_PASSWORD
"""
from __future__ import annotations

import json
import logging
from typing import Any

import requests

from harvey_client.config.settings import Settings
from harvey_client.domain.exceptions import (
    ConfigurationError,
    HTTPStatusError,
    TransportError,
)

logger = logging.getLogger(__name__)


class HttpFetcherAdapter:
    """HTTP transport for the Harvey API.

    Injected into LookupService via services/container.py.

    Args:
        settings: Provides base URL, credentials, language and timeout.
        session:  Optional pre-built session (tests pass a mock).
    """

    def __init__(
        self,
        settings: Settings,
        session: requests.Session | None = None,
    ) -> None:
        if not settings.api_url:
            raise ConfigurationError(
                "HARVEY_URL is not set. Add it to your .env file or environment."
            )
        self._base_url = settings.api_url.rstrip("/") + "/api/"
        self._timeout = settings.http_timeout
        self._session = session or requests.Session()
        self._session.auth = (settings.username, settings.password)
        self._session.headers.update(
            {
                "Accept": "application/json",
                "Content-Type": "application/json",
                "Accept-Language": settings.language,
            }
        )
        logger.debug(
            "HttpFetcherAdapter ready | base_url=%s language=%s",
            self._base_url,
            settings.language,
        )

    # ── FetcherPort implementation ─────────────────────────────────────────

    def fetch(
        self,
        path: str,
        query: dict[str, Any] | None = None,
        body: Any = None,
    ) -> str:
        url = self._base_url + path.lstrip("/")
        logger.info("GET %s | query=%s body=%s", url, query, body is not None)

        try:
            resp = self._session.get(
                url,
                params=_encode_query(query),
                data=json.dumps(body) if body is not None else None,
                timeout=self._timeout,
            )
        except requests.RequestException as exc:
            raise TransportError(f"Harvey API request to {url} failed: {exc}") from exc

        if not 200 <= resp.status_code < 300:
            raise HTTPStatusError(resp.status_code, url, resp.text)

        return resp.text

    def close(self) -> None:
        """Release the underlying connection pool."""
        self._session.close()


# ── Helpers ────────────────────────────────────────────────────────────────

def _encode_value(value: Any) -> Any:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return [_encode_value(v) for v in value]
    return value


def _encode_query(query: dict[str, Any] | None) -> dict[str, Any] | None:
    if not query:
        return None
    return {k: _encode_value(v) for k, v in query.items()}
