"""
domain/exceptions.py
──────────────────────────────────────────────────────────────────────────────
Custom exception hierarchy.

All exceptions are rooted at HarveyError so callers can catch broadly
(except HarveyError) or narrowly (except HTTPStatusError).

Errors raised by the injected cache backend are NOT wrapped; they reach the
caller unchanged.
"""
from __future__ import annotations


class HarveyError(Exception):
    """Base exception for all client errors."""


class ConfigurationError(HarveyError):
    """Raised when configuration or a declared search schema is missing or invalid.

    This signals a programming defect, not a runtime condition.
    """


class TransportError(HarveyError):
    """Raised when the HTTP round trip fails (connection, timeout…)."""


class HTTPStatusError(TransportError):
    """Raised when the API answers with a non-2xx status code."""

    def __init__(self, status_code: int, url: str, body: str = "") -> None:
        super().__init__(f"Harvey API HTTP {status_code} for {url}: {body[:300]}")
        self.status_code = status_code
        self.url = url
        self.body = body


class DecodeError(HarveyError):
    """Raised when a response body is not valid JSON."""
