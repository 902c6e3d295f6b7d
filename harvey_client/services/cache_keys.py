"""
services/cache_keys.py
──────────────────────────────────────────────────────────────────────────────
Cache-key derivation.  Pure functions — no I/O, easily unit-tested.

Search keys:
  1. Bound arguments are renamed to their wire names (domain/schema.py)
  2. Empty values (None, "", [], ()) are dropped — the same rule decides what
     is sent on the wire, so omitting an argument and passing its empty
     default always produce the same key
  3. The map is serialised as canonical JSON (sorted keys, compact) and
     hashed with a 64-bit BLAKE2b digest → "<prefix>-<16 hex chars>"

The digest is used for compactness, not secrecy.  A collision would serve
another query's cached body; for a read-only lookup API that risk is
accepted.
"""
from __future__ import annotations

import hashlib
import json
import re
from typing import Any

_SAFE_IDENTIFIER = re.compile(r"^[A-Za-z0-9_.]+$")


def is_empty(value: Any) -> bool:
    """True for values that mean "no filter": None, "", [] and ()."""
    return value is None or (isinstance(value, (str, list, tuple)) and len(value) == 0)


def drop_empty(query: dict[str, Any]) -> dict[str, Any]:
    """Return ``query`` without entries whose value is empty.

    False and 0 are meaningful filter values and are kept.
    """
    return {k: v for k, v in query.items() if not is_empty(v)}


def canonical_json(value: Any) -> str:
    """Deterministic JSON text: sorted keys, no whitespace, UTF-8 kept."""
    return json.dumps(value, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def digest(text: str) -> str:
    """64-bit BLAKE2b digest of ``text`` as 16 hex characters."""
    return hashlib.blake2b(text.encode("utf-8"), digest_size=8).hexdigest()


def build_key(prefix: str, query: dict[str, Any]) -> str:
    """Derive the cache key of a search call.

    Args:
        prefix: Key namespace, e.g. "search-isco".
        query:  Wire-named query map (pagination included).

    Returns:
        "<prefix>-<digest>"

    Examples:
        >>> build_key("search-kov", {"name": "x", "code": None}) == \\
        ...     build_key("search-kov", {"name": "x"})
        True
    """
    return f"{prefix}-{digest(canonical_json(drop_empty(query)))}"


def identifier_key(resource: str, identifier: Any) -> str:
    """Derive the cache key of a single-record lookup.

    Plain identifiers (digits, letters, "_" and ".") are used verbatim so keys
    stay readable; anything else is hashed to keep keys backend-safe.
    """
    text = str(identifier)
    if _SAFE_IDENTIFIER.match(text):
        return f"{resource}-{text}"
    return f"{resource}-{digest(text)}"
