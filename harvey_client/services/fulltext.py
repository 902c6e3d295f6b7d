"""
services/fulltext.py
──────────────────────────────────────────────────────────────────────────────
Fulltext ISCO search: one free-text box over codes and titles.

Architecture:
  • FulltextCompositor.search() decides between two paths:
      - exact path:  the query is an ISCO code (1–7 digits) → one search by
                     code, returned as the API ordered it
      - merge path:  two searches on the same revision, by title and by
                     alternative title, each effectively unpaginated
  • merge_records() is a pure Python function — no I/O, easily unit-tested.

Records are deduplicated by full-record identity (canonical JSON), not by id:
a record seen through both searches collapses only when both copies are
identical.
"""
from __future__ import annotations

import logging
from typing import Any, Iterable

from harvey_client.domain.models import FulltextQuery, Resource
from harvey_client.services.cache_keys import canonical_json
from harvey_client.services.lookup import LookupService, records_of
from harvey_client.services.revisions import RevisionResolver

logger = logging.getLogger(__name__)

# Page size used to pull "everything" in one request
UNPAGINATED_PER_PAGE = 10000


class FulltextCompositor:
    """Combines ISCO searches into a single fulltext result list.

    Args:
        lookup:    Shared LookupService.
        revisions: Resolves the default revision filter.
    """

    def __init__(self, lookup: LookupService, revisions: RevisionResolver) -> None:
        self._lookup = lookup
        self._revisions = revisions

    # ── Public API ─────────────────────────────────────────────────────────

    def search(self, request: FulltextQuery) -> list[Any]:
        """Run the fulltext search.

        Args:
            request: Validated FulltextQuery (query, sort_by).

        Returns:
            List of ISCO records; empty when nothing matches.
        """
        if request.is_empty:
            return []

        revisions = self._revisions.default_revisions()

        if request.is_code:
            logger.info("fulltext | exact code=%s", request.query)
            return records_of(
                self._lookup.search(Resource.ISCO, code=request.query, revisions=revisions)
            )

        logger.info("fulltext | query=%r sort_by=%s", request.query[:80], request.sort_by)
        by_title = self._lookup.search(
            Resource.ISCO,
            title=request.query,
            revisions=revisions,
            page=1,
            per_page=UNPAGINATED_PER_PAGE,
        )
        by_alternative_title = self._lookup.search(
            Resource.ISCO,
            alternative_title=request.query,
            revisions=revisions,
            page=1,
            per_page=UNPAGINATED_PER_PAGE,
        )
        results = merge_records(
            records_of(by_title),
            records_of(by_alternative_title),
            sort_by=request.sort_by,
        )
        logger.info("fulltext complete | results=%d", len(results))
        return results


# ── Pure function: merge, dedupe, sort ─────────────────────────────────────

def merge_records(*result_lists: Iterable[Any], sort_by: str) -> list[Any]:
    """Concatenate result lists, drop duplicates, sort by a record field.

    Duplicates are records whose canonical JSON is identical; the first
    occurrence is kept.  The sort is stable, so records with equal sort
    values keep their merged order.  Records without the field (or with a
    null value) go last.  Mixed value types never fail: numbers sort
    before strings, and other values (lists, objects) follow by their JSON text.

    Examples:
        >>> merge_records([{"title": "b"}, {"title": "a"}], [{"title": "b"}],
        ...               sort_by="title")
        [{'title': 'a'}, {'title': 'b'}]
    """
    seen: set[str] = set()
    merged: list[Any] = []
    for records in result_lists:
        for record in records:
            identity = canonical_json(record)
            if identity in seen:
                continue
            seen.add(identity)
            merged.append(record)

    return sorted(merged, key=lambda r: _sort_value(r, sort_by))


def _sort_value(record: Any, field: str) -> tuple[bool, int, Any]:
    # Numbers, then strings, then anything else by its canonical JSON; a
    # value is only ever compared with values of its own group.
    value = record.get(field) if isinstance(record, dict) else None
    if value is None:
        return (True, 0, "")
    if isinstance(value, (int, float)):
        return (False, 0, value)
    if isinstance(value, str):
        return (False, 1, value)
    return (False, 2, canonical_json(value))
