"""
services/revisions.py
──────────────────────────────────────────────────────────────────────────────
Default ISCO revision filter.

ISCO codes are versioned by revision.  A search that does not name its
revisions is scoped to the newest one, found with an extra uncached round
trip:

  GET /api/isco-revision?order[id]=desc&page=1&perPage=1

Not caching it keeps a freshly published revision visible immediately; the
main search is still cached, and searches against different revisions get
different keys once the id is resolved.
"""
from __future__ import annotations

import logging

from harvey_client.domain.models import Resource
from harvey_client.services.lookup import LookupService, records_of

logger = logging.getLogger(__name__)

_LATEST_REVISION_QUERY = {"order[id]": "desc", "page": 1, "perPage": 1}


class RevisionResolver:
    """Resolves the default value of the ISCO ``revisions`` filter."""

    def __init__(self, lookup: LookupService) -> None:
        self._lookup = lookup

    def default_revisions(self) -> list[int]:
        """Return ``[<highest revision id>]``, or ``[]`` when none exists."""
        payload = self._lookup.fetch_uncached(Resource.ISCO_REVISION, _LATEST_REVISION_QUERY)
        records = records_of(payload)
        latest = records[0].get("id") if records and isinstance(records[0], dict) else None
        if latest is None:
            logger.warning("No ISCO revision found; searching without a revision filter")
            return []
        logger.debug("Latest ISCO revision | id=%s", latest)
        return [latest]
