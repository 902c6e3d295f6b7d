"""
services/client.py
──────────────────────────────────────────────────────────────────────────────
HarveyClient — the typed public façade.

One get_<resource>() / search_<resource>() pair per resource kind.  Each
search passes its arguments positionally in the order declared in
domain/schema.py; LookupService maps them back to names, builds the wire
query and the cache key.

Common search conventions:
  page      1-based page number (default 1)
  per_page  page size (default HARVEY_PER_PAGE = 15); 0 disables pagination
  None / "" / [] filters are not sent and do not affect the cache key

Obtain a wired instance from services/container.get_client(), or construct
one directly with your own FetcherPort / CachePort.
"""
from __future__ import annotations

import logging
from typing import Any

from harvey_client.config.settings import Settings
from harvey_client.domain.models import FulltextQuery, Resource
from harvey_client.ports.cache_port import CachePort
from harvey_client.ports.fetcher_port import FetcherPort
from harvey_client.services.fulltext import FulltextCompositor
from harvey_client.services.lookup import LookupService
from harvey_client.services.revisions import RevisionResolver

logger = logging.getLogger(__name__)


class HarveyClient:
    """Cached client for the Harvey classification API.

    Args:
        fetcher:  Any object satisfying FetcherPort.
        cache:    Any object satisfying CachePort.
        settings: Shared client settings.
    """

    def __init__(
        self,
        fetcher: FetcherPort,
        cache: CachePort,
        settings: Settings,
    ) -> None:
        self._lookup = LookupService(fetcher=fetcher, cache=cache, settings=settings)
        self._revisions = RevisionResolver(self._lookup)
        self._fulltext = FulltextCompositor(self._lookup, self._revisions)

    # ── Generic access (used by the CLI) ───────────────────────────────────

    def get_resource(self, resource: Resource | str, identifier: Any) -> Any:
        return self._lookup.get(Resource(resource), identifier)

    def search_resource(self, resource: Resource | str, **filters: Any) -> Any:
        resource = Resource(resource)
        if resource == Resource.ISCO:
            return self.search_isco(**filters)
        return self._lookup.search(resource, **filters)

    # ── ISCO ───────────────────────────────────────────────────────────────

    def get_isco(self, code: str) -> Any:
        """Get an ISCO occupation by its code."""
        return self._lookup.get(Resource.ISCO, code)

    def search_isco(
        self,
        title: str | None = None,
        work_area: int | None = None,
        code: str | None = None,
        revisions: list[int] | None = None,
        alternative_title: str | None = None,
        level: int | None = None,
        page: int = 1,
        per_page: int | None = None,
    ) -> Any:
        """Search ISCO occupations.

        ``revisions=None`` scopes the search to the newest ISCO revision
        (one extra uncached request); pass ``[]`` to search all revisions.
        """
        if revisions is None:
            revisions = self._revisions.default_revisions()
        return self._lookup.search(
            Resource.ISCO,
            title, work_area, code, revisions, alternative_title, level, page, per_page,
        )

    def fulltext_isco(self, query: str, sort_by: str = "title") -> list[Any]:
        """Search ISCO by code (1–7 digits) or by title / alternative title.

        Title matches from both searches are merged, deduplicated and sorted
        ascending by ``sort_by``.
        """
        return self._fulltext.search(FulltextQuery(query=query, sort_by=sort_by))

    def get_isco_revision(self, id: int) -> Any:
        return self._lookup.get(Resource.ISCO_REVISION, id)

    def search_isco_revision(self, page: int = 1, per_page: int | None = None) -> Any:
        return self._lookup.search(Resource.ISCO_REVISION, page, per_page)

    def get_isco_work_area(self, id: int) -> Any:
        return self._lookup.get(Resource.ISCO_WORK_AREA, id)

    def search_isco_work_area(
        self,
        title: str | None = None,
        page: int = 1,
        per_page: int | None = None,
    ) -> Any:
        return self._lookup.search(Resource.ISCO_WORK_AREA, title, page, per_page)

    def search_isco_esco(self, codes: list[str]) -> Any:
        """Bulk-map ISCO codes to ESCO occupations (codes sent as a JSON body)."""
        return self._lookup.search_with_body(Resource.ISCO_ESCO, {"codes": list(codes)})

    # ── ESCO / positions ───────────────────────────────────────────────────

    def get_esco(self, id: int) -> Any:
        return self._lookup.get(Resource.ESCO, id)

    def search_esco(
        self,
        title: str | None = None,
        isco_code: str | None = None,
        page: int = 1,
        per_page: int | None = None,
    ) -> Any:
        return self._lookup.search(Resource.ESCO, title, isco_code, page, per_page)

    def get_position(self, id: int) -> Any:
        """Get a position (ISTP) by id."""
        return self._lookup.get(Resource.POSITION, id)

    def search_position(
        self,
        title: str | None = None,
        isco_code: str | None = None,
        page: int = 1,
        per_page: int | None = None,
    ) -> Any:
        return self._lookup.search(Resource.POSITION, title, isco_code, page, per_page)

    # ── Schools & study fields ─────────────────────────────────────────────

    def get_school(self, id: int) -> Any:
        return self._lookup.get(Resource.SCHOOL, id)

    def search_school(
        self,
        name: str | None = None,
        eduid: str | None = None,
        kodfak: str | None = None,
        page: int = 1,
        per_page: int | None = None,
    ) -> Any:
        return self._lookup.search(Resource.SCHOOL, name, eduid, kodfak, page, per_page)

    def get_school_type(self, id: int) -> Any:
        return self._lookup.get(Resource.SCHOOL_TYPE, id)

    def search_school_type(self, page: int = 1, per_page: int | None = None) -> Any:
        return self._lookup.search(Resource.SCHOOL_TYPE, page, per_page)

    def get_kov(self, id: int) -> Any:
        return self._lookup.get(Resource.KOV, id)

    def search_kov(
        self,
        name: str | None = None,
        code: str | None = None,
        page: int = 1,
        per_page: int | None = None,
    ) -> Any:
        return self._lookup.search(Resource.KOV, name, code, page, per_page)

    def get_kov_school(self, id: int) -> Any:
        return self._lookup.get(Resource.KOV_SCHOOL, id)

    def search_kov_school(
        self,
        school: int | None = None,
        kov: int | None = None,
        page: int = 1,
        per_page: int | None = None,
    ) -> Any:
        return self._lookup.search(Resource.KOV_SCHOOL, school, kov, page, per_page)

    # ── Education & economic classifications ───────────────────────────────

    def get_isced(self, id: int) -> Any:
        return self._lookup.get(Resource.ISCED, id)

    def search_isced(
        self,
        name: str | None = None,
        code: str | None = None,
        page: int = 1,
        per_page: int | None = None,
    ) -> Any:
        return self._lookup.search(Resource.ISCED, name, code, page, per_page)

    def get_education_level(self, id: int) -> Any:
        return self._lookup.get(Resource.EDUCATION_LEVEL, id)

    def search_education_level(
        self,
        title: str | None = None,
        code: str | None = None,
        page: int = 1,
        per_page: int | None = None,
    ) -> Any:
        return self._lookup.search(Resource.EDUCATION_LEVEL, title, code, page, per_page)

    def get_sknace(self, id: int) -> Any:
        return self._lookup.get(Resource.SKNACE, id)

    def search_sknace(
        self,
        name: str | None = None,
        code: str | None = None,
        page: int = 1,
        per_page: int | None = None,
    ) -> Any:
        return self._lookup.search(Resource.SKNACE, name, code, page, per_page)

    def get_organization(self, id: int) -> Any:
        return self._lookup.get(Resource.ORGANIZATION, id)

    def search_organization(
        self,
        name: str | None = None,
        ico: str | None = None,
        page: int = 1,
        per_page: int | None = None,
    ) -> Any:
        return self._lookup.search(Resource.ORGANIZATION, name, ico, page, per_page)

    # ── Territorial units ──────────────────────────────────────────────────

    def get_region(self, id: int) -> Any:
        return self._lookup.get(Resource.REGION, id)

    def search_region(
        self,
        title: str | None = None,
        code: str | None = None,
        page: int = 1,
        per_page: int | None = None,
    ) -> Any:
        return self._lookup.search(Resource.REGION, title, code, page, per_page)

    def get_district(self, id: int) -> Any:
        return self._lookup.get(Resource.DISTRICT, id)

    def search_district(
        self,
        title: str | None = None,
        code: str | None = None,
        region: int | None = None,
        page: int = 1,
        per_page: int | None = None,
    ) -> Any:
        return self._lookup.search(Resource.DISTRICT, title, code, region, page, per_page)

    def get_municipality(self, id: int) -> Any:
        return self._lookup.get(Resource.MUNICIPALITY, id)

    def search_municipality(
        self,
        title: str | None = None,
        code: str | None = None,
        district: int | None = None,
        page: int = 1,
        per_page: int | None = None,
    ) -> Any:
        return self._lookup.search(
            Resource.MUNICIPALITY, title, code, district, page, per_page
        )
