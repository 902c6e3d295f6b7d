"""
domain/models.py
──────────────────────────────────────────────────────────────────────────────
Pure domain objects — no imports from adapters or ports.

Response payloads (occupation records, schools…) are NOT modelled here: the
API shape is owned by the server and passed through to callers untouched.
What is modelled is the client-side vocabulary:
  • Resource     — the resource kinds served under /api/<resource>
  • Pagination   — page / per_page and their wire representation
  • FulltextQuery — validated input of the fulltext compositor
"""
from __future__ import annotations

import re
from enum import Enum

from pydantic import BaseModel, Field, field_validator

from harvey_client.domain.formats import ISCO_CODE_REGEX


# ── Enums ──────────────────────────────────────────────────────────────────────

class Resource(str, Enum):
    """Resource kinds exposed by the Harvey API; the value is the URL path."""
    ISCO            = "isco"
    ISCO_REVISION   = "isco-revision"
    ISCO_WORK_AREA  = "isco-work-area"
    ISCO_ESCO       = "isco-esco"
    ESCO            = "esco"
    POSITION        = "position"
    SCHOOL          = "school"
    SCHOOL_TYPE     = "school-type"
    KOV             = "kov"
    KOV_SCHOOL      = "kov-school"
    ISCED           = "isced"
    SKNACE          = "sknace"
    REGION          = "region"
    DISTRICT        = "district"
    MUNICIPALITY    = "municipality"
    EDUCATION_LEVEL = "education-level"
    ORGANIZATION    = "organization"


# ── Paging ─────────────────────────────────────────────────────────────────────

class Pagination(BaseModel):
    """Page selection for a search call.

    ``per_page == 0`` disables server-side pagination altogether.
    """

    page: int = Field(1, ge=1)
    per_page: int = Field(15, ge=0)

    @property
    def disabled(self) -> bool:
        return self.per_page == 0

    def to_query(self) -> dict:
        """Wire representation merged into the outgoing query string."""
        if self.disabled:
            return {"pagination": False}
        return {"page": self.page, "perPage": self.per_page}


# ── Fulltext ───────────────────────────────────────────────────────────────────

class FulltextQuery(BaseModel):
    """Validated input to FulltextCompositor.search()."""

    query: str = ""
    sort_by: str = Field("title", min_length=1)

    @field_validator("query")
    @classmethod
    def strip_query(cls, v: str) -> str:
        return v.strip()

    @property
    def is_empty(self) -> bool:
        return not self.query

    @property
    def is_code(self) -> bool:
        """True when the query looks like an ISCO code (1–7 digits)."""
        return re.match(ISCO_CODE_REGEX, self.query) is not None
