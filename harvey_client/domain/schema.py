"""
domain/schema.py
──────────────────────────────────────────────────────────────────────────────
Statically declared, ordered parameter schemas for every search operation.

Each search_<resource>() call on the client passes its arguments positionally
in declaration order.  The schema is what turns that positional tuple back
into a name → value map:

  resolve(Resource.SCHOOL, 2)  →  ("name", "eduid")

Parameter names are the Python-side names; ``wire_name`` is the literal key
the API expects in the query string (nested filters use the API's dotted
syntax, e.g. work_area → "workArea.id").  Cache keys are derived from wire
names, so two spellings of the same filter share one cache entry.

All search schemas end with the two pagination parameters (page, per_page).
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from harvey_client.domain.exceptions import ConfigurationError
from harvey_client.domain.models import Resource

PAGE = "page"
PER_PAGE = "per_page"


@dataclass(frozen=True)
class SearchParam:
    """A single declared filter of a search operation."""

    name: str
    query_key: str | None = None

    @property
    def wire_name(self) -> str:
        return self.query_key or self.name


@dataclass(frozen=True)
class SearchSchema:
    """Ordered filters of one search operation (pagination appended)."""

    resource: Resource
    filters: tuple[SearchParam, ...] = ()

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(p.name for p in self.filters) + (PAGE, PER_PAGE)

    def wire_name(self, name: str) -> str:
        for param in self.filters:
            if param.name == name:
                return param.wire_name
        raise ConfigurationError(
            f"Search on '{self.resource.value}' declares no filter named '{name}'"
        )


def _schema(resource: Resource, *filters: SearchParam | str) -> SearchSchema:
    return SearchSchema(
        resource=resource,
        filters=tuple(f if isinstance(f, SearchParam) else SearchParam(f) for f in filters),
    )


SEARCH_SCHEMAS: dict[Resource, SearchSchema] = {
    s.resource: s
    for s in (
        _schema(
            Resource.ISCO,
            "title",
            SearchParam("work_area", "workArea.id"),
            "code",
            SearchParam("revisions", "revision.id[]"),
            SearchParam("alternative_title", "alternativeTitles.title"),
            "level",
        ),
        _schema(Resource.ISCO_REVISION),
        _schema(Resource.ISCO_WORK_AREA, "title"),
        _schema(Resource.ESCO, "title", SearchParam("isco_code", "isco.code")),
        _schema(Resource.POSITION, "title", SearchParam("isco_code", "isco.code")),
        _schema(Resource.SCHOOL, "name", "eduid", "kodfak"),
        _schema(Resource.SCHOOL_TYPE),
        _schema(Resource.KOV, "name", "code"),
        _schema(
            Resource.KOV_SCHOOL,
            SearchParam("school", "school.id"),
            SearchParam("kov", "kov.id"),
        ),
        _schema(Resource.ISCED, "name", "code"),
        _schema(Resource.SKNACE, "name", "code"),
        _schema(Resource.REGION, "title", "code"),
        _schema(Resource.DISTRICT, "title", "code", SearchParam("region", "region.id")),
        _schema(
            Resource.MUNICIPALITY,
            "title",
            "code",
            SearchParam("district", "district.id"),
        ),
        _schema(Resource.EDUCATION_LEVEL, "title", "code"),
        _schema(Resource.ORGANIZATION, "name", "ico"),
    )
}


def get_schema(resource: Resource) -> SearchSchema:
    """Return the declared search schema for a resource.

    Raises:
        ConfigurationError: If the resource declares no search operation.
    """
    try:
        return SEARCH_SCHEMAS[Resource(resource)]
    except (KeyError, ValueError) as exc:
        raise ConfigurationError(
            f"No search schema declared for resource {resource!r}"
        ) from exc


def resolve(resource: Resource, supplied_count: int) -> tuple[str, ...]:
    """Return the names of the first ``supplied_count`` declared parameters.

    Args:
        resource:       Resource whose search operation is being called.
        supplied_count: Number of positional arguments actually passed.

    Returns:
        Parameter names in declaration order.

    Raises:
        ConfigurationError: Unknown resource, or more arguments than declared.
    """
    names = get_schema(resource).names
    if supplied_count < 0 or supplied_count > len(names):
        raise ConfigurationError(
            f"search on '{Resource(resource).value}' accepts at most {len(names)} "
            f"arguments, got {supplied_count}"
        )
    return names[:supplied_count]


def bind(
    resource: Resource,
    args: tuple[Any, ...] = (),
    kwargs: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Map positional and keyword arguments onto declared parameter names.

    The result keeps declaration order and contains only supplied parameters.

    Raises:
        ConfigurationError: On unknown or duplicated parameter names.
    """
    kwargs = kwargs or {}
    declared = get_schema(resource).names
    bound = dict(zip(resolve(resource, len(args)), args))

    for name, value in kwargs.items():
        if name not in declared:
            raise ConfigurationError(
                f"search on '{Resource(resource).value}' has no parameter '{name}'"
            )
        if name in bound:
            raise ConfigurationError(
                f"search on '{Resource(resource).value}' got '{name}' twice"
            )
        bound[name] = value

    return {name: bound[name] for name in declared if name in bound}
