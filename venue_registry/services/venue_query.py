"""
Venue list query builder

Turns raw, optional query-string parameters into an immutable query
description. The page query and the total-count query are both built from
the same predicate tuple.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Mapping, Optional, Tuple

from sqlalchemy import ColumnElement

from venue_registry.config import settings
from venue_registry.core.exceptions import ValidationError
from venue_registry.models.venue import CAPACITY_MAX, Venue


class FilterOperator(str, Enum):
    CONTAINS = "contains"
    GTE = "gte"
    LTE = "lte"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


# Text columns accepting a case-insensitive substring filter
TEXT_FILTERS = ("name", "city", "state", "country")

# Row offsets are bound as signed 64-bit integers
MAX_OFFSET = 2 ** 63 - 1

_INTEGER = re.compile(r"-?[0-9]+")

SORTABLE_FIELDS = frozenset({
    "id",
    "name",
    "address",
    "city",
    "state",
    "country",
    "zip_code",
    "capacity",
    "website",
    "phone",
    "email",
    "created_at",
    "updated_at",
})


@dataclass(frozen=True)
class Predicate:
    """A single filter condition on a venue column"""
    field: str
    operator: FilterOperator
    value: Any


@dataclass(frozen=True)
class VenueCountQuery:
    predicates: Tuple[Predicate, ...] = ()


@dataclass(frozen=True)
class VenueQuery:
    predicates: Tuple[Predicate, ...] = ()
    sort_by: str = "name"
    sort_order: SortOrder = SortOrder.ASC
    page: int = 1
    limit: int = 20

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    def count_query(self) -> VenueCountQuery:
        return VenueCountQuery(predicates=self.predicates)


def _clean(value: Any) -> Optional[str]:
    """Empty and whitespace-only values count as absent"""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _parse_int(name: str, raw: Optional[str], minimum: int, maximum: int) -> Optional[int]:
    if raw is None:
        return None
    if not _INTEGER.fullmatch(raw):
        raise ValidationError(f"{name} must be an integer", field=name)
    try:
        value = int(raw)
    except ValueError:
        raise ValidationError(f"{name} must be an integer", field=name)
    if value < minimum:
        raise ValidationError(f"{name} must be greater than or equal to {minimum}", field=name)
    if value > maximum:
        raise ValidationError(f"{name} must be less than or equal to {maximum}", field=name)
    return value


def build_venue_query(params: Mapping[str, Any]) -> VenueQuery:
    """
    Validate list parameters and build the query description.

    Recognised keys: name, city, state, country, capacity_min, capacity_max,
    sort_by, sort_order, page, limit. Raises ValidationError naming the first
    offending parameter.
    """
    predicates = []

    for field in TEXT_FILTERS:
        value = _clean(params.get(field))
        if value is not None:
            predicates.append(Predicate(field, FilterOperator.CONTAINS, value))

    capacity_min = _parse_int("capacity_min", _clean(params.get("capacity_min")), 0, CAPACITY_MAX)
    capacity_max = _parse_int("capacity_max", _clean(params.get("capacity_max")), 0, CAPACITY_MAX)
    if capacity_min is not None and capacity_max is not None and capacity_min > capacity_max:
        raise ValidationError("capacity_min must not exceed capacity_max", field="capacity_min")
    if capacity_min is not None:
        predicates.append(Predicate("capacity", FilterOperator.GTE, capacity_min))
    if capacity_max is not None:
        predicates.append(Predicate("capacity", FilterOperator.LTE, capacity_max))

    sort_by = _clean(params.get("sort_by")) or "name"
    if sort_by not in SORTABLE_FIELDS:
        raise ValidationError(
            f"sort_by must be one of: {', '.join(sorted(SORTABLE_FIELDS))}",
            field="sort_by"
        )

    raw_order = (_clean(params.get("sort_order")) or SortOrder.ASC.value).lower()
    try:
        sort_order = SortOrder(raw_order)
    except ValueError:
        raise ValidationError("sort_order must be 'asc' or 'desc'", field="sort_order")

    max_page = MAX_OFFSET // settings.VENUE_PAGE_SIZE_MAX
    page = _parse_int("page", _clean(params.get("page")), 1, max_page) or 1
    limit = (
        _parse_int("limit", _clean(params.get("limit")), 1, settings.VENUE_PAGE_SIZE_MAX)
        or settings.VENUE_PAGE_SIZE_DEFAULT
    )

    return VenueQuery(
        predicates=tuple(predicates),
        sort_by=sort_by,
        sort_order=sort_order,
        page=page,
        limit=limit,
    )


def compile_predicates(predicates: Tuple[Predicate, ...]) -> List[ColumnElement[bool]]:
    """Translate predicates into SQLAlchemy clauses, ANDed by the caller"""
    clauses = []
    for predicate in predicates:
        column = getattr(Venue, predicate.field)
        if predicate.operator is FilterOperator.CONTAINS:
            clauses.append(column.ilike(f"%{_escape_like(predicate.value)}%", escape="\\"))
        elif predicate.operator is FilterOperator.GTE:
            clauses.append(column >= predicate.value)
        elif predicate.operator is FilterOperator.LTE:
            clauses.append(column <= predicate.value)
        else:
            raise ValueError(f"Unsupported filter operator: {predicate.operator}")
    return clauses


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
