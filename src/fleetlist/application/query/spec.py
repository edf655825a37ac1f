"""Application query – QuerySpec and the filter value shapes it carries."""
from __future__ import annotations

import dataclasses
from datetime import date, datetime
from enum import Enum
from typing import Any


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclasses.dataclass(frozen=True)
class SortSpec:
    """Single sort criterion."""
    field: str
    order: SortOrder = SortOrder.ASC


@dataclasses.dataclass(frozen=True)
class Range:
    """Inclusive numeric range; either bound may be omitted."""
    min: Any = None
    max: Any = None


@dataclasses.dataclass(frozen=True)
class DateRange:
    """Inclusive date/datetime range; bounds may be ISO-8601 strings."""
    start: datetime | date | str | None = None
    end: datetime | date | str | None = None


@dataclasses.dataclass(frozen=True)
class QuerySpec:
    """Normalised list request, built fresh per request and never persisted.

    ``skip`` and ``take`` are kept exactly as received; the builder clamps
    them.  ``business_filters`` is the raw client payload, interpreted by the
    business filter engine rather than by storage.
    """

    search: str | None = None
    filters: dict[str, Any] = dataclasses.field(default_factory=dict)
    sort: SortSpec | None = None
    skip: Any = None
    take: Any = None
    business_filters: dict[str, Any] = dataclasses.field(default_factory=dict)


__all__ = ["DateRange", "QuerySpec", "Range", "SortOrder", "SortSpec"]
