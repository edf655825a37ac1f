"""Vehicle domain – business resolvers and their value schemas.

Every resolver is a total, side-effect-free function of ``(entity, value)``.
``status`` additionally takes ``now`` as a keyword so the registry can bind
a clock without the resolver reading one itself.
"""
from __future__ import annotations

import math
from datetime import datetime, timedelta
from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr

from fleetlist.domain.vehicles.models import VehicleDocumentView, VehicleView

DEFAULT_WITHIN_DAYS = 30

StatusTag = Literal["expired", "active", "expiringSoon"]


class StatusRule(BaseModel):
    """``{"type": ..., "withinDays": n}`` form of the status filter."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    type: StatusTag
    within_days: int | None = Field(default=None, alias="withinDays", ge=0)


StatusValue = Union[StatusTag, StatusRule]


class MissingDocsRule(BaseModel):
    """``{"list": [...], "mode": "AND" | "OR"}``."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    document_types: tuple[StrictStr, ...] = Field(alias="list")
    mode: Literal["AND", "OR"]


UnassignedValue = StrictBool


def days_remaining(expiry: datetime, now: datetime) -> int:
    return math.floor((expiry - now) / timedelta(days=1))


def status(
    document: VehicleDocumentView,
    value: StatusValue,
    *,
    now: datetime,
    default_within_days: int = DEFAULT_WITHIN_DAYS,
) -> bool:
    """Expiry status of *document* relative to *now*.

    ``active`` and ``expiringSoon`` overlap: a document expiring in three
    days satisfies both.
    """
    if isinstance(value, StatusRule):
        tag = value.type
        within_days = default_within_days if value.within_days is None else value.within_days
    else:
        tag = value
        within_days = default_within_days

    expiry = document.expiry_date
    if tag == "expired":
        return expiry < now
    if tag == "active":
        return expiry >= now
    return expiry >= now and days_remaining(expiry, now) <= within_days


def missing_docs(vehicle: VehicleView, value: MissingDocsRule) -> bool:
    """Whether the requested document types are missing from *vehicle*.

    ``AND``: every listed type is missing (vacuously true for an empty list).
    ``OR``: at least one listed type is missing (false for an empty list).
    """
    attached = vehicle.document_type_names
    missing = [name not in attached for name in value.document_types]
    if value.mode == "AND":
        return all(missing)
    return any(missing)


def attachment_count(vehicle: VehicleView) -> int:
    return len(vehicle.documents)


def unassigned(vehicle: VehicleView, value: bool) -> bool:
    return (attachment_count(vehicle) == 0) == value


__all__ = [
    "DEFAULT_WITHIN_DAYS",
    "MissingDocsRule",
    "StatusRule",
    "StatusTag",
    "StatusValue",
    "UnassignedValue",
    "attachment_count",
    "days_remaining",
    "missing_docs",
    "status",
    "unassigned",
]
