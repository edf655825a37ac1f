"""Vehicle domain – business filter registries.

Each builder checks its registry against the entity's declared filter set
before freezing it, so a missing or stray resolver fails at startup.
"""
from __future__ import annotations

from typing import Any

from fleetlist.application.business_filters.registry import BusinessFilterRegistry
from fleetlist.domain.vehicles.models import VehicleDocumentView, VehicleView
from fleetlist.domain.vehicles.resolvers import (
    DEFAULT_WITHIN_DAYS,
    MissingDocsRule,
    StatusValue,
    UnassignedValue,
    missing_docs,
    status,
    unassigned,
)
from fleetlist.kernel.time import Clock, SystemClock

VEHICLE_BUSINESS_FILTERS: frozenset[str] = frozenset({"unassigned", "missingDocs"})
VEHICLE_DOCUMENT_BUSINESS_FILTERS: frozenset[str] = frozenset({"status"})


def build_vehicle_registry() -> BusinessFilterRegistry[VehicleView]:
    registry: BusinessFilterRegistry[VehicleView] = BusinessFilterRegistry("vehicle")
    registry.register(
        "unassigned",
        "Vehicles with no assigned documents",
        unassigned,
        schema=UnassignedValue,
    )
    registry.register(
        "missingDocs",
        "Vehicles missing specified document types (list + mode)",
        missing_docs,
        schema=MissingDocsRule,
    )
    registry.ensure_covers(VEHICLE_BUSINESS_FILTERS)
    return registry.freeze()


def build_vehicle_document_registry(
    clock: Clock | None = None,
    *,
    default_within_days: int = DEFAULT_WITHIN_DAYS,
) -> BusinessFilterRegistry[VehicleDocumentView]:
    clock = clock or SystemClock()
    registry: BusinessFilterRegistry[VehicleDocumentView] = BusinessFilterRegistry("vehicle_document")

    @registry.resolver(
        "status",
        "Filter documents by status: expired, active, expiringSoon with optional withinDays",
        schema=StatusValue,
    )
    def _status(document: VehicleDocumentView, value: Any) -> bool:
        return status(
            document, value, now=clock.now(), default_within_days=default_within_days
        )

    registry.ensure_covers(VEHICLE_DOCUMENT_BUSINESS_FILTERS)
    return registry.freeze()


__all__ = [
    "VEHICLE_BUSINESS_FILTERS",
    "VEHICLE_DOCUMENT_BUSINESS_FILTERS",
    "build_vehicle_document_registry",
    "build_vehicle_registry",
]
