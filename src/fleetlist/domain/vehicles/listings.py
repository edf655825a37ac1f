"""Vehicle domain – pipeline wiring for the vehicle list endpoints."""
from __future__ import annotations

from typing import Any

from fleetlist.application.business_filters.engine import BusinessFilterEngine
from fleetlist.application.listing.pipeline import ListingPipeline
from fleetlist.application.listing.ports import ListingStore
from fleetlist.application.query.builder import StorageQueryBuilder
from fleetlist.config.settings.listing import ListingSettings
from fleetlist.domain.vehicles.mappers import map_vehicle, map_vehicle_document
from fleetlist.domain.vehicles.models import VehicleDocumentView, VehicleView
from fleetlist.domain.vehicles.policies import VEHICLE_DOCUMENT_POLICY, VEHICLE_POLICY
from fleetlist.domain.vehicles.registries import (
    build_vehicle_document_registry,
    build_vehicle_registry,
)
from fleetlist.kernel.time import Clock


def vehicle_pipeline(
    store: ListingStore[Any],
    *,
    settings: ListingSettings | None = None,
) -> ListingPipeline[VehicleView]:
    settings = settings or ListingSettings()
    return ListingPipeline(
        store=store,
        mapper=map_vehicle,
        builder=StorageQueryBuilder(VEHICLE_POLICY, settings),
        engine=BusinessFilterEngine(build_vehicle_registry()),
    )


def vehicle_document_pipeline(
    store: ListingStore[Any],
    *,
    settings: ListingSettings | None = None,
    clock: Clock | None = None,
) -> ListingPipeline[VehicleDocumentView]:
    settings = settings or ListingSettings()
    registry = build_vehicle_document_registry(clock, default_within_days=settings.expiring_soon_days)
    return ListingPipeline(
        store=store,
        mapper=map_vehicle_document,
        builder=StorageQueryBuilder(VEHICLE_DOCUMENT_POLICY, settings),
        engine=BusinessFilterEngine(registry),
    )


__all__ = ["vehicle_document_pipeline", "vehicle_pipeline"]
