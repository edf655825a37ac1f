"""Vehicle domain – views, resolvers, registries and list pipelines."""
from fleetlist.domain.vehicles.listings import vehicle_document_pipeline, vehicle_pipeline
from fleetlist.domain.vehicles.mappers import map_vehicle, map_vehicle_document
from fleetlist.domain.vehicles.models import VehicleDocumentItem, VehicleDocumentView, VehicleView
from fleetlist.domain.vehicles.policies import VEHICLE_DOCUMENT_POLICY, VEHICLE_POLICY
from fleetlist.domain.vehicles.registries import (
    VEHICLE_BUSINESS_FILTERS,
    VEHICLE_DOCUMENT_BUSINESS_FILTERS,
    build_vehicle_document_registry,
    build_vehicle_registry,
)

__all__ = [
    "VEHICLE_BUSINESS_FILTERS",
    "VEHICLE_DOCUMENT_BUSINESS_FILTERS",
    "VEHICLE_DOCUMENT_POLICY",
    "VEHICLE_POLICY",
    "VehicleDocumentItem",
    "VehicleDocumentView",
    "VehicleView",
    "build_vehicle_document_registry",
    "build_vehicle_registry",
    "map_vehicle",
    "map_vehicle_document",
    "vehicle_document_pipeline",
    "vehicle_pipeline",
]
