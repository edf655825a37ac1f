"""Vehicle domain – listing policies (search, filter and sort allow-lists)."""
from __future__ import annotations

from fleetlist.application.query.policy import ListingPolicy, SearchableFieldSet
from fleetlist.application.query.spec import SortOrder, SortSpec

VEHICLE_POLICY = ListingPolicy(
    entity="vehicle",
    searchable_fields=SearchableFieldSet([
        "license_plate",
        "name",
        "rc_number",
        "chassis_number",
        "engine_number",
        "category.name",
        "type.name",
        "owner.name",
        "driver.name",
    ]),
    sortable_fields=frozenset({
        "name",
        "license_plate",
        "rc_number",
        "created_at",
        "updated_at",
    }),
    filterable_fields=frozenset({
        "category_id",
        "type_id",
        "owner_id",
        "driver_id",
        "location_id",
        "created_at",
        "updated_at",
    }),
    default_sort=SortSpec("created_at", SortOrder.DESC),
)

VEHICLE_DOCUMENT_POLICY = ListingPolicy(
    entity="vehicle_document",
    searchable_fields=SearchableFieldSet(["document_no", "notes", "vehicle.name"]),
    sortable_fields=frozenset({
        "document_no",
        "start_date",
        "expiry_date",
        "created_at",
        "updated_at",
    }),
    filterable_fields=frozenset({
        "vehicle_id",
        "document_type_id",
        "start_date",
        "expiry_date",
        "created_at",
    }),
    default_sort=SortSpec("created_at", SortOrder.DESC),
)

__all__ = ["VEHICLE_DOCUMENT_POLICY", "VEHICLE_POLICY"]
