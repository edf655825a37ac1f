"""Vehicle domain – row → view mappers.

Rows are either ORM instances or plain mappings; relations may be absent
when they were not loaded.
"""
from __future__ import annotations

from datetime import UTC, date, datetime, time
from typing import Any, Mapping

from fleetlist.domain.vehicles.models import VehicleDocumentItem, VehicleDocumentView, VehicleView


def _get(row: Any, name: str, default: Any = None) -> Any:
    if row is None:
        return default
    if isinstance(row, Mapping):
        return row.get(name, default)
    return getattr(row, name, default)


def _related_name(row: Any, relation: str) -> str | None:
    return _get(_get(row, relation), "name")


def _as_str(value: Any) -> str | None:
    return None if value is None else str(value)


def as_utc(value: Any) -> datetime | None:
    """Normalise a stored date/datetime/ISO string to an aware UTC datetime."""
    if value is None:
        return None
    if isinstance(value, str):
        value = datetime.fromisoformat(value)
    if isinstance(value, datetime):
        return value.replace(tzinfo=UTC) if value.tzinfo is None else value.astimezone(UTC)
    if isinstance(value, date):
        return datetime.combine(value, time.min, tzinfo=UTC)
    raise TypeError(f"Cannot interpret {value!r} as a datetime")


def map_vehicle(row: Any) -> VehicleView:
    documents = tuple(
        VehicleDocumentItem(
            id=str(_get(doc, "id")),
            document_type_name=_related_name(doc, "document_type") or _get(doc, "document_type_name"),
        )
        for doc in (_get(row, "documents") or ())
    )
    return VehicleView(
        id=str(_get(row, "id")),
        name=_get(row, "name"),
        license_plate=_get(row, "license_plate"),
        rc_number=_get(row, "rc_number"),
        chassis_number=_get(row, "chassis_number"),
        engine_number=_get(row, "engine_number"),
        notes=_get(row, "notes"),
        category_id=_as_str(_get(row, "category_id")),
        type_id=_as_str(_get(row, "type_id")),
        owner_id=_as_str(_get(row, "owner_id")),
        driver_id=_as_str(_get(row, "driver_id")),
        location_id=_as_str(_get(row, "location_id")),
        created_at=as_utc(_get(row, "created_at")),
        updated_at=as_utc(_get(row, "updated_at")),
        category_name=_related_name(row, "category"),
        type_name=_related_name(row, "type"),
        owner_name=_related_name(row, "owner"),
        driver_name=_related_name(row, "driver"),
        location_name=_related_name(row, "location"),
        documents=documents,
    )


def map_vehicle_document(row: Any) -> VehicleDocumentView:
    return VehicleDocumentView(
        id=str(_get(row, "id")),
        document_no=_get(row, "document_no"),
        expiry_date=as_utc(_get(row, "expiry_date")),  # type: ignore[arg-type]
        vehicle_id=_as_str(_get(row, "vehicle_id")),
        document_type_id=_as_str(_get(row, "document_type_id")),
        start_date=as_utc(_get(row, "start_date")),
        notes=_get(row, "notes"),
        link=_get(row, "link"),
        created_at=as_utc(_get(row, "created_at")),
        updated_at=as_utc(_get(row, "updated_at")),
        vehicle_name=_related_name(row, "vehicle"),
        document_type_name=_related_name(row, "document_type"),
    )


__all__ = ["as_utc", "map_vehicle", "map_vehicle_document"]
