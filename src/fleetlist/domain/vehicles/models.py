"""Vehicle domain – response views the business resolvers operate on."""
from __future__ import annotations

import dataclasses
from datetime import datetime
from typing import Any


def _iso(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


@dataclasses.dataclass(frozen=True)
class VehicleDocumentItem:
    """A document linked to a vehicle, reduced to its type name."""
    id: str
    document_type_name: str | None = None


@dataclasses.dataclass(frozen=True)
class VehicleView:
    id: str
    name: str
    license_plate: str
    rc_number: str | None = None
    chassis_number: str | None = None
    engine_number: str | None = None
    notes: str | None = None
    category_id: str | None = None
    type_id: str | None = None
    owner_id: str | None = None
    driver_id: str | None = None
    location_id: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    category_name: str | None = None
    type_name: str | None = None
    owner_name: str | None = None
    driver_name: str | None = None
    location_name: str | None = None
    documents: tuple[VehicleDocumentItem, ...] = ()

    @property
    def document_type_names(self) -> frozenset[str]:
        return frozenset(d.document_type_name for d in self.documents if d.document_type_name)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "licensePlate": self.license_plate,
            "rcNumber": self.rc_number,
            "chassisNumber": self.chassis_number,
            "engineNumber": self.engine_number,
            "notes": self.notes,
            "categoryId": self.category_id,
            "typeId": self.type_id,
            "ownerId": self.owner_id,
            "driverId": self.driver_id,
            "locationId": self.location_id,
            "createdAt": _iso(self.created_at),
            "updatedAt": _iso(self.updated_at),
            "categoryName": self.category_name,
            "typeName": self.type_name,
            "ownerName": self.owner_name,
            "driverName": self.driver_name,
            "locationName": self.location_name,
            "documents": [
                {"id": d.id, "documentTypeName": d.document_type_name} for d in self.documents
            ],
        }


@dataclasses.dataclass(frozen=True)
class VehicleDocumentView:
    """A vehicle document with its expiry date normalised to aware UTC."""

    id: str
    document_no: str
    expiry_date: datetime
    vehicle_id: str | None = None
    document_type_id: str | None = None
    start_date: datetime | None = None
    notes: str | None = None
    link: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    vehicle_name: str | None = None
    document_type_name: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "documentNo": self.document_no,
            "expiryDate": _iso(self.expiry_date),
            "vehicleId": self.vehicle_id,
            "documentTypeId": self.document_type_id,
            "startDate": _iso(self.start_date),
            "notes": self.notes,
            "link": self.link,
            "createdAt": _iso(self.created_at),
            "updatedAt": _iso(self.updated_at),
            "vehicleName": self.vehicle_name,
            "documentTypeName": self.document_type_name,
        }


__all__ = ["VehicleDocumentItem", "VehicleDocumentView", "VehicleView"]
