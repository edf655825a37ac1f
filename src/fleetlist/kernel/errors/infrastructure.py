"""Infrastructure errors – I/O failures in storage adapters."""

from __future__ import annotations

from typing import Any

from fleetlist.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a business rule violation."""

    default_code = "infrastructure_error"


class StorageError(InfrastructureError):
    """The storage engine failed to execute a listing query."""

    default_code = "storage_error"

    def __init__(
        self,
        resource: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Storage query for '{resource}' failed", **kwargs)
        self.resource = resource


__all__ = ["InfrastructureError", "StorageError"]
