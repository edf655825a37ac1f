"""Kernel errors – DomainError and ValidationError (client-fixable input)."""

from __future__ import annotations

from typing import Any

from fleetlist.kernel.errors.base import BaseError


class DomainError(BaseError):
    """A listing rule rejected the request."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """The request is malformed; ``errors`` lists each offending field.

    Every entry is ``{"field": <dotted path>, "message": <reason>}``, e.g.
    ``{"field": "businessFilters.colour", "message": "unknown business filter"}``.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = list(errors or ())

    @classmethod
    def for_field(cls, message: str, field: str, reason: str, **kwargs: Any) -> "ValidationError":
        """Shorthand for a single-field failure."""
        return cls(message, errors=[{"field": field, "message": reason}], **kwargs)

    @property
    def fields(self) -> list[str]:
        return [entry["field"] for entry in self.errors]

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "errors": self.errors}


__all__ = ["DomainError", "ValidationError"]
