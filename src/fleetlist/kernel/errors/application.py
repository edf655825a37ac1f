"""Application-layer errors – failures inside the listing use case."""

from __future__ import annotations

from typing import Any

from fleetlist.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class InternalError(ApplicationError):
    """Server-side failure the client cannot fix by changing its request."""

    default_code = "internal_error"


class BusinessFilterEvaluationError(InternalError):
    """A business-filter predicate raised while filtering a page."""

    default_code = "business_filter_evaluation_failed"

    def __init__(
        self,
        resolver: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        kwargs.setdefault("detail", {"resolver": resolver})
        super().__init__(message or f"Business filter '{resolver}' failed", **kwargs)
        self.resolver = resolver


class DuplicateResolverError(ApplicationError):
    """A resolver name was registered twice in one registry."""

    default_code = "duplicate_resolver"

    def __init__(self, name: str, registry: str) -> None:
        super().__init__(
            f"Resolver '{name}' is already registered in '{registry}'",
            detail={"resolver": name, "registry": registry},
        )
        self.name = name
        self.registry = registry


class RegistryFrozenError(ApplicationError):
    """Registration attempted after the registry was frozen."""

    default_code = "registry_frozen"


class RegistryMismatchError(ApplicationError):
    """A registry does not match the filter names its entity declares."""

    default_code = "registry_mismatch"

    def __init__(self, registry: str, *, missing: list[str], unexpected: list[str]) -> None:
        super().__init__(
            f"Registry '{registry}' does not match its declared filters",
            detail={"registry": registry, "missing": missing, "unexpected": unexpected},
        )
        self.missing = missing
        self.unexpected = unexpected


__all__ = [
    "ApplicationError",
    "BusinessFilterEvaluationError",
    "DuplicateResolverError",
    "InternalError",
    "RegistryFrozenError",
    "RegistryMismatchError",
]
