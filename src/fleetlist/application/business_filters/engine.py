"""Business filters – BusinessFilterEngine.

Stage-2 of the listing pipeline: parse the client's ``businessFilters``
payload against a registry, then keep the entities every parsed predicate
accepts.
"""
from __future__ import annotations

import dataclasses
from typing import Any, Generic, Iterable, Sequence, TypeVar

import pydantic

from fleetlist.application.business_filters.registry import (
    BusinessFilterRegistry,
    BusinessResolverDescriptor,
)
from fleetlist.application.payloads import decode_object
from fleetlist.kernel.ddd.specification import (
    AlwaysSatisfied,
    BaseSpecification,
    LambdaSpecification,
)
from fleetlist.kernel.errors import BusinessFilterEvaluationError, ValidationError
from fleetlist.observability.logging import get_logger

T = TypeVar("T")

_log = get_logger(__name__)


@dataclasses.dataclass(frozen=True)
class ParsedBusinessFilter:
    """A registry-verified filter name and its schema-validated value."""
    name: str
    value: Any


ParsedBusinessFilters = tuple[ParsedBusinessFilter, ...]


def _field_errors(name: str, exc: pydantic.ValidationError) -> list[dict[str, Any]]:
    out: list[dict[str, Any]] = []
    for err in exc.errors(include_url=False):
        loc = ".".join(str(p) for p in err.get("loc", ()))
        out.append({
            "field": f"businessFilters.{name}" + (f".{loc}" if loc else ""),
            "message": err.get("msg", "invalid value"),
        })
    return out


class _GuardedPredicate(Generic[T]):
    """Bind a descriptor to one parsed value and surface predicate failures."""

    __slots__ = ("_descriptor", "_value")

    def __init__(self, descriptor: BusinessResolverDescriptor[T], value: Any) -> None:
        self._descriptor = descriptor
        self._value = value

    def __call__(self, entity: T) -> bool:
        try:
            return bool(self._descriptor.predicate(entity, self._value))
        except Exception as exc:
            _log.error(
                "business_filters.predicate_failed",
                resolver=self._descriptor.name,
                error=repr(exc),
            )
            raise BusinessFilterEvaluationError(self._descriptor.name, cause=exc) from exc


class BusinessFilterEngine(Generic[T]):
    """Parse and apply business filters for one entity type.

    Example::

        engine = BusinessFilterEngine(build_vehicle_registry())
        parsed = engine.parse({"missingDocs": {"list": ["Insurance"], "mode": "OR"}})
        survivors = engine.apply(vehicles, parsed)
    """

    def __init__(self, registry: BusinessFilterRegistry[T]) -> None:
        self._registry = registry

    @property
    def registry(self) -> BusinessFilterRegistry[T]:
        return self._registry

    @property
    def registered_names(self) -> list[str]:
        return sorted(self._registry.names)

    def parse(self, raw: Any, allowed_names: Iterable[str] | None = None) -> ParsedBusinessFilters:
        """Validate *raw* (mapping or JSON string) all-or-nothing.

        Every key outside *allowed_names* (default: the registry's names) is
        reported in a single :class:`ValidationError`.  Surviving keys are
        then checked against their resolver's schema.  No predicate runs.
        """
        payload = decode_object(raw, "businessFilters")
        allowed = self._registry.names if allowed_names is None else frozenset(allowed_names) & self._registry.names

        unknown = [key for key in payload if key not in allowed]
        if unknown:
            _log.warning("business_filters.rejected", entity=self._registry.entity, unknown=unknown)
            raise ValidationError(
                f"Unknown business filter keys: {', '.join(unknown)}",
                errors=[{"field": f"businessFilters.{key}", "message": "unknown business filter"} for key in unknown],
                detail={"unknown": unknown, "allowed": sorted(allowed)},
            )

        parsed: list[ParsedBusinessFilter] = []
        errors: list[dict[str, Any]] = []
        for name, value in payload.items():
            if value is None:
                continue
            try:
                parsed.append(ParsedBusinessFilter(name, self._registry[name].validate(value)))
            except pydantic.ValidationError as exc:
                errors.extend(_field_errors(name, exc))

        if errors:
            raise ValidationError(
                "Invalid business filter values",
                errors=errors,
                detail={"filters": sorted({e["field"].split(".")[1] for e in errors})},
            )
        return tuple(parsed)

    def specification(self, parsed: Sequence[ParsedBusinessFilter]) -> BaseSpecification[T]:
        """AND of every parsed filter, as a composable specification."""
        spec: BaseSpecification[T] = AlwaysSatisfied()
        for item in parsed:
            spec = spec & LambdaSpecification(
                _GuardedPredicate(self._registry[item.name], item.value),
                name=item.name,
            )
        return spec

    def apply(self, entities: Iterable[T], parsed: Sequence[ParsedBusinessFilter]) -> list[T]:
        """Return the entities every filter accepts, in input order.

        Entities are never mutated; the result is always a new list.
        """
        return self.specification(parsed).filter(entities)


__all__ = [
    "BusinessFilterEngine",
    "ParsedBusinessFilter",
    "ParsedBusinessFilters",
]
