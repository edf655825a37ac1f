"""Business filters – BusinessResolverDescriptor and BusinessFilterRegistry.

A registry is the closed vocabulary of business filters for one entity
type.  It is populated once at process start, frozen, and then shared
read-only across requests.
"""
from __future__ import annotations

import dataclasses
from typing import Any, Callable, Generic, Iterable, Iterator, TypeVar

from pydantic import TypeAdapter

from fleetlist.kernel.errors import (
    DuplicateResolverError,
    RegistryFrozenError,
    RegistryMismatchError,
)

T = TypeVar("T")

Predicate = Callable[[T, Any], bool]


@dataclasses.dataclass(frozen=True)
class BusinessResolverDescriptor(Generic[T]):
    """One named predicate plus the schema its filter value must satisfy.

    ``schema`` is any type pydantic can build a ``TypeAdapter`` for; the
    value handed to ``predicate`` is the validated (coerced) result.
    """

    name: str
    description: str
    predicate: Predicate[T]
    schema: Any = Any
    _adapter: TypeAdapter[Any] = dataclasses.field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_adapter", TypeAdapter(self.schema))

    def validate(self, value: Any) -> Any:
        """Return *value* coerced to ``schema``; raises ``pydantic.ValidationError``."""
        return self._adapter.validate_python(value)


class BusinessFilterRegistry(Generic[T]):
    """Name → :class:`BusinessResolverDescriptor` table for one entity type.

    Example::

        registry: BusinessFilterRegistry[VehicleView] = BusinessFilterRegistry("vehicle")

        @registry.resolver("unassigned", "Vehicles with no documents", schema=StrictBool)
        def _unassigned(vehicle: VehicleView, value: bool) -> bool:
            return (len(vehicle.documents) == 0) == value

        registry.freeze()
    """

    def __init__(self, entity: str) -> None:
        self._entity = entity
        self._resolvers: dict[str, BusinessResolverDescriptor[T]] = {}
        self._frozen = False

    @property
    def entity(self) -> str:
        return self._entity

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def names(self) -> frozenset[str]:
        return frozenset(self._resolvers)

    def register(
        self,
        name: str,
        description: str,
        predicate: Predicate[T],
        *,
        schema: Any = Any,
    ) -> BusinessResolverDescriptor[T]:
        """Add a resolver; duplicate names fail immediately."""
        if self._frozen:
            raise RegistryFrozenError(
                f"Cannot register '{name}': registry '{self._entity}' is frozen",
                detail={"registry": self._entity, "resolver": name},
            )
        if name in self._resolvers:
            raise DuplicateResolverError(name, self._entity)
        descriptor = BusinessResolverDescriptor(name, description, predicate, schema)
        self._resolvers[name] = descriptor
        return descriptor

    def resolver(
        self, name: str, description: str, *, schema: Any = Any
    ) -> Callable[[Predicate[T]], Predicate[T]]:
        """Decorator form of :meth:`register`."""

        def decorator(fn: Predicate[T]) -> Predicate[T]:
            self.register(name, description, fn, schema=schema)
            return fn

        return decorator

    def freeze(self) -> "BusinessFilterRegistry[T]":
        self._frozen = True
        return self

    def ensure_covers(self, declared: Iterable[str]) -> None:
        """Fail at startup unless the registry holds exactly *declared*."""
        expected = set(declared)
        missing = sorted(expected - self._resolvers.keys())
        unexpected = sorted(self._resolvers.keys() - expected)
        if missing or unexpected:
            raise RegistryMismatchError(self._entity, missing=missing, unexpected=unexpected)

    def describe(self) -> dict[str, str]:
        """Resolver name → description, for API docs."""
        return {name: d.description for name, d in self._resolvers.items()}

    def get(self, name: str) -> BusinessResolverDescriptor[T] | None:
        return self._resolvers.get(name)

    def __getitem__(self, name: str) -> BusinessResolverDescriptor[T]:
        return self._resolvers[name]

    def __contains__(self, name: object) -> bool:
        return name in self._resolvers

    def __iter__(self) -> Iterator[BusinessResolverDescriptor[T]]:
        return iter(self._resolvers.values())

    def __len__(self) -> int:
        return len(self._resolvers)

    def __repr__(self) -> str:
        return f"BusinessFilterRegistry({self._entity!r}, names={sorted(self._resolvers)!r})"


__all__ = ["BusinessFilterRegistry", "BusinessResolverDescriptor", "Predicate"]
