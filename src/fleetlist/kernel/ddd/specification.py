"""Kernel DDD – composable predicates over listed entities.

The business filter engine turns every parsed filter into a
:class:`LambdaSpecification` and ANDs them, starting from
:class:`AlwaysSatisfied` so that no filters means no filtering.
"""

from __future__ import annotations

import abc
from typing import Callable, Generic, Iterable, TypeVar

T = TypeVar("T")


class BaseSpecification(abc.ABC, Generic[T]):
    """A yes/no rule with ``&``, ``|`` and ``~`` combinators.

    Example::

        class Expired(BaseSpecification[VehicleDocumentView]):
            def is_satisfied_by(self, candidate: VehicleDocumentView) -> bool:
                return candidate.expiry_date < clock.now()

        survivors = (Expired() & HasVehicle()).filter(documents)
    """

    @abc.abstractmethod
    def is_satisfied_by(self, candidate: T) -> bool: ...

    def filter(self, candidates: Iterable[T]) -> list[T]:
        """Matching candidates as a new list, in input order."""
        return [c for c in candidates if self.is_satisfied_by(c)]

    def __and__(self, other: BaseSpecification[T]) -> BaseSpecification[T]:
        if isinstance(other, AlwaysSatisfied):
            return self
        return AndSpecification(self, other)

    def __or__(self, other: BaseSpecification[T]) -> BaseSpecification[T]:
        return OrSpecification(self, other)

    def __invert__(self) -> BaseSpecification[T]:
        return NotSpecification(self)


class AlwaysSatisfied(BaseSpecification[T]):
    """Identity for ``&``."""

    def is_satisfied_by(self, candidate: T) -> bool:  # noqa: ARG002
        return True

    def __and__(self, other: BaseSpecification[T]) -> BaseSpecification[T]:
        return other

    def __repr__(self) -> str:
        return "AlwaysSatisfied()"


class AndSpecification(BaseSpecification[T]):
    def __init__(self, left: BaseSpecification[T], right: BaseSpecification[T]) -> None:
        self.left = left
        self.right = right

    def is_satisfied_by(self, candidate: T) -> bool:
        # short-circuits: later filters never see rejected candidates
        return self.left.is_satisfied_by(candidate) and self.right.is_satisfied_by(candidate)


class OrSpecification(BaseSpecification[T]):
    def __init__(self, left: BaseSpecification[T], right: BaseSpecification[T]) -> None:
        self.left = left
        self.right = right

    def is_satisfied_by(self, candidate: T) -> bool:
        return self.left.is_satisfied_by(candidate) or self.right.is_satisfied_by(candidate)


class NotSpecification(BaseSpecification[T]):
    def __init__(self, inner: BaseSpecification[T]) -> None:
        self.inner = inner

    def is_satisfied_by(self, candidate: T) -> bool:
        return not self.inner.is_satisfied_by(candidate)


class LambdaSpecification(BaseSpecification[T]):
    """Adapt a one-argument predicate; its result is coerced to ``bool``."""

    def __init__(self, predicate: Callable[[T], object], *, name: str = "") -> None:
        self._predicate = predicate
        self.name = name or getattr(predicate, "__name__", "<lambda>")

    def is_satisfied_by(self, candidate: T) -> bool:
        return bool(self._predicate(candidate))

    def __repr__(self) -> str:
        return f"LambdaSpecification({self.name!r})"


__all__ = [
    "AlwaysSatisfied",
    "AndSpecification",
    "BaseSpecification",
    "LambdaSpecification",
    "NotSpecification",
    "OrSpecification",
]
