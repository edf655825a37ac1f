"""Application query – storage-neutral ``where`` expression tree.

Adapters translate these nodes into their own query language; the
in-memory fake evaluates them directly.
"""
from __future__ import annotations

import dataclasses
from typing import Any, Literal, Union

Operator = Literal["eq", "neq", "in", "gt", "gte", "lt", "lte", "contains"]


@dataclasses.dataclass(frozen=True)
class Condition:
    """``field <op> value``; ``contains`` is always case-insensitive."""
    field: str
    op: Operator
    value: Any


@dataclasses.dataclass(frozen=True)
class AllOf:
    """Conjunction of child expressions."""
    children: tuple["Expression", ...]


@dataclasses.dataclass(frozen=True)
class AnyOf:
    """Disjunction of child expressions."""
    children: tuple["Expression", ...]


Expression = Union[Condition, AllOf, AnyOf]


def iter_conditions(expr: Expression | None) -> list[Condition]:
    """Flatten *expr* into its leaf conditions (depth-first, in order)."""
    if expr is None:
        return []
    if isinstance(expr, Condition):
        return [expr]
    out: list[Condition] = []
    for child in expr.children:
        out.extend(iter_conditions(child))
    return out


__all__ = ["AllOf", "AnyOf", "Condition", "Expression", "Operator", "iter_conditions"]
