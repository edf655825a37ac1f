"""Application query – per-entity listing policy."""
from __future__ import annotations

import dataclasses
from typing import Iterable, Iterator

from fleetlist.application.query.spec import SortSpec


class SearchableFieldSet:
    """Ordered field paths eligible for case-insensitive ``contains`` search.

    A path is either a column (``"name"``) or one relation hop
    (``"category.name"``).  Deeper paths are rejected at construction.
    """

    __slots__ = ("_fields",)

    def __init__(self, fields: Iterable[str]) -> None:
        seen: list[str] = []
        for path in fields:
            parts = path.split(".")
            if not path or any(not p for p in parts):
                raise ValueError(f"Invalid searchable field path: {path!r}")
            if len(parts) > 2:
                raise ValueError(f"Searchable field {path!r} is more than one relation hop deep")
            if path not in seen:
                seen.append(path)
        self._fields: tuple[str, ...] = tuple(seen)

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __contains__(self, path: object) -> bool:
        return path in self._fields

    def __repr__(self) -> str:
        return f"SearchableFieldSet({list(self._fields)!r})"


@dataclasses.dataclass(frozen=True)
class ListingPolicy:
    """What clients may search, filter and sort on for one entity type.

    ``filterable_fields=None`` accepts any structured filter key; the
    request validation layer is then responsible for the key set.
    ``strict_sort`` turns a disallowed ``sortBy`` into a validation error
    instead of falling back to ``default_sort``.
    """

    entity: str
    searchable_fields: SearchableFieldSet = dataclasses.field(default_factory=lambda: SearchableFieldSet(()))
    sortable_fields: frozenset[str] = frozenset()
    filterable_fields: frozenset[str] | None = None
    default_sort: SortSpec | None = None
    strict_sort: bool = False


__all__ = ["ListingPolicy", "SearchableFieldSet"]
