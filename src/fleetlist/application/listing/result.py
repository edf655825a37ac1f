"""Application listing – ListResult generic container."""
from __future__ import annotations

import dataclasses
from typing import Any, Generic, TypeVar

T = TypeVar("T")


def _dump(item: Any) -> Any:
    to_dict = getattr(item, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    if dataclasses.is_dataclass(item) and not isinstance(item, type):
        return dataclasses.asdict(item)
    return item


@dataclasses.dataclass(frozen=True)
class ListResult(Generic[T]):
    """One page of listed items.

    ``total`` counts storage-level (stage-1) matches only.  Business filters
    run on the fetched page afterwards, so ``len(items)`` can be smaller than
    ``take`` even when more matches exist beyond this page.
    """

    items: list[T]
    total: int
    skip: int = 0
    take: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {"items": [_dump(item) for item in self.items], "total": self.total}


__all__ = ["ListResult"]
