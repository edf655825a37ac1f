"""Application listing – ports the pipeline depends on."""
from __future__ import annotations

from typing import Any, Callable, Protocol, TypeVar, runtime_checkable

from fleetlist.application.query.builder import QueryArgs

Row = TypeVar("Row")
Row_co = TypeVar("Row_co", covariant=True)

ResponseMapper = Callable[[Any], Any]


@runtime_checkable
class ListingStore(Protocol[Row_co]):
    """Port: execute built query arguments against a storage engine.

    Returns the requested page of raw rows and the number of rows matching
    ``args.where`` regardless of pagination.
    """

    async def fetch(self, args: QueryArgs) -> tuple[list[Row_co], int]: ...


__all__ = ["ListingStore", "ResponseMapper", "Row"]
