"""FastAPI adapter – list endpoint router."""

from typing import Any

from fleetlist.adapters.fastapi.exception_mapper import _require_fastapi
from fleetlist.application.listing.pipeline import ListingPipeline
from fleetlist.application.listing.request import ListRequest


def FastAPIListingRouter(
    path: str,
    pipeline: ListingPipeline[Any],
    tags: list[str] | None = None,
) -> Any:
    """Return a router exposing ``GET {path}`` for *pipeline*.

    Query parameters follow :class:`ListRequest` (``search``, ``filters``,
    ``businessFilters``, ``sortBy``, ``order``, ``skip``, ``take``); JSON
    object parameters travel as strings.  ``GET {path}/business-filters``
    lists the business filters the endpoint accepts.
    """
    _require_fastapi()
    from fastapi import APIRouter, Request  # type: ignore[import-untyped]

    router = APIRouter(tags=tags or [pipeline.entity])

    @router.get(path)
    async def list_items(request: Request) -> dict[str, Any]:
        list_request = ListRequest.from_params(dict(request.query_params))
        result = await pipeline.handle(list_request)
        return result.to_dict()

    @router.get(f"{path}/business-filters")
    async def business_filters() -> dict[str, str]:
        return pipeline.business_filters

    return router


__all__ = ["FastAPIListingRouter"]
