"""Application listing – ListingPipeline.

Orchestrates one list call::

    QuerySpec ─► parse business filters ─► StorageQueryBuilder.build
              ─► await store.fetch ─► map rows ─► engine.apply ─► ListResult

Both validation steps run before the storage call, so a bad request never
costs any I/O.  The storage call is the only suspension point.
"""
from __future__ import annotations

from typing import Any, Callable, Generic, Iterable, TypeVar

from fleetlist.application.business_filters.engine import BusinessFilterEngine
from fleetlist.application.listing.ports import ListingStore
from fleetlist.application.listing.request import ListRequest
from fleetlist.application.listing.result import ListResult
from fleetlist.application.query.builder import StorageQueryBuilder
from fleetlist.application.query.spec import QuerySpec
from fleetlist.observability.logging import bind_listing_context, get_logger

T = TypeVar("T")

_log = get_logger(__name__)


class ListingPipeline(Generic[T]):
    """Two-stage listing for one entity type.

    Parameters
    ----------
    store:
        Storage port returning ``(rows, stage1_total)``.
    mapper:
        Projects a raw row into the response shape the resolvers expect.
    builder:
        Stage-1 query builder carrying the entity's listing policy.
    engine:
        Stage-2 business filter engine for the same entity type.
    allowed_business_filters:
        Optional subset of the registry exposed on this endpoint.
    """

    def __init__(
        self,
        *,
        store: ListingStore[Any],
        mapper: Callable[[Any], T],
        builder: StorageQueryBuilder,
        engine: BusinessFilterEngine[T],
        allowed_business_filters: Iterable[str] | None = None,
    ) -> None:
        self._store = store
        self._mapper = mapper
        self._builder = builder
        self._engine = engine
        self._allowed = None if allowed_business_filters is None else frozenset(allowed_business_filters)

    @property
    def entity(self) -> str:
        return self._builder.policy.entity

    @property
    def business_filters(self) -> dict[str, str]:
        """Business filter name → description accepted by this pipeline."""
        described = self._engine.registry.describe()
        if self._allowed is None:
            return described
        return {name: text for name, text in described.items() if name in self._allowed}

    async def handle(self, request: ListRequest) -> ListResult[T]:
        return await self.find_all(request.to_query_spec())

    async def find_all(self, spec: QuerySpec) -> ListResult[T]:
        parsed = self._engine.parse(spec.business_filters, self._allowed)
        args = self._builder.build(spec)

        with bind_listing_context(entity=self.entity):
            _log.info(
                "listing.fetch",
                skip=args.skip,
                take=args.take,
                search=spec.search or "",
                business_filters=[p.name for p in parsed],
            )
            rows, total = await self._store.fetch(args)
            if len(rows) > args.take:
                _log.warning("listing.page_overflow", rows=len(rows), take=args.take)
                rows = rows[: args.take]

            items = [self._mapper(row) for row in rows]
            survivors = self._engine.apply(items, parsed)
            _log.info("listing.fetched", rows=len(rows), total=total, returned=len(survivors))

        return ListResult(items=survivors, total=total, skip=args.skip, take=args.take)


__all__ = ["ListingPipeline"]
