"""SQLAlchemy adapter – SqlAlchemyListingStore."""
from __future__ import annotations

from typing import Any, Callable, Generic, Sequence, TypeVar

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError

from fleetlist.adapters.sqlalchemy.compiler import compile_order_by, compile_where
from fleetlist.application.query.builder import QueryArgs
from fleetlist.kernel.errors import StorageError
from fleetlist.observability.logging import get_logger

TModel = TypeVar("TModel")

_log = get_logger(__name__)


class SqlAlchemyListingStore(Generic[TModel]):
    """:class:`~fleetlist.application.listing.ports.ListingStore` over one mapped model.

    Parameters
    ----------
    session_factory:
        Zero-argument callable returning an ``AsyncSession`` (usable as an
        async context manager), e.g. :class:`SqlAlchemySessionFactory`.
    model:
        Declaratively mapped ORM class.
    options:
        Loader options (``selectinload(...)``) for every relation the
        response mapper reads; rows are projected after the session closes.
    """

    def __init__(
        self,
        session_factory: Callable[[], Any],
        model: type[TModel],
        *,
        options: Sequence[Any] = (),
    ) -> None:
        self._session_factory = session_factory
        self._model = model
        self._options = tuple(options)

    async def fetch(self, args: QueryArgs) -> tuple[list[TModel], int]:
        clause = compile_where(self._model, args.where)
        stmt = select(self._model)
        count_stmt = select(func.count()).select_from(self._model)
        if clause is not None:
            stmt = stmt.where(clause)
            count_stmt = count_stmt.where(clause)
        stmt = (
            stmt.options(*self._options)
            .order_by(*compile_order_by(self._model, args.order_by))
            .offset(args.skip)
            .limit(args.take)
        )

        try:
            async with self._session_factory() as session:
                rows = list((await session.execute(stmt)).scalars().all())
                total = int((await session.execute(count_stmt)).scalar_one())
        except SQLAlchemyError as exc:
            _log.error("listing.storage_failed", model=self._model.__name__, error=repr(exc))
            raise StorageError(self._model.__name__, cause=exc) from exc
        return rows, total


__all__ = ["SqlAlchemyListingStore"]
