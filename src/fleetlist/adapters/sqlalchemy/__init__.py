"""SQLAlchemy adapter – session factory, query compiler and listing store."""
from fleetlist.adapters.sqlalchemy.compiler import compile_order_by, compile_where
from fleetlist.adapters.sqlalchemy.listing_store import SqlAlchemyListingStore
from fleetlist.adapters.sqlalchemy.session import SqlAlchemySessionFactory

__all__ = [
    "SqlAlchemyListingStore",
    "SqlAlchemySessionFactory",
    "compile_order_by",
    "compile_where",
]
