"""FastAPI adapter – exception mapper and list endpoint router."""
from fleetlist.adapters.fastapi.exception_mapper import FastAPIExceptionMapper
from fleetlist.adapters.fastapi.routers import FastAPIListingRouter

__all__ = ["FastAPIExceptionMapper", "FastAPIListingRouter"]
