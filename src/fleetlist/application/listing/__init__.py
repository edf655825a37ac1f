"""Application listing – request normalisation, result shape and pipeline."""
from fleetlist.application.listing.pipeline import ListingPipeline
from fleetlist.application.listing.ports import ListingStore, ResponseMapper
from fleetlist.application.listing.request import ListRequest
from fleetlist.application.listing.result import ListResult

__all__ = ["ListRequest", "ListResult", "ListingPipeline", "ListingStore", "ResponseMapper"]
