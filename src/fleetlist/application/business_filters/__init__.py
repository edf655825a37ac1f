"""Application business filters – registry and engine for stage-2 predicates."""
from fleetlist.application.business_filters.engine import (
    BusinessFilterEngine,
    ParsedBusinessFilter,
    ParsedBusinessFilters,
)
from fleetlist.application.business_filters.registry import (
    BusinessFilterRegistry,
    BusinessResolverDescriptor,
    Predicate,
)

__all__ = [
    "BusinessFilterEngine",
    "BusinessFilterRegistry",
    "BusinessResolverDescriptor",
    "ParsedBusinessFilter",
    "ParsedBusinessFilters",
    "Predicate",
]
