"""Application query – QuerySpec, listing policy and the storage query builder."""
from fleetlist.application.query.builder import QueryArgs, StorageQueryBuilder
from fleetlist.application.query.expressions import AllOf, AnyOf, Condition, Expression, iter_conditions
from fleetlist.application.query.policy import ListingPolicy, SearchableFieldSet
from fleetlist.application.query.spec import DateRange, QuerySpec, Range, SortOrder, SortSpec

__all__ = [
    "AllOf",
    "AnyOf",
    "Condition",
    "DateRange",
    "Expression",
    "ListingPolicy",
    "QueryArgs",
    "QuerySpec",
    "Range",
    "SearchableFieldSet",
    "SortOrder",
    "SortSpec",
    "StorageQueryBuilder",
    "iter_conditions",
]
