"""Application listing – ListRequest (wire shape of a list call)."""
from __future__ import annotations

from typing import Any, Literal, Mapping

import pydantic
from pydantic import BaseModel, ConfigDict, Field

from fleetlist.application.payloads import decode_object
from fleetlist.application.query.spec import QuerySpec, SortOrder, SortSpec
from fleetlist.kernel.errors import ValidationError


class ListRequest(BaseModel):
    """Query parameters accepted by every list endpoint.

    ``filters`` and ``businessFilters`` may arrive as objects or as JSON
    strings (query-string transport).  ``skip``/``take`` are left untyped:
    the query builder clamps them instead of rejecting them.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    search: str | None = Field(default=None, max_length=200)
    filters: dict[str, Any] | str | None = None
    business_filters: dict[str, Any] | str | None = Field(default=None, alias="businessFilters")
    sort_by: str | None = Field(default=None, alias="sortBy")
    order: Literal["asc", "desc"] | None = None
    skip: Any = None
    take: Any = None

    @classmethod
    def from_params(cls, params: Mapping[str, Any]) -> "ListRequest":
        """Build from raw request parameters, mapping schema failures to 400s."""
        try:
            return cls.model_validate(dict(params))
        except pydantic.ValidationError as exc:
            errors = [
                {"field": ".".join(str(p) for p in err["loc"]), "message": err["msg"]}
                for err in exc.errors(include_url=False)
            ]
            raise ValidationError("Invalid list request", errors=errors) from exc

    def to_query_spec(self) -> QuerySpec:
        sort = None
        if self.sort_by:
            sort = SortSpec(self.sort_by, SortOrder(self.order or "desc"))
        return QuerySpec(
            search=self.search,
            filters=decode_object(self.filters, "filters"),
            sort=sort,
            skip=self.skip,
            take=self.take,
            business_filters=decode_object(self.business_filters, "businessFilters"),
        )


__all__ = ["ListRequest"]
