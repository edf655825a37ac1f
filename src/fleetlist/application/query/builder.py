"""Application query – StorageQueryBuilder.

Turns a :class:`QuerySpec` into storage-engine arguments: clamped
pagination, a ``where`` expression and a deterministic ``order_by``.
"""
from __future__ import annotations

import dataclasses
import re
from datetime import date, datetime, time
from typing import Any

from fleetlist.application.query.expressions import AllOf, AnyOf, Condition, Expression
from fleetlist.application.query.policy import ListingPolicy
from fleetlist.application.query.spec import DateRange, QuerySpec, Range, SortOrder, SortSpec
from fleetlist.config.settings.listing import ListingSettings
from fleetlist.kernel.errors import ValidationError

_SUFFIX_RE = re.compile(r"^(.+)_(gte|lte|gt|lt|not)$")
_OPERATOR_KEYS = {"gte": "gte", "lte": "lte", "gt": "gt", "lt": "lt", "not": "neq", "equals": "eq", "in": "in"}


@dataclasses.dataclass(frozen=True)
class QueryArgs:
    """Arguments handed to a :class:`~fleetlist.application.listing.ports.ListingStore`."""
    skip: int
    take: int
    where: Expression | None
    order_by: tuple[SortSpec, ...]


def _as_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        # str.isdigit also accepts superscripts and other digits int() rejects
        if text.isascii() and text.lstrip("-").isdigit():
            return int(text)
    return None


def _normalize_scalar(value: Any) -> Any:
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered == "true":
            return True
        if lowered == "false":
            return False
    return value


def _parse_bound(field: str, bound: str, value: Any, *, upper: bool) -> datetime | None:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.max if upper else time.min)
    if isinstance(value, str):
        try:
            if len(value) == 10:
                parsed_day = date.fromisoformat(value)
                return datetime.combine(parsed_day, time.max if upper else time.min)
            return datetime.fromisoformat(value)
        except ValueError:
            pass
    raise ValidationError.for_field(
        f"Invalid date range for '{field}'", f"filters.{field}.{bound}", f"not an ISO-8601 date: {value!r}"
    )


def _check_ordered(field: str, low: Any, high: Any, message: str, reason: str) -> None:
    if low is None or high is None:
        return
    try:
        inverted = low > high
    except TypeError as exc:
        raise ValidationError.for_field(
            f"{message} for '{field}'", f"filters.{field}", "bounds are not comparable"
        ) from exc
    if inverted:
        raise ValidationError.for_field(f"{message} for '{field}'", f"filters.{field}", reason)


def _bounded(field: str, low: Any, high: Any) -> list[Condition]:
    out: list[Condition] = []
    if low is not None:
        out.append(Condition(field, "gte", low))
    if high is not None:
        out.append(Condition(field, "lte", high))
    return out


class StorageQueryBuilder:
    """Build :class:`QueryArgs` for one entity type.

    Example::

        builder = StorageQueryBuilder(VEHICLE_POLICY, ListingSettings())
        args = builder.build(QuerySpec(search="tesla", take=500))
        assert args.take == 100
    """

    def __init__(self, policy: ListingPolicy, settings: ListingSettings | None = None) -> None:
        self._policy = policy
        self._settings = settings or ListingSettings()

    @property
    def policy(self) -> ListingPolicy:
        return self._policy

    def build(self, spec: QuerySpec) -> QueryArgs:
        skip, take = self._pagination(spec)
        return QueryArgs(
            skip=skip,
            take=take,
            where=self._where(spec),
            order_by=self._order_by(spec.sort),
        )

    # ------------------------------------------------------------------
    # pagination
    # ------------------------------------------------------------------

    def _pagination(self, spec: QuerySpec) -> tuple[int, int]:
        skip = _as_int(spec.skip)
        if skip is None or skip < 0:
            skip = 0
        take = _as_int(spec.take)
        if take is None or take < 1:
            take = self._settings.default_take
        return skip, min(take, self._settings.max_take)

    # ------------------------------------------------------------------
    # where
    # ------------------------------------------------------------------

    def _where(self, spec: QuerySpec) -> Expression | None:
        clauses: list[Expression] = []
        for key, raw in spec.filters.items():
            clauses.extend(self._filter_conditions(key, raw))

        term = (spec.search or "").strip()
        if term and len(self._policy.searchable_fields):
            clauses.append(
                AnyOf(tuple(Condition(path, "contains", term) for path in self._policy.searchable_fields))
            )

        if not clauses:
            return None
        if len(clauses) == 1:
            return clauses[0]
        return AllOf(tuple(clauses))

    def _check_filterable(self, field: str) -> None:
        allowed = self._policy.filterable_fields
        if allowed is not None and field not in allowed:
            raise ValidationError.for_field(
                f"Filtering on '{field}' is not allowed for {self._policy.entity}",
                f"filters.{field}",
                "not a filterable field",
            )

    def _filter_conditions(self, key: str, raw: Any) -> list[Condition]:
        if raw is None or raw == "":
            return []

        match = _SUFFIX_RE.match(key)
        if match and (self._policy.filterable_fields is None or key not in self._policy.filterable_fields):
            field, op = match.groups()
            self._check_filterable(field)
            return [Condition(field, _OPERATOR_KEYS[op], _normalize_scalar(raw))]  # type: ignore[arg-type]

        self._check_filterable(key)
        value = raw
        if isinstance(value, dict):
            value = self._structured_value(key, value)
            if isinstance(value, list):
                return value

        if isinstance(value, Range):
            return self._range_conditions(key, value)
        if isinstance(value, DateRange):
            return self._date_range_conditions(key, value)
        if isinstance(value, (list, tuple, set, frozenset)):
            return [Condition(key, "in", [_normalize_scalar(v) for v in value])]
        return [Condition(key, "eq", _normalize_scalar(value))]

    def _structured_value(self, key: str, value: dict[str, Any]) -> Range | DateRange | list[Condition]:
        keys = set(value)
        if keys and keys <= {"min", "max"}:
            return Range(value.get("min"), value.get("max"))
        if keys and keys <= {"start", "end"}:
            return DateRange(value.get("start"), value.get("end"))
        if keys <= set(_OPERATOR_KEYS):
            return [
                Condition(key, _OPERATOR_KEYS[op], _normalize_scalar(v))  # type: ignore[arg-type]
                for op, v in value.items()
                if v is not None
            ]
        raise ValidationError.for_field(
            f"Unsupported filter value for '{key}'", f"filters.{key}", f"unexpected keys: {sorted(keys)}"
        )

    def _range_conditions(self, key: str, value: Range) -> list[Condition]:
        _check_ordered(key, value.min, value.max, "Invalid range", "min must be <= max")
        return _bounded(key, value.min, value.max)

    def _date_range_conditions(self, key: str, value: DateRange) -> list[Condition]:
        start = _parse_bound(key, "start", value.start, upper=False)
        end = _parse_bound(key, "end", value.end, upper=True)
        _check_ordered(key, start, end, "Invalid date range", "start must be <= end")
        return _bounded(key, start, end)

    # ------------------------------------------------------------------
    # order by
    # ------------------------------------------------------------------

    def _order_by(self, requested: SortSpec | None) -> tuple[SortSpec, ...]:
        tie_break = self._settings.tie_break_field
        if requested is not None and requested.field in self._policy.sortable_fields:
            primary = requested
        else:
            if requested is not None and self._policy.strict_sort:
                raise ValidationError.for_field(
                    f"Sorting by '{requested.field}' is not allowed for {self._policy.entity}",
                    "sortBy",
                    f"must be one of: {', '.join(sorted(self._policy.sortable_fields))}",
                )
            primary = self._policy.default_sort or SortSpec(
                self._settings.default_sort_field, SortOrder(self._settings.default_sort_order)
            )
        if primary.field == tie_break:
            return (primary,)
        return (primary, SortSpec(tie_break, SortOrder.ASC))


__all__ = ["QueryArgs", "StorageQueryBuilder"]
