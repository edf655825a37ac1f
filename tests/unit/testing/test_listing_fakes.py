"""Unit tests for the in-memory listing fakes."""
from __future__ import annotations

import asyncio
from datetime import UTC, datetime
from types import SimpleNamespace

import pytest

from fleetlist.application.listing import ListingStore
from fleetlist.application.query import AllOf, AnyOf, Condition, QueryArgs, SortOrder, SortSpec
from fleetlist.testing.fakes import PINNED_AT, FakeClock, InMemoryListingStore, evaluate

ROW = {
    "id": 1,
    "name": "City Van",
    "seats": 5,
    "owner": None,
    "category": {"name": "Light"},
    "documents": [{"kind": "Insurance"}, {"kind": "Permit"}],
}


class TestEvaluate:
    def test_none_matches_everything(self) -> None:
        assert evaluate(None, ROW)

    @pytest.mark.parametrize(
        ("cond", "expected"),
        [
            (Condition("seats", "eq", 5), True),
            (Condition("seats", "neq", 5), False),
            (Condition("seats", "in", [4, 5]), True),
            (Condition("seats", "gt", 5), False),
            (Condition("seats", "gte", 5), True),
            (Condition("seats", "lt", 6), True),
            (Condition("seats", "lte", 4), False),
            (Condition("name", "contains", "van"), True),
            (Condition("name", "contains", "truck"), False),
        ],
    )
    def test_operators(self, cond: Condition, expected: bool) -> None:
        assert evaluate(cond, ROW) is expected

    def test_comparison_with_missing_value_is_false(self) -> None:
        assert not evaluate(Condition("weight", "gt", 1), ROW)

    def test_relation_paths(self) -> None:
        assert evaluate(Condition("category.name", "eq", "Light"), ROW)
        assert evaluate(Condition("documents.kind", "eq", "Permit"), ROW)
        assert not evaluate(Condition("owner.name", "contains", "a"), ROW)

    def test_attribute_rows(self) -> None:
        row = SimpleNamespace(name="Bus", category=SimpleNamespace(name="Heavy"))
        assert evaluate(Condition("category.name", "contains", "HEA"), row)

    def test_groups(self) -> None:
        yes, no = Condition("seats", "eq", 5), Condition("seats", "eq", 6)
        assert evaluate(AnyOf((no, yes)), ROW)
        assert not evaluate(AllOf((no, yes)), ROW)
        assert evaluate(AllOf((yes, AnyOf((no, yes)))), ROW)


class TestInMemoryListingStore:
    def _args(self, **kwargs: object) -> QueryArgs:
        base: dict[str, object] = {"skip": 0, "take": 10, "where": None, "order_by": (SortSpec("id"),)}
        base.update(kwargs)
        return QueryArgs(**base)  # type: ignore[arg-type]

    def test_satisfies_port(self) -> None:
        assert isinstance(InMemoryListingStore(), ListingStore)

    def test_sort_page_and_count(self) -> None:
        store = InMemoryListingStore([{"id": i, "rank": i % 3} for i in range(1, 7)])
        order = (SortSpec("rank", SortOrder.DESC), SortSpec("id", SortOrder.ASC))
        rows, total = asyncio.run(store.fetch(self._args(skip=1, take=3, order_by=order)))
        assert [r["id"] for r in rows] == [5, 1, 4]
        assert total == 6

    def test_none_sorts_first_ascending(self) -> None:
        store = InMemoryListingStore([{"id": 1, "at": 2}, {"id": 2, "at": None}, {"id": 3, "at": 1}])
        rows, _ = asyncio.run(store.fetch(self._args(order_by=(SortSpec("at"), SortSpec("id")))))
        assert [r["id"] for r in rows] == [2, 3, 1]

    def test_records_calls_and_add(self) -> None:
        store = InMemoryListingStore()
        store.add({"id": 1}, {"id": 2})
        rows, total = asyncio.run(store.fetch(self._args(where=Condition("id", "eq", 2))))
        assert [r["id"] for r in rows] == [2]
        assert total == 1
        assert len(store.calls) == 1


class TestFakeClock:
    def test_pinned_by_default(self) -> None:
        assert FakeClock().now() == PINNED_AT

    def test_accepts_iso_instant(self) -> None:
        assert FakeClock("2025-01-10T06:30:00+00:00").now() == datetime(2025, 1, 10, 6, 30, tzinfo=UTC)

    def test_naive_iso_instant_rejected(self) -> None:
        with pytest.raises(ValueError):
            FakeClock("2025-01-10T06:30:00")

    def test_days_from_now_does_not_move_clock(self) -> None:
        clock = FakeClock()
        assert clock.days_from_now(-2) == datetime(2025, 6, 28, 8, 0, tzinfo=UTC)
        assert clock.now() == PINNED_AT

    def test_days_from_now_follows_advance(self) -> None:
        clock = FakeClock()
        clock.advance(days=1)
        assert clock.days_from_now(1) == datetime(2025, 7, 2, 8, 0, tzinfo=UTC)

    def test_instances_are_independent(self) -> None:
        first, second = FakeClock(), FakeClock()
        first.advance(hours=1)
        assert second.now() == PINNED_AT
