"""Unit tests for kernel time utilities."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from fleetlist.kernel.time import Clock, FrozenClock, SystemClock, utc_now


class TestSystemClock:
    def test_now_returns_utc_aware_datetime(self) -> None:
        result = SystemClock().now()
        assert isinstance(result, datetime)
        assert result.utcoffset() == timedelta(0)

    def test_satisfies_clock_protocol(self) -> None:
        clock: Clock = SystemClock()
        assert clock.now() <= utc_now()


class TestFrozenClock:
    def test_now_is_fixed(self) -> None:
        fixed = datetime(2025, 6, 1, 9, 30, tzinfo=UTC)
        clock = FrozenClock(fixed)
        assert clock.now() == fixed
        assert clock.now() == fixed

    def test_advance(self) -> None:
        clock = FrozenClock(datetime(2025, 6, 1, tzinfo=UTC))
        clock.advance(days=2, hours=3)
        assert clock.now() == datetime(2025, 6, 3, 3, tzinfo=UTC)

    def test_naive_datetime_rejected(self) -> None:
        with pytest.raises(ValueError):
            FrozenClock(datetime(2025, 6, 1))
