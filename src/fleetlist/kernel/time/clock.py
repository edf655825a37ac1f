"""Kernel time – Clock port, system clock and frozen clock."""
from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Protocol


def utc_now() -> datetime:
    """Current time as an aware UTC ``datetime``."""
    return datetime.now(UTC)


class Clock(Protocol):
    """Source of "now" for time-relative business filters."""

    def now(self) -> datetime: ...


class SystemClock:
    def now(self) -> datetime:
        return utc_now()


class FrozenClock:
    """Clock that only moves when told to.

    Example::

        clock = FrozenClock(datetime(2026, 1, 1, tzinfo=UTC))
        clock.advance(days=31)
    """

    def __init__(self, fixed: datetime) -> None:
        if fixed.tzinfo is None:
            raise ValueError("FrozenClock needs an aware datetime")
        self._now = fixed

    def now(self) -> datetime:
        return self._now

    def advance(self, **delta: float) -> None:
        """Move forward by ``timedelta(**delta)``."""
        self._now = self._now + timedelta(**delta)


__all__ = ["Clock", "FrozenClock", "SystemClock", "utc_now"]
