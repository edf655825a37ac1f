"""Config settings – ListingSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from fleetlist.config.settings.base import Settings
from fleetlist.config.validation.errors import InvalidSettingValueError

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclasses.dataclass
class ListingSettings(Settings):
    """Pagination and ordering defaults shared by every list endpoint.

    Environment variables use the ``LISTING_`` prefix, e.g.
    ``LISTING_MAX_TAKE=50``.
    """

    _prefix: ClassVar[str] = "LISTING"

    default_take: int = 20
    max_take: int = 100
    default_sort_field: str = "created_at"
    default_sort_order: str = "desc"
    tie_break_field: str = "id"
    expiring_soon_days: int = 30
    log_level: str = "INFO"

    def _validate(self) -> None:
        if self.max_take < 1:
            raise InvalidSettingValueError("max_take", self.max_take, "must be >= 1")
        if not 1 <= self.default_take <= self.max_take:
            raise InvalidSettingValueError(
                "default_take", self.default_take, f"must be between 1 and max_take ({self.max_take})"
            )
        if self.default_sort_order not in ("asc", "desc"):
            raise InvalidSettingValueError(
                "default_sort_order", self.default_sort_order, "must be 'asc' or 'desc'"
            )
        if not self.tie_break_field:
            raise InvalidSettingValueError("tie_break_field", self.tie_break_field, "must not be empty")
        if self.expiring_soon_days < 0:
            raise InvalidSettingValueError(
                "expiring_soon_days", self.expiring_soon_days, "must be >= 0"
            )
        if self.log_level.upper() not in _LOG_LEVELS:
            raise InvalidSettingValueError(
                "log_level", self.log_level, f"must be one of: {', '.join(_LOG_LEVELS)}"
            )


__all__ = ["ListingSettings"]
