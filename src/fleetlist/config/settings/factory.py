"""Config settings – SettingsFactory."""
from __future__ import annotations

from typing import Any, Mapping, Sequence, TypeVar

from fleetlist.config.settings.base import Settings
from fleetlist.config.settings.loaders import SettingsLoader, build_settings

T = TypeVar("T", bound=Settings)


class SettingsFactory:
    """Layer several settings sources into one validated instance.

    Precedence, lowest first: dataclass defaults, each loader in order,
    then *overrides*.  Only values a source actually supplies take part,
    so an empty environment never resets an earlier loader's value.

    Example::

        settings = SettingsFactory.create(
            ListingSettings,
            loaders=[EnvSettingsLoader()],
            overrides={"max_take": 50},
        )
    """

    @staticmethod
    def create(
        settings_cls: type[T],
        loaders: Sequence[SettingsLoader] | None = None,
        overrides: Mapping[str, Any] | None = None,
    ) -> T:
        merged: dict[str, Any] = {}
        for loader in loaders or ():
            merged.update(loader.values(settings_cls))
        merged.update(overrides or {})
        return build_settings(settings_cls, merged)


__all__ = ["SettingsFactory"]
