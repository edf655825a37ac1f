"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from typing import ClassVar


@dataclasses.dataclass
class Settings:
    """Base class for env-driven settings dataclasses.

    ``_prefix`` names the environment namespace read by
    :class:`~fleetlist.config.settings.loaders.EnvSettingsLoader`; it is a
    class attribute, never a constructor field.  Subclasses put their
    cross-field checks in :meth:`_validate`, which runs on every
    construction so an invalid instance never exists.
    """

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Raise :class:`~fleetlist.config.validation.InvalidSettingValueError` on bad values."""


__all__ = ["Settings"]
