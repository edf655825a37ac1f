"""Config – 12-factor settings and loaders."""

from fleetlist.config.settings import (
    EnvSettingsLoader,
    ListingSettings,
    Settings,
    SettingsFactory,
    SettingsLoader,
)
from fleetlist.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "ListingSettings",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
]
