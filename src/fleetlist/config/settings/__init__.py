"""Config settings – 12-factor env-based configuration."""
from fleetlist.config.settings.base import Settings
from fleetlist.config.settings.factory import SettingsFactory
from fleetlist.config.settings.listing import ListingSettings
from fleetlist.config.settings.loaders import EnvSettingsLoader, SettingsLoader, build_settings

__all__ = [
    "EnvSettingsLoader",
    "ListingSettings",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
    "build_settings",
]
