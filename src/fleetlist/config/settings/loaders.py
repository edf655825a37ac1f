"""Config settings – SettingsLoader port and EnvSettingsLoader.

A loader reports only the fields its source actually sets, so several
loaders can be layered by :class:`~fleetlist.config.settings.factory.SettingsFactory`
without one source's defaults masking another's values.
"""
from __future__ import annotations

import abc
import dataclasses
import os
from typing import Any, Mapping, TypeVar

from fleetlist.config.settings.base import Settings
from fleetlist.config.validation import ConfigError, MissingRequiredSettingError

T = TypeVar("T", bound=Settings)

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off"})


def build_settings(settings_class: type[T], values: Mapping[str, Any]) -> T:
    """Construct *settings_class* from *values*, failing with a :class:`ConfigError`."""
    for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
        if field.name in values:
            continue
        if field.default is dataclasses.MISSING and field.default_factory is dataclasses.MISSING:
            raise MissingRequiredSettingError(field.name)
    try:
        return settings_class(**values)
    except ConfigError:
        raise
    except TypeError as exc:
        raise ConfigError(f"Cannot build {settings_class.__name__}: {exc}", cause=exc) from exc


class SettingsLoader(abc.ABC):
    """Port: read settings values from one external source."""

    @abc.abstractmethod
    def values(self, settings_class: type[Settings]) -> dict[str, Any]:
        """Field name → typed value for every field this source sets."""

    def load(self, settings_class: type[T]) -> T:
        return build_settings(settings_class, self.values(settings_class))


class EnvSettingsLoader(SettingsLoader):
    """Read ``{PREFIX}_{FIELD}`` environment variables.

    ``environ`` defaults to ``os.environ``; tests pass a plain dict.
    Values are coerced to the field's declared ``bool``/``int``/``float``
    type; anything else is passed through as a string.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def values(self, settings_class: type[Settings]) -> dict[str, Any]:
        environ = os.environ if self._environ is None else self._environ
        prefix = settings_class._prefix.upper()
        found: dict[str, Any] = {}
        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            key = f"{prefix}_{field.name}".upper() if prefix else field.name.upper()
            if key in environ:
                found[field.name] = _coerce(key, environ[key], field.type)
        return found


def _type_name(type_hint: Any) -> str:
    # annotations are strings under ``from __future__ import annotations``
    return type_hint if isinstance(type_hint, str) else getattr(type_hint, "__name__", "")


def _coerce(key: str, raw: str, type_hint: Any) -> Any:
    kind = _type_name(type_hint)
    text = raw.strip()
    if kind == "bool":
        lowered = text.lower()
        if lowered in _TRUE:
            return True
        if lowered in _FALSE:
            return False
        raise ConfigError(f"{key} must be a boolean, got {raw!r}")
    if kind in ("int", "float"):
        try:
            return int(text) if kind == "int" else float(text)
        except ValueError as exc:
            raise ConfigError(f"{key} must be {kind}, got {raw!r}", cause=exc) from exc
    return raw


__all__ = ["EnvSettingsLoader", "SettingsLoader", "build_settings"]
