"""Unit tests for observability logging."""

from __future__ import annotations

import logging

import structlog
from structlog.testing import capture_logs

from fleetlist.config import EnvSettingsLoader, ListingSettings
from fleetlist.observability.logging import JsonLoggerFactory, bind_listing_context, get_logger


class TestJsonLoggerFactory:
    def setup_method(self) -> None:
        root = logging.getLogger()
        self._handlers = list(root.handlers)
        self._level = root.level

    def teardown_method(self) -> None:
        root = logging.getLogger()
        root.handlers[:] = self._handlers
        root.setLevel(self._level)
        structlog.reset_defaults()

    def test_configure_sets_root_level(self) -> None:
        JsonLoggerFactory.configure(logging.WARNING)
        assert logging.getLogger().level == logging.WARNING

    def test_configure_accepts_level_name(self) -> None:
        JsonLoggerFactory.configure("debug")
        assert logging.getLogger().level == logging.DEBUG

    def test_configure_installs_single_handler(self) -> None:
        JsonLoggerFactory.configure(json=False)
        assert len(logging.getLogger().handlers) == 1

    def test_from_settings_uses_log_level(self) -> None:
        JsonLoggerFactory.from_settings(ListingSettings(log_level="error"), json=False)
        assert logging.getLogger().level == logging.ERROR

    def test_from_settings_reads_env_level(self) -> None:
        settings = EnvSettingsLoader({"LISTING_LOG_LEVEL": "WARNING"}).load(ListingSettings)
        JsonLoggerFactory.from_settings(settings)
        assert logging.getLogger().level == logging.WARNING


class TestGetLogger:
    def test_bound_values_appear_in_events(self) -> None:
        with capture_logs() as logs:
            log = get_logger("fleetlist.test", component="pipeline")
            log.info("listing.fetch", take=20)
        assert logs[0]["event"] == "listing.fetch"
        assert logs[0]["component"] == "pipeline"
        assert logs[0]["take"] == 20


class TestBindListingContext:
    def test_context_is_scoped(self) -> None:
        with bind_listing_context(entity="vehicle"):
            assert structlog.contextvars.get_contextvars()["entity"] == "vehicle"
        assert "entity" not in structlog.contextvars.get_contextvars()
