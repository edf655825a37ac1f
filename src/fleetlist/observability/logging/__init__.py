"""Observability – structured logging helpers."""
from fleetlist.observability.logging.factory import JsonLoggerFactory
from fleetlist.observability.logging.processors import bind_listing_context, get_logger

__all__ = ["JsonLoggerFactory", "bind_listing_context", "get_logger"]
