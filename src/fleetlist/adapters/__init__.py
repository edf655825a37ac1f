"""Adapters – storage and HTTP integrations."""
