"""Domain layer – entity-specific listing vocabularies."""
