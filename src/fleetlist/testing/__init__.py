"""Testing – in-memory doubles for fleetlist ports."""
