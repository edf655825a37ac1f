"""Testing fakes – in-memory doubles for listing ports."""
from fleetlist.kernel.time import FrozenClock
from fleetlist.testing.fakes.clock import PINNED_AT, FakeClock
from fleetlist.testing.fakes.listing_store import InMemoryListingStore, evaluate

__all__ = ["FakeClock", "FrozenClock", "InMemoryListingStore", "PINNED_AT", "evaluate"]
