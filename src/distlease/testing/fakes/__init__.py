"""Testing fakes – in-memory doubles for lease ports."""
from distlease.kernel.time import FrozenClock
from distlease.testing.fakes.clock import FakeClock
from distlease.testing.fakes.store import InMemoryConditionalLeaseStore, InMemoryLeaseStore

__all__ = [
    "FakeClock",
    "FrozenClock",
    "InMemoryConditionalLeaseStore",
    "InMemoryLeaseStore",
]
