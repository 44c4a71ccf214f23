"""Testing fixtures – pytest plugin for lease tests."""
from distlease.testing.fixtures.lease import fake_clock, lease, lease_store

__all__ = ["fake_clock", "lease", "lease_store"]
