"""Testing support – in-memory lease store, fake clock, pytest fixtures.

Import in your ``conftest.py``::

    pytest_plugins = ["distlease.testing.fixtures"]
"""

from distlease.testing.fakes import (
    FakeClock,
    InMemoryConditionalLeaseStore,
    InMemoryLeaseStore,
)

__all__ = ["FakeClock", "InMemoryConditionalLeaseStore", "InMemoryLeaseStore"]
