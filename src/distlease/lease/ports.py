"""Lease – store ports.

Each operation must be atomic on the store side. Values are the decimal string
of an absolute expiry timestamp in milliseconds since the epoch.
"""
from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class LeaseStore(Protocol):
    """Port: the five single-key primitives a lease needs."""

    async def set_if_absent(self, key: str, value: str) -> bool: ...

    async def set_expiry_hint(self, key: str, seconds: int) -> None: ...

    async def get(self, key: str) -> str | None: ...

    async def atomic_swap(self, key: str, new_value: str) -> str | None: ...

    async def delete(self, key: str) -> None: ...


@runtime_checkable
class ConditionalLeaseStore(LeaseStore, Protocol):
    """Port: a store that can also set a key only if it holds an expected value."""

    async def compare_and_set(self, key: str, expected: str, new_value: str) -> bool: ...


__all__ = ["ConditionalLeaseStore", "LeaseStore"]
