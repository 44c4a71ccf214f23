"""Lease – per-execution-context ownership bookkeeping."""
from __future__ import annotations

import dataclasses
from contextvars import ContextVar
from types import MappingProxyType
from typing import Mapping


@dataclasses.dataclass(frozen=True)
class LeaseRecord:
    """What one execution context remembers about a lease it acquired."""

    key: str
    lease_duration_millis: int
    acquired_at_millis: int

    def elapsed(self, now_millis: int) -> bool:
        """``True`` once the declared duration has run out at *now_millis*."""
        return now_millis - self.acquired_at_millis >= self.lease_duration_millis


_EMPTY: Mapping[str, LeaseRecord] = MappingProxyType({})


class LeaseRegistry:
    """Records which leases the *current* execution context believes it holds.

    State lives in a ``ContextVar`` holding an immutable mapping. ``put`` and
    ``remove`` publish a fresh mapping instead of mutating the current one, so a
    task spawned from this context starts with a snapshot and neither side ever
    sees the other's later changes.
    """

    def __init__(self, name: str = "distlease_registry") -> None:
        self._var: ContextVar[Mapping[str, LeaseRecord]] = ContextVar(name, default=_EMPTY)

    def put(self, key: str, record: LeaseRecord) -> None:
        records = dict(self._var.get())
        records[key] = record
        self._var.set(MappingProxyType(records))

    def remove(self, key: str) -> LeaseRecord | None:
        current = self._var.get()
        if key not in current:
            return None
        records = dict(current)
        record = records.pop(key)
        self._var.set(MappingProxyType(records))
        return record

    def get(self, key: str) -> LeaseRecord | None:
        return self._var.get().get(key)

    def keys(self) -> frozenset[str]:
        return frozenset(self._var.get())

    def __contains__(self, key: object) -> bool:
        return key in self._var.get()

    def __len__(self) -> int:
        return len(self._var.get())


__all__ = ["LeaseRecord", "LeaseRegistry"]
