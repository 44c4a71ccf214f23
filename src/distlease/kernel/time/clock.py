"""Kernel time – Clock protocol + implementations.

Lease expiry is compared in whole milliseconds since the epoch, so every clock
exposes :meth:`Clock.millis` next to the usual ``now()``.
"""
from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Protocol

_UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
_ONE_MS = timedelta(milliseconds=1)


def _to_millis(moment: datetime) -> int:
    # integer division keeps sub-second offsets exact, unlike float timestamps
    return (moment - _UNIX_EPOCH) // _ONE_MS


class Clock(Protocol):
    """Port: abstract clock for deterministic testing."""

    def now(self) -> datetime: ...
    def millis(self) -> int: ...


class SystemClock:
    """Production clock that delegates to ``datetime.now(UTC)``."""

    def now(self) -> datetime:
        return datetime.now(UTC)

    def millis(self) -> int:
        return _to_millis(datetime.now(UTC))


class FrozenClock:
    """Test clock pinned to a fixed point in time."""

    def __init__(self, fixed: datetime) -> None:
        self._fixed = fixed

    def now(self) -> datetime:
        return self._fixed

    def millis(self) -> int:
        return _to_millis(self._fixed)

    def advance(self, **kwargs: int | float) -> None:
        """Advance the frozen time by the given ``timedelta`` kwargs."""
        self._fixed += timedelta(**kwargs)


__all__ = ["Clock", "FrozenClock", "SystemClock"]
