"""Lease – caller-side waiting for a busy lease.

``DistributedLease.try_acquire`` makes exactly one attempt. A ``LeaseWaiter``
retries on the caller's behalf, sleeping until just past the holder's stored
expiry rather than polling blindly: the lease cannot change hands earlier
unless the holder releases it, and ``poll_millis`` caps each nap so an early
release is still noticed.
"""
from __future__ import annotations

import asyncio
import random
from typing import Awaitable, Callable

from distlease.kernel.errors import ValidationError
from distlease.lease.lease import DistributedLease
from distlease.observability.logging import get_logger

logger = get_logger(__name__)


class LeaseWaiter:
    """Wait up to ``timeout_seconds`` (on the lease's clock) for *key*.

    Args:
        lease: The lease to acquire through.
        timeout_seconds: Give up once this much lease-clock time has passed.
        poll_millis: Longest single nap; also the nap when the stored value
            gives no expiry to aim for.
        spread_millis: Random extra delay so released waiters do not all
            retry in the same instant.
        sleep: Awaitable sleep in seconds.
    """

    def __init__(
        self,
        lease: DistributedLease,
        timeout_seconds: float = 10.0,
        *,
        poll_millis: int = 250,
        spread_millis: int = 25,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        if timeout_seconds <= 0:
            raise ValidationError("timeout_seconds", timeout_seconds, "must be positive")
        if poll_millis < 1:
            raise ValidationError("poll_millis", poll_millis, "must be at least 1")
        self._lease = lease
        self._timeout_millis = int(timeout_seconds * 1000)
        self._poll_millis = poll_millis
        self._spread_millis = spread_millis
        self._sleep = sleep

    async def acquire(self, key: str, lease_duration_seconds: int) -> bool:
        """Return ``True`` once the lease is taken, ``False`` on timeout."""
        clock = self._lease.clock
        deadline = clock.millis() + self._timeout_millis
        while True:
            if await self._lease.try_acquire(key, lease_duration_seconds):
                return True
            now = clock.millis()
            if now >= deadline:
                logger.debug("lease.wait_timed_out", key=key)
                return False
            delay = min(await self._next_delay(key), deadline - now)
            logger.debug("lease.wait", key=key, delay_ms=delay)
            await self._sleep(delay / 1000)

    async def _next_delay(self, key: str) -> int:
        remaining = await self._lease.expires_in_millis(key)
        if remaining is None or remaining < 0:
            # freed, malformed, or just seized by another waiter
            delay = self._poll_millis
        else:
            # the lease is seizable once now > stored expiry
            delay = min(remaining + 1, self._poll_millis)
        if self._spread_millis:
            delay += random.randint(0, self._spread_millis)
        return delay


__all__ = ["LeaseWaiter"]
