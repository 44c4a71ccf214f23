"""Lease – DistributedLease.

A lease is a key whose value is the absolute expiry time (epoch millis) of the
current holder. Acquisition never blocks and never retries; see
:class:`distlease.lease.waiter.LeaseWaiter` for caller-side polling.
"""
from __future__ import annotations

import contextlib
from typing import AsyncIterator

from distlease.kernel.errors import LeaseUnavailableError, ValidationError
from distlease.kernel.time import Clock, SystemClock
from distlease.lease.ports import ConditionalLeaseStore, LeaseStore
from distlease.lease.registry import LeaseRecord, LeaseRegistry
from distlease.observability.logging import get_logger

logger = get_logger(__name__)


class DistributedLease:
    """Named, expiring mutual-exclusion lock backed by a :class:`LeaseStore`.

    Args:
        store: Shared store adapter; all mutation goes through its atomic primitives.
        clock: Time source for expiry checks (defaults to :class:`SystemClock`).
        registry: Per-context ownership records consulted by :meth:`release`.
        use_compare_and_set: Seize expired leases through
            ``compare_and_set`` when *store* supports it.
    """

    def __init__(
        self,
        store: LeaseStore,
        *,
        clock: Clock | None = None,
        registry: LeaseRegistry | None = None,
        use_compare_and_set: bool = True,
    ) -> None:
        self._store = store
        self._clock: Clock = clock or SystemClock()
        self._registry = registry if registry is not None else LeaseRegistry()
        self._conditional: ConditionalLeaseStore | None = None
        if use_compare_and_set and isinstance(store, ConditionalLeaseStore):
            self._conditional = store

    @property
    def registry(self) -> LeaseRegistry:
        return self._registry

    @property
    def clock(self) -> Clock:
        return self._clock

    async def try_acquire(self, key: str, lease_duration_seconds: int) -> bool:
        """Make one attempt to take *key* for *lease_duration_seconds*.

        Returns ``False`` when another context holds an unexpired lease or wins
        the race to seize an expired one. Store errors from ``set_if_absent``,
        ``get``, ``atomic_swap`` and ``compare_and_set`` propagate.
        """
        return await self._take(key, lease_duration_seconds) is not None

    async def release(self, key: str) -> None:
        """Give up *key* if this context still owns it.

        Ownership is scoped to the execution context that acquired the lease:
        a lease taken inside a child task (``asyncio.gather``,
        ``asyncio.create_task``, ``asyncio.wait_for``) is unknown to the parent,
        so releasing it from the parent is a no-op and the key lingers until
        its stored expiry passes. Release from the acquiring task instead.

        Safe to call repeatedly or for a key that was never acquired. When the
        declared duration has already elapsed the key is left alone, since
        another context may have seized it in the meantime.
        """
        record = self._registry.remove(key)
        if record is None:
            logger.debug("lease.release_unowned", key=key)
            return
        if record.elapsed(self._clock.millis()):
            logger.info("lease.release_skipped", key=key, reason="duration_elapsed")
            return
        try:
            await self._store.delete(key)
        except Exception as exc:  # noqa: BLE001
            logger.warning("lease.delete_failed", key=key, error=repr(exc))
            return
        logger.debug("lease.released", key=key)

    @contextlib.asynccontextmanager
    async def hold(self, key: str, lease_duration_seconds: int) -> AsyncIterator[LeaseRecord]:
        """Hold *key* for the duration of the ``async with`` block.

        Raises:
            LeaseUnavailableError: the lease is held by someone else.
        """
        record = await self._take(key, lease_duration_seconds)
        if record is None:
            raise LeaseUnavailableError(key)
        try:
            yield record
        finally:
            await self.release(key)

    async def expires_in_millis(self, key: str) -> int | None:
        """Milliseconds until the current holder's lease on *key* expires.

        ``None`` when the key is absent or its value is not a timestamp. A
        value ``<= 0`` means the lease is already seizable.
        """
        expires_at = self._parse(key, await self._store.get(key))
        if expires_at is None:
            return None
        return expires_at - self._clock.millis()

    async def _take(self, key: str, seconds: int) -> LeaseRecord | None:
        _check_duration(seconds)
        if not await self._acquire(key, seconds):
            return None
        record = LeaseRecord(
            key=key,
            lease_duration_millis=seconds * 1000,
            acquired_at_millis=self._clock.millis(),
        )
        self._registry.put(key, record)
        return record

    async def _acquire(self, key: str, seconds: int) -> bool:
        expires_at = self._clock.millis() + seconds * 1000 + 1
        value = str(expires_at)

        if await self._store.set_if_absent(key, value):
            await self._hint_expiry(key, seconds)
            logger.debug("lease.acquired", key=key, expires_at=expires_at)
            return True

        current = await self._store.get(key)
        if current is None or not self._is_expired(key, current):
            return False

        if self._conditional is not None:
            won = await self._conditional.compare_and_set(key, current, value)
        else:
            # Only the first swap among racers can still see an expired value.
            previous = await self._store.atomic_swap(key, value)
            won = previous is not None and self._is_expired(key, previous)

        if not won:
            logger.debug("lease.seize_lost", key=key)
            return False
        await self._hint_expiry(key, seconds)
        logger.debug("lease.seized", key=key, previous_expiry=current, expires_at=expires_at)
        return True

    async def _hint_expiry(self, key: str, seconds: int) -> None:
        try:
            await self._store.set_expiry_hint(key, seconds)
        except Exception as exc:  # noqa: BLE001
            logger.warning("lease.expiry_hint_failed", key=key, error=repr(exc))

    def _parse(self, key: str, value: str | None) -> int | None:
        if value is None:
            return None
        try:
            return int(value)
        except ValueError:
            logger.warning("lease.malformed_value", key=key, value=value)
            return None

    def _is_expired(self, key: str, value: str) -> bool:
        expires_at = self._parse(key, value)
        return expires_at is not None and self._clock.millis() > expires_at


def _check_duration(seconds: int) -> None:
    if isinstance(seconds, bool) or not isinstance(seconds, int) or seconds <= 0:
        raise ValidationError("lease_duration_seconds", seconds, "must be a positive integer")


__all__ = ["DistributedLease"]
