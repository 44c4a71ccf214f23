"""Config – build a DistributedLease from LeaseSettings."""
from __future__ import annotations

from distlease.adapters.redis import RedisLeaseStore
from distlease.config.settings import EnvSettingsLoader, LeaseSettings
from distlease.kernel.time import Clock
from distlease.lease import DistributedLease, LeaseRegistry


def build_lease(
    settings: LeaseSettings | None = None,
    *,
    clock: Clock | None = None,
    registry: LeaseRegistry | None = None,
) -> DistributedLease:
    """Wire a Redis-backed :class:`DistributedLease`.

    Settings default to whatever ``LEASE_*`` environment variables say.
    """
    settings = settings or EnvSettingsLoader().load(LeaseSettings)
    store = RedisLeaseStore(
        settings.redis_url,
        key_prefix=settings.key_prefix,
        socket_timeout=settings.socket_timeout_seconds,
    )
    return DistributedLease(
        store,
        clock=clock,
        registry=registry,
        use_compare_and_set=settings.use_compare_and_set,
    )


__all__ = ["build_lease"]
