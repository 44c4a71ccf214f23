"""Integration tests for the Redis lease store.

Uses testcontainers to spawn a real Redis instance.
Run with: pytest tests/integration/test_redis_lease.py -m integration -v
"""
from __future__ import annotations

import asyncio

import pytest
from testcontainers.redis import RedisContainer

from distlease.adapters.redis import RedisLeaseStore
from distlease.kernel.errors import LeaseUnavailableError
from distlease.lease import DistributedLease
from distlease.testing.fakes import FakeClock


def _run(coro):  # type: ignore[no-untyped-def]
    return asyncio.run(coro)


def _redis_url(container) -> str:  # type: ignore[no-untyped-def]
    host = container.get_container_host_ip()
    port = container.get_exposed_port(container.port)
    return f"redis://{host}:{port}/0"


@pytest.mark.integration
class TestRedisLeaseIntegration:
    """Real Redis lease tests."""

    def test_acquire_release_round_trip(self) -> None:
        with RedisContainer() as container:
            url = _redis_url(container)

            async def run() -> None:
                store = RedisLeaseStore(url)
                lease = DistributedLease(store)
                assert await lease.try_acquire("res-1", 5) is True
                assert await store.get("res-1") is not None
                await lease.release("res-1")
                assert await store.get("res-1") is None
                await store.close()

            _run(run())

    def test_second_context_is_refused(self) -> None:
        with RedisContainer() as container:
            url = _redis_url(container)

            async def run() -> None:
                store = RedisLeaseStore(url)
                first, second = DistributedLease(store), DistributedLease(store)
                assert await first.try_acquire("res-2", 5) is True
                assert await second.try_acquire("res-2", 5) is False
                with pytest.raises(LeaseUnavailableError):
                    async with second.hold("res-2", 5):
                        pass  # pragma: no cover
                await first.release("res-2")
                await store.close()

            _run(run())

    @pytest.mark.parametrize("use_cas", [True, False])
    def test_expired_lease_is_seized_by_exactly_one(self, use_cas: bool) -> None:
        with RedisContainer() as container:
            url = _redis_url(container)

            async def run() -> None:
                store = RedisLeaseStore(url)
                clock = FakeClock()
                holder = DistributedLease(store, clock=clock)
                assert await holder.try_acquire("res-3", 60) is True
                clock.advance(seconds=61)
                late = [
                    DistributedLease(store, clock=clock, use_compare_and_set=use_cas)
                    for _ in range(8)
                ]
                results = await asyncio.gather(*(lease.try_acquire("res-3", 60) for lease in late))
                assert results.count(True) == 1
                await store.close()

            _run(run())

    def test_expiry_hint_is_applied(self) -> None:
        with RedisContainer() as container:
            url = _redis_url(container)

            async def run() -> None:
                store = RedisLeaseStore(url, key_prefix="t:")
                lease = DistributedLease(store)
                await lease.try_acquire("res-4", 30)
                ttl = await store._client.ttl("t:res-4")  # noqa: SLF001
                assert 0 < ttl <= 30
                await store.close()

            _run(run())
