"""Redis adapter – RedisLeaseStore."""
from __future__ import annotations

from typing import Any, Awaitable, Callable, TypeVar

import redis.asyncio as aioredis
from redis import exceptions as redis_exc

from distlease.kernel.errors import ConnectionError, InfrastructureTimeoutError

T = TypeVar("T")

_COMPARE_AND_SET = """
if redis.call("GET", KEYS[1]) == ARGV[1] then
    redis.call("SET", KEYS[1], ARGV[2])
    return 1
else
    return 0
end
"""


def _decode(raw: Any) -> str | None:
    if raw is None:
        return None
    if isinstance(raw, bytes):
        return raw.decode("utf-8")
    return str(raw)


class RedisLeaseStore:
    """Async lease store on a Redis connection.

    Implements both :class:`~distlease.lease.ports.LeaseStore` and
    :class:`~distlease.lease.ports.ConditionalLeaseStore`; conditional set runs
    as a Lua script so the compare and the write are one server-side step.

    Connection and timeout failures surface as
    :class:`~distlease.kernel.errors.ConnectionError` and
    :class:`~distlease.kernel.errors.InfrastructureTimeoutError`.
    """

    def __init__(
        self,
        url: str | None = None,
        *,
        client: Any = None,
        key_prefix: str = "lease:",
        **kwargs: Any,
    ) -> None:
        if client is None:
            if url is None:
                raise ValueError("RedisLeaseStore needs either a url or a client")
            client = aioredis.from_url(url, **kwargs)
        self._client = client
        self._prefix = key_prefix

    def _key(self, key: str) -> str:
        return f"{self._prefix}{key}"

    async def _call(self, operation: str, op: Callable[[], Awaitable[T]]) -> T:
        try:
            return await op()
        except redis_exc.TimeoutError as exc:
            raise InfrastructureTimeoutError("redis", operation) from exc
        except redis_exc.ConnectionError as exc:
            raise ConnectionError("redis", operation) from exc

    async def set_if_absent(self, key: str, value: str) -> bool:
        return bool(await self._call("setnx", lambda: self._client.setnx(self._key(key), value)))

    async def set_expiry_hint(self, key: str, seconds: int) -> None:
        await self._call("expire", lambda: self._client.expire(self._key(key), seconds))

    async def get(self, key: str) -> str | None:
        return _decode(await self._call("get", lambda: self._client.get(self._key(key))))

    async def atomic_swap(self, key: str, new_value: str) -> str | None:
        return _decode(await self._call("getset", lambda: self._client.getset(self._key(key), new_value)))

    async def compare_and_set(self, key: str, expected: str, new_value: str) -> bool:
        result = await self._call(
            "compare_and_set", lambda: self._client.eval(_COMPARE_AND_SET, 1, self._key(key), expected, new_value)
        )
        return bool(int(result))

    async def delete(self, key: str) -> None:
        await self._call("delete", lambda: self._client.delete(self._key(key)))

    async def close(self) -> None:
        await self._client.aclose()


__all__ = ["RedisLeaseStore"]
