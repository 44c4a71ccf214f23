"""Redis adapter – lease store over SETNX / EXPIRE / GET / GETSET / DEL."""
from distlease.adapters.redis.store import RedisLeaseStore

__all__ = ["RedisLeaseStore"]
