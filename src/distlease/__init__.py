"""
distlease – expiring, best-effort distributed locks over a shared key-value store.

Import path convention::

    from distlease.lease import DistributedLease, LeaseRegistry
    from distlease.adapters.redis import RedisLeaseStore
    from distlease.config import LeaseSettings, build_lease
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
