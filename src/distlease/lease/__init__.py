"""Lease – distributed, expiring mutual exclusion over a shared store."""
from distlease.lease.lease import DistributedLease
from distlease.lease.ports import ConditionalLeaseStore, LeaseStore
from distlease.lease.registry import LeaseRecord, LeaseRegistry
from distlease.lease.waiter import LeaseWaiter

__all__ = [
    "ConditionalLeaseStore",
    "DistributedLease",
    "LeaseRecord",
    "LeaseRegistry",
    "LeaseStore",
    "LeaseWaiter",
]
