"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   ├── ValidationError
    │   └── ConflictError
    │       └── LeaseUnavailableError
    ├── ApplicationError     (application.py)
    └── InfrastructureError  (infrastructure.py)
        ├── ConnectionError
        └── TimeoutError

Losing a lease race is *not* an error: ``DistributedLease.try_acquire`` returns
``False``. Only ``DistributedLease.hold`` turns contention into
:class:`LeaseUnavailableError`.
"""

from distlease.kernel.errors.application import ApplicationError
from distlease.kernel.errors.base import BaseError
from distlease.kernel.errors.domain import (
    ConflictError,
    DomainError,
    LeaseUnavailableError,
    ValidationError,
)
from distlease.kernel.errors.infrastructure import (
    ConnectionError,
    InfrastructureError,
)
from distlease.kernel.errors.infrastructure import TimeoutError as InfrastructureTimeoutError

__all__ = [
    "ApplicationError",
    "BaseError",
    "ConflictError",
    "ConnectionError",
    "DomainError",
    "InfrastructureError",
    "InfrastructureTimeoutError",
    "LeaseUnavailableError",
    "ValidationError",
]
