"""Domain errors — invalid lease requests and lease contention."""

from __future__ import annotations

from distlease.kernel.errors.base import BaseError


class DomainError(BaseError):
    """A lease request broke a lease rule."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """An argument to a lease operation is out of range."""

    default_code = "validation_error"

    def __init__(self, field: str, value: object, reason: str) -> None:
        super().__init__(
            f"{field}={value!r} {reason}",
            detail={"field": field, "value": value},
        )
        self.field = field
        self.value = value


class ConflictError(DomainError):
    """The operation conflicts with existing state."""

    default_code = "conflict"


class LeaseUnavailableError(ConflictError):
    """Another execution context currently holds the lease."""

    default_code = "lease_unavailable"

    def __init__(self, key: str) -> None:
        super().__init__(f"Could not acquire lease '{key}'", detail={"key": key})
        self.key = key


__all__ = [
    "ConflictError",
    "DomainError",
    "LeaseUnavailableError",
    "ValidationError",
]
