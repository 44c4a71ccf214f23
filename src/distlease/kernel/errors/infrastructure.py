"""Infrastructure errors — the lease store misbehaved."""

from __future__ import annotations

from distlease.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """A store operation failed for reasons unrelated to lease contention."""

    default_code = "infrastructure_error"

    def __init__(self, resource: str, operation: str, message: str) -> None:
        super().__init__(message, detail={"resource": resource, "operation": operation})
        self.resource = resource
        self.operation = operation


class ConnectionError(InfrastructureError):  # noqa: A001
    """The lease store could not be reached."""

    default_code = "connection_error"

    def __init__(self, resource: str, operation: str) -> None:
        super().__init__(resource, operation, f"Could not reach '{resource}' during {operation}")


class TimeoutError(InfrastructureError):  # noqa: A001
    """A store operation exceeded its socket timeout."""

    default_code = "infrastructure_timeout"

    def __init__(self, resource: str, operation: str) -> None:
        super().__init__(resource, operation, f"'{resource}' timed out during {operation}")


__all__ = [
    "ConnectionError",
    "InfrastructureError",
    "TimeoutError",
]
