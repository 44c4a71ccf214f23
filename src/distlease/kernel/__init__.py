"""Kernel – framework-agnostic building blocks (errors, time)."""

from distlease.kernel.errors import (
    ApplicationError,
    BaseError,
    ConflictError,
    DomainError,
    InfrastructureError,
    LeaseUnavailableError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "ConflictError",
    "DomainError",
    "InfrastructureError",
    "LeaseUnavailableError",
    "ValidationError",
]
