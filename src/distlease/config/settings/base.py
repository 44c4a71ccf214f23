"""Config settings – Settings base class and LeaseSettings."""
from __future__ import annotations

import dataclasses

from distlease.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: dataclasses.ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    @classmethod
    def env_key(cls, field_name: str) -> str:
        """Environment variable that feeds *field_name*."""
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class LeaseSettings(Settings):
    """Settings read from ``LEASE_*`` environment variables."""

    _prefix: dataclasses.ClassVar[str] = "LEASE"

    redis_url: str = "redis://localhost:6379/0"
    key_prefix: str = "lease:"
    socket_timeout_seconds: float = 5.0
    use_compare_and_set: bool = True

    def _validate(self) -> None:
        if self.socket_timeout_seconds <= 0:
            raise InvalidSettingValueError(
                self.env_key("socket_timeout_seconds"),
                self.socket_timeout_seconds,
                "must be positive",
            )
        if not self.redis_url.startswith(("redis://", "rediss://", "unix://")):
            raise InvalidSettingValueError(
                self.env_key("redis_url"), self.redis_url, "has an unsupported scheme"
            )


__all__ = ["LeaseSettings", "Settings"]
