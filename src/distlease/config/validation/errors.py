"""Config validation errors raised while reading ``LEASE_*`` variables."""
from __future__ import annotations

from distlease.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """An environment variable could not be turned into a lease setting."""
    default_code = "config_error"

    def __init__(self, env_key: str, reason: str) -> None:
        super().__init__(f"{env_key}: {reason}", detail={"env_key": env_key})
        self.env_key = env_key


class MissingRequiredSettingError(ConfigError):
    """A field without a default has no environment variable."""
    default_code = "missing_required_setting"

    def __init__(self, env_key: str) -> None:
        super().__init__(env_key, "required but not set")


class InvalidSettingValueError(ConfigError):
    """The value parsed but fails ``Settings._validate``."""
    default_code = "invalid_setting_value"

    def __init__(self, env_key: str, value: object, reason: str) -> None:
        super().__init__(env_key, f"{value!r} {reason}")
        self.detail["value"] = value
        self.value = value


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
