"""Config – 12-factor lease settings and wiring."""

from distlease.config.factory import build_lease
from distlease.config.settings import EnvSettingsLoader, LeaseSettings, Settings, SettingsLoader
from distlease.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "LeaseSettings",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
    "build_lease",
]
