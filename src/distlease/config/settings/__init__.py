"""Config settings – env-based lease configuration."""
from distlease.config.settings.base import LeaseSettings, Settings
from distlease.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EnvSettingsLoader", "LeaseSettings", "Settings", "SettingsLoader"]
