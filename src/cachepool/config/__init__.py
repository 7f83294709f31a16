"""Config – 12-factor settings and loaders."""

from cachepool.config.settings import CachePoolSettings, EnvSettingsLoader, Settings, SettingsLoader
from cachepool.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "CachePoolSettings",
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
