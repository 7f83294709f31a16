"""Config settings – 12-factor env-based configuration."""
from cachepool.config.settings.base import Settings
from cachepool.config.settings.loaders import EnvSettingsLoader, SettingsLoader
from cachepool.config.settings.pool import BACKENDS, CachePoolSettings

__all__ = ["BACKENDS", "CachePoolSettings", "EnvSettingsLoader", "Settings", "SettingsLoader"]
