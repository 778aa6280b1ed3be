"""Config settings – 12-factor env-based configuration."""
from taskbus.config.settings.base import Settings
from taskbus.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EnvSettingsLoader", "Settings", "SettingsLoader"]
