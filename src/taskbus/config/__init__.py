"""Config – 12-factor settings and loaders."""

from taskbus.config.bus import BusSettings
from taskbus.config.settings import EnvSettingsLoader, Settings, SettingsLoader
from taskbus.config.errors import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

__all__ = [
    "BusSettings",
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
