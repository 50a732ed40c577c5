"""Config – 12-factor settings and loaders."""

from wooflux.config.errors import ConfigError, InvalidSettingValueError, MissingRequiredSettingError
from wooflux.config.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from wooflux.config.settings import Settings, WoofluxSettings

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
    "WoofluxSettings",
]
