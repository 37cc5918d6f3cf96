"""Config – 12-factor settings and loaders for the flag resolver."""

from mp_devconfig.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    ResolverSettings,
    Settings,
    SettingsLoader,
)
from mp_devconfig.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "ResolverSettings",
    "Settings",
    "SettingsLoader",
]
