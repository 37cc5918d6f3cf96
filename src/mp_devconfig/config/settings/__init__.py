"""Config settings – env-based configuration of the resolver policies."""
from mp_devconfig.config.settings.base import Settings
from mp_devconfig.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from mp_devconfig.config.settings.resolver import ResolverSettings

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "ResolverSettings", "Settings", "SettingsLoader"]
