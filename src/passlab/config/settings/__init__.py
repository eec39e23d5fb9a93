"""Config settings – 12-factor env-based configuration."""
from passlab.config.settings.base import Settings
from passlab.config.settings.hasher import HasherSettings
from passlab.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "HasherSettings",
    "Settings",
    "SettingsLoader",
]
