"""Config – ``PASSLAB_*`` settings, their loaders and the config errors."""

from passlab.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    HasherSettings,
    Settings,
    SettingsLoader,
)
from passlab.kernel.errors import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "HasherSettings",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
