"""Config – 12-factor settings and loaders."""

from datasource_picker.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    PickerSettings,
    Settings,
    SettingsFactory,
    SettingsLoader,
)
from datasource_picker.config.validation import (
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
    "PickerSettings",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
]
