"""Config settings – 12-factor env-based configuration."""
from datasource_picker.config.settings.base import PickerSettings, Settings
from datasource_picker.config.settings.factory import SettingsFactory
from datasource_picker.config.settings.loaders import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    SettingsLoader,
)

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "PickerSettings",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
]
