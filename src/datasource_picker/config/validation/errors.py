"""Errors raised while loading or validating picker settings.

Each error carries the offending setting in ``detail`` so the JSON form
logged by the popup names it without parsing the message.
"""
from datasource_picker.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Picker settings could not be loaded or failed validation."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A setting without a default was found in no loader (``PICKER_*`` or ``.env``)."""
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(
            f"Picker setting '{setting_name}' has no value",
            detail={"setting": setting_name},
        )
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A picker setting was supplied but cannot be used, e.g. ``max_rows=0``."""
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Picker setting '{setting_name}' rejected {value!r}: {reason}",
            detail={"setting": setting_name, "value": repr(value), "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
