"""Config settings – Settings base class and PickerSettings."""
from __future__ import annotations

import dataclasses

from datasource_picker.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: dataclasses.ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class PickerSettings(Settings):
    """Runtime options for the selection popup and its CSV export.

    Loaded from ``PICKER_*`` environment variables by
    :class:`~datasource_picker.config.settings.loaders.EnvSettingsLoader`.
    """

    _prefix: dataclasses.ClassVar[str] = "PICKER"

    max_rows: int = 50_000
    eligibility_marker: str = "*"
    settings_key: str = "selectedDatasources"
    delimiter: str = ","
    file_extension: str = ".csv"
    content_type: str = "text/csv"
    quote_fields: bool = True
    strip_thousands_separator: bool = True
    allow_empty_export: bool = True
    close_after_export: bool = True
    bom: bool = False

    def _validate(self) -> None:
        if self.max_rows <= 0:
            raise InvalidSettingValueError("max_rows", self.max_rows, "must be positive")
        if not self.eligibility_marker:
            raise InvalidSettingValueError(
                "eligibility_marker", self.eligibility_marker, "must not be empty"
            )
        if len(self.delimiter) != 1 or self.delimiter in "\r\n\"":
            raise InvalidSettingValueError(
                "delimiter", self.delimiter, "must be a single non-quote, non-newline character"
            )
        if not self.settings_key:
            raise InvalidSettingValueError("settings_key", self.settings_key, "must not be empty")


__all__ = ["PickerSettings", "Settings"]
