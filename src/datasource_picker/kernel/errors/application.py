"""Application-layer errors — use-case preconditions."""

from __future__ import annotations

from typing import Any

from datasource_picker.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class UnknownSelectionError(ApplicationError):
    """An export was requested while no data source is selected."""

    default_code = "unknown_selection"

    def __init__(
        self,
        message: str = "Select a data source before exporting",
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)


__all__ = ["ApplicationError", "UnknownSelectionError"]
