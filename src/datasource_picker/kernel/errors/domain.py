"""Domain errors — selection and export rule violations."""

from __future__ import annotations

from typing import Any

from datasource_picker.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a selection or export rule is violated."""

    default_code = "domain_error"


class NotFoundError(DomainError):
    """The requested worksheet (or other resource) does not exist."""

    default_code = "not_found"

    def __init__(
        self,
        resource: str,
        identifier: Any = None,
        **kwargs: Any,
    ) -> None:
        msg = f"{resource} not found"
        if identifier is not None:
            msg = f"{resource} '{identifier}' not found"
        super().__init__(msg, **kwargs)
        self.resource = resource
        self.identifier = identifier


class ConflictError(DomainError):
    """The operation conflicts with the current popup state."""

    default_code = "conflict"


class ExportInProgressError(ConflictError):
    """An export is still awaiting the host; close and re-export are blocked."""

    default_code = "export_in_progress"

    def __init__(self, sheet_name: str | None = None, **kwargs: Any) -> None:
        msg = "An export is already in progress"
        if sheet_name is not None:
            msg = f"Export of '{sheet_name}' is still in progress"
        super().__init__(msg, **kwargs)
        self.sheet_name = sheet_name


class EmptyResultError(DomainError):
    """The host returned no rows for an export that requires data."""

    default_code = "empty_result"

    def __init__(self, sheet_name: str, **kwargs: Any) -> None:
        super().__init__(f"No rows returned for '{sheet_name}'", **kwargs)
        self.sheet_name = sheet_name


__all__ = [
    "ConflictError",
    "DomainError",
    "EmptyResultError",
    "ExportInProgressError",
    "NotFoundError",
]
