"""Infrastructure errors — host, persistence and file-delivery failures."""

from __future__ import annotations

from typing import Any

from datasource_picker.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Collaborator / I/O failure that is not a business rule violation."""

    default_code = "infrastructure_error"


class HostCommunicationError(InfrastructureError):
    """The dashboard host or its settings store failed a request."""

    default_code = "host_communication_error"

    def __init__(
        self,
        operation: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Host request '{operation}' failed", **kwargs)
        self.operation = operation


class DeliveryError(InfrastructureError):
    """The platform refused or failed to deliver an exported file."""

    default_code = "delivery_error"

    def __init__(
        self,
        filename: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Could not deliver '{filename}'", **kwargs)
        self.filename = filename


class SerializationError(InfrastructureError):
    """Failed to serialize or deserialize a payload."""

    default_code = "serialization_error"

    def __init__(
        self,
        message: str,
        *,
        payload_type: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.payload_type = payload_type


__all__ = [
    "DeliveryError",
    "HostCommunicationError",
    "InfrastructureError",
    "SerializationError",
]
