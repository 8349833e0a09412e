"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError            (domain.py)
    │   ├── NotFoundError
    │   ├── ConflictError
    │   │   └── ExportInProgressError
    │   └── EmptyResultError
    ├── ApplicationError       (application.py)
    │   └── UnknownSelectionError
    └── InfrastructureError    (infrastructure.py)
        ├── HostCommunicationError
        ├── DeliveryError
        └── SerializationError
"""

from datasource_picker.kernel.errors.application import (
    ApplicationError,
    UnknownSelectionError,
)
from datasource_picker.kernel.errors.base import BaseError
from datasource_picker.kernel.errors.domain import (
    ConflictError,
    DomainError,
    EmptyResultError,
    ExportInProgressError,
    NotFoundError,
)
from datasource_picker.kernel.errors.infrastructure import (
    DeliveryError,
    HostCommunicationError,
    InfrastructureError,
    SerializationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "ConflictError",
    "DeliveryError",
    "DomainError",
    "EmptyResultError",
    "ExportInProgressError",
    "HostCommunicationError",
    "InfrastructureError",
    "NotFoundError",
    "SerializationError",
    "UnknownSelectionError",
]
