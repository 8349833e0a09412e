"""Application files – file-delivery port and implementations."""
from datasource_picker.application.files.delivery import (
    DeliveredFile,
    FileDelivery,
    InMemoryFileDelivery,
    LocalDirectoryDelivery,
)

__all__ = [
    "DeliveredFile",
    "FileDelivery",
    "InMemoryFileDelivery",
    "LocalDirectoryDelivery",
]
