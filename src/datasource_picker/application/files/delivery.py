"""Application files – FileDelivery port and its implementations."""
from __future__ import annotations

import asyncio
import hashlib
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, runtime_checkable

from datasource_picker.kernel.errors import DeliveryError

__all__ = [
    "DeliveredFile",
    "FileDelivery",
    "InMemoryFileDelivery",
    "LocalDirectoryDelivery",
]


@dataclass(frozen=True)
class DeliveredFile:
    """A file handed to the user."""

    filename: str
    content_type: str
    data: bytes
    checksum_sha256: str = ""

    @classmethod
    def from_bytes(cls, filename: str, content_type: str, data: bytes) -> "DeliveredFile":
        return cls(
            filename=filename,
            content_type=content_type,
            data=data,
            checksum_sha256=hashlib.sha256(data).hexdigest(),
        )

    @property
    def size_bytes(self) -> int:
        return len(self.data)


@runtime_checkable
class FileDelivery(Protocol):
    """Port: trigger a user-facing save of *data* under *filename*."""

    async def deliver(self, data: bytes, content_type: str, filename: str) -> None: ...


class InMemoryFileDelivery:
    """Fake FileDelivery for unit tests; records every delivered file."""

    def __init__(self) -> None:
        self.files: list[DeliveredFile] = []

    async def deliver(self, data: bytes, content_type: str, filename: str) -> None:
        self.files.append(DeliveredFile.from_bytes(filename, content_type, data))

    @property
    def last(self) -> DeliveredFile | None:
        return self.files[-1] if self.files else None


class LocalDirectoryDelivery:
    """Writes delivered files into *directory* (created on first use)."""

    def __init__(self, directory: str | Path, *, overwrite: bool = True) -> None:
        self._directory = Path(directory)
        self._overwrite = overwrite

    async def deliver(self, data: bytes, content_type: str, filename: str) -> None:  # noqa: ARG002
        if not filename or Path(filename).name != filename or filename in (".", ".."):
            raise DeliveryError(filename, f"Refusing unsafe file name {filename!r}")
        target = self._directory / filename
        if target.exists() and not self._overwrite:
            raise DeliveryError(filename, f"'{filename}' already exists")
        try:
            await asyncio.to_thread(self._write, target, data)
        except OSError as exc:
            raise DeliveryError(filename, cause=exc) from exc

    def _write(self, target: Path, data: bytes) -> None:
        self._directory.mkdir(parents=True, exist_ok=True)
        target.write_bytes(data)
