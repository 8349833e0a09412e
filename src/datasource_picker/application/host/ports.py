"""Application host – ports for the dashboard, its settings store and the dialog."""
from __future__ import annotations

from typing import Protocol, runtime_checkable

from datasource_picker.application.export.result_set import ResultSet
from datasource_picker.application.selection.candidate import CandidateItem

__all__ = ["DashboardHost", "DialogChannel", "SettingsStore"]


@runtime_checkable
class DashboardHost(Protocol):
    """Port: the dashboard that owns the worksheets."""

    def list_worksheets(self) -> list[CandidateItem]:
        """Worksheets on the dashboard, in host order."""
        ...

    async def get_summary_data(self, sheet_name: str, *, max_rows: int) -> ResultSet:
        """Summary data of *sheet_name*, capped at *max_rows* rows."""
        ...


@runtime_checkable
class SettingsStore(Protocol):
    """Port: the host's key/value settings store.

    ``set`` buffers a write; ``save`` commits every buffered write.
    """

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    async def save(self) -> None: ...


@runtime_checkable
class DialogChannel(Protocol):
    """Port: the popup's link to the extension that opened it."""

    async def open(self) -> str:
        """Complete the dialog handshake and return the open payload."""
        ...

    def close(self, payload: str) -> None: ...
