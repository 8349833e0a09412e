"""Application session – commands and effects."""
from __future__ import annotations

from dataclasses import dataclass

from datasource_picker.application.export.csv_document import DelimitedDocument
from datasource_picker.application.export.result_set import ResultSet

__all__ = [
    "CloseDialog",
    "ClosePopup",
    "Command",
    "DeliverDocument",
    "Effect",
    "ExportReady",
    "FetchSummary",
    "PersistSetting",
    "RequestExport",
    "SaveSettings",
    "ToggleSource",
]


class Command:
    """Marker base for user or host events handled by the session."""


class Effect:
    """Marker base for side effects the session adapter must perform."""


@dataclass(frozen=True)
class ToggleSource(Command):
    name: str


@dataclass(frozen=True)
class RequestExport(Command):
    pass


@dataclass(frozen=True)
class ExportReady(Command):
    """The host answered a :class:`FetchSummary` effect."""

    sheet_name: str
    result_set: ResultSet


@dataclass(frozen=True)
class ClosePopup(Command):
    pass


@dataclass(frozen=True)
class FetchSummary(Effect):
    sheet_name: str
    max_rows: int


@dataclass(frozen=True)
class DeliverDocument(Effect):
    document: DelimitedDocument
    suggested_name: str


@dataclass(frozen=True)
class PersistSetting(Effect):
    key: str
    value: str


@dataclass(frozen=True)
class SaveSettings(Effect):
    pass


@dataclass(frozen=True)
class CloseDialog(Effect):
    payload: str
