"""Application session – popup state, command handlers and effect runner."""
from datasource_picker.application.session.commands import (
    CloseDialog,
    ClosePopup,
    Command,
    DeliverDocument,
    Effect,
    ExportReady,
    FetchSummary,
    PersistSetting,
    RequestExport,
    SaveSettings,
    ToggleSource,
)
from datasource_picker.application.session.controller import PopupSession
from datasource_picker.application.session.handlers import (
    SessionReducer,
    Transition,
    on_close,
    on_export,
    on_export_ready,
    on_toggle,
)
from datasource_picker.application.session.state import PopupState

__all__ = [
    "CloseDialog",
    "ClosePopup",
    "Command",
    "DeliverDocument",
    "Effect",
    "ExportReady",
    "FetchSummary",
    "PersistSetting",
    "PopupSession",
    "PopupState",
    "RequestExport",
    "SaveSettings",
    "SessionReducer",
    "ToggleSource",
    "Transition",
    "on_close",
    "on_export",
    "on_export_ready",
    "on_toggle",
]
