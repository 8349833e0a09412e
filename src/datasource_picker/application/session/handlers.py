"""Application session – pure command handlers.

Each handler maps ``(state, command)`` to a :class:`Transition` holding the
next state and the effects to run.  Handlers never touch a collaborator;
:class:`~datasource_picker.application.session.controller.PopupSession`
executes the effects.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Callable

from datasource_picker.application.export import ExportService
from datasource_picker.application.selection import encode_selection
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
from datasource_picker.application.session.state import PopupState
from datasource_picker.config.settings import PickerSettings
from datasource_picker.kernel.errors import (
    ConflictError,
    ExportInProgressError,
    UnknownSelectionError,
)

__all__ = [
    "SessionReducer",
    "Transition",
    "on_close",
    "on_export",
    "on_export_ready",
    "on_toggle",
]


@dataclass(frozen=True)
class Transition:
    state: PopupState
    effects: tuple[Effect, ...] = ()


def on_toggle(state: PopupState, command: ToggleSource) -> Transition:
    return Transition(state.with_selection(state.selection.toggle(command.name)))


def on_export(state: PopupState, command: RequestExport, settings: PickerSettings) -> Transition:  # noqa: ARG001
    """Ask the host for the first selected worksheet's summary data."""
    if state.export_in_flight:
        raise ExportInProgressError(state.exporting)
    sheet_name = state.selection.first
    if sheet_name is None:
        raise UnknownSelectionError()
    return Transition(
        replace(state, exporting=sheet_name, message=None),
        (FetchSummary(sheet_name=sheet_name, max_rows=settings.max_rows),),
    )


def on_export_ready(
    state: PopupState,
    command: ExportReady,
    settings: PickerSettings,
    exporter: ExportService,
) -> Transition:
    document = exporter.build(command.sheet_name, command.result_set)
    effects: list[Effect] = [DeliverDocument(document, command.sheet_name)]
    next_state = replace(state, exporting=None)
    if settings.close_after_export:
        effects.extend(_close_effects(next_state, settings))
    return Transition(next_state, tuple(effects))


def on_close(state: PopupState, command: ClosePopup, settings: PickerSettings) -> Transition:  # noqa: ARG001
    if state.export_in_flight:
        raise ExportInProgressError(state.exporting)
    return Transition(state, _close_effects(state, settings))


def _close_effects(state: PopupState, settings: PickerSettings) -> tuple[Effect, ...]:
    return (
        PersistSetting(settings.settings_key, encode_selection(state.selection)),
        SaveSettings(),
        CloseDialog(state.open_payload),
    )


class SessionReducer:
    """Routes commands to their handler (in-process, synchronous)."""

    def __init__(
        self,
        settings: PickerSettings | None = None,
        exporter: ExportService | None = None,
    ) -> None:
        self._settings = settings or PickerSettings()
        self._exporter = exporter or ExportService(self._settings)
        self._handlers: dict[type[Command], Callable[[PopupState, Any], Transition]] = {
            ToggleSource: on_toggle,
            RequestExport: lambda s, c: on_export(s, c, self._settings),
            ExportReady: lambda s, c: on_export_ready(s, c, self._settings, self._exporter),
            ClosePopup: lambda s, c: on_close(s, c, self._settings),
        }

    @property
    def exporter(self) -> ExportService:
        return self._exporter

    def register(
        self,
        command_type: type[Command],
        handler: Callable[[PopupState, Any], Transition],
    ) -> None:
        self._handlers[command_type] = handler

    def dispatch(self, state: PopupState, command: Command) -> Transition:
        if state.closed:
            raise ConflictError("The popup is already closed")
        handler = self._handlers.get(type(command))
        if handler is None:
            raise KeyError(f"No handler registered for {type(command).__name__!r}")
        return handler(state, command)
