"""Application session – PopupSession, the effect-running adapter.

Typical usage::

    session = PopupSession(host, store, dialog, LocalDirectoryDelivery("exports"))
    checklist = await session.open()
    session.toggle("Sales*")
    await session.export()      # delivers Sales.csv then closes the popup
"""
from __future__ import annotations

from dataclasses import replace
from typing import Awaitable, Callable, Iterable, TypeVar

from datasource_picker.application.export import ResultSet
from datasource_picker.application.files import FileDelivery
from datasource_picker.application.host import DashboardHost, DialogChannel, SettingsStore
from datasource_picker.application.selection import (
    ChecklistEntry,
    SelectionReconciler,
    decode_selection,
)
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
from datasource_picker.application.session.handlers import SessionReducer
from datasource_picker.application.session.state import PopupState
from datasource_picker.config.settings import PickerSettings
from datasource_picker.kernel.errors import (
    BaseError,
    HostCommunicationError,
    NotFoundError,
)
from datasource_picker.observability.logging import get_logger

__all__ = ["PopupSession"]

T = TypeVar("T")

_log = get_logger(__name__)


class PopupSession:
    """Owns the :class:`PopupState` of one popup and performs its effects.

    Host and settings-store failures are re-raised as
    :class:`HostCommunicationError`, delivery failures as
    :class:`DeliveryError`.  After any failure the popup stays open, the
    selection is kept and ``state.message`` holds the text to show.
    """

    def __init__(
        self,
        host: DashboardHost,
        settings_store: SettingsStore,
        dialog: DialogChannel,
        delivery: FileDelivery,
        settings: PickerSettings | None = None,
    ) -> None:
        self._host = host
        self._store = settings_store
        self._dialog = dialog
        self._delivery = delivery
        self._settings = settings or PickerSettings()
        self._reconciler = SelectionReconciler(self._settings.eligibility_marker)
        self._reducer = SessionReducer(self._settings)
        self._state = PopupState()

    @property
    def state(self) -> PopupState:
        return self._state

    @property
    def checklist(self) -> list[ChecklistEntry]:
        return list(self._state.checklist)

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    async def open(self) -> list[ChecklistEntry]:
        """Handshake with the host and build the checklist."""
        try:
            payload = await self._host_call("dialog.open", self._dialog.open)
            candidates = await self._host_call(
                "list_worksheets", self._sync(self._host.list_worksheets)
            )
            raw = await self._host_call(
                "settings.get", self._sync(lambda: self._store.get(self._settings.settings_key))
            )
            prior = decode_selection(raw)
        except BaseError as exc:
            self._state = self._state.failed(exc.message)
            _log.error("popup.open_failed", code=exc.code)
            raise
        selection = self._reconciler.seed(candidates, prior)
        checklist = self._reconciler.checklist(candidates, selection)
        self._state = PopupState(
            selection=selection,
            open_payload=payload,
            checklist=tuple(checklist),
        )
        _log.info(
            "popup.opened",
            candidates=len(candidates),
            rendered=len(checklist),
            selected=len(selection),
        )
        return checklist

    def toggle(self, name: str) -> PopupState:
        self._state = self._reducer.dispatch(self._state, ToggleSource(name)).state
        _log.debug("selection.toggled", name=name, selected=name in self._state.selection)
        return self._state

    async def export(self) -> PopupState:
        """Export the first selected worksheet (and close, if configured)."""
        await self._handle(RequestExport())
        return self._state

    async def close(self) -> PopupState:
        """Persist the selection and close the dialog."""
        await self._handle(ClosePopup())
        return self._state

    # ------------------------------------------------------------------
    # Effect execution
    # ------------------------------------------------------------------

    async def _handle(self, command: Command) -> None:
        try:
            transition = self._reducer.dispatch(self._state, command)
            self._state = transition.state
            await self._run(transition.effects)
        except BaseError as exc:
            self._state = self._state.failed(exc.message)
            _log.error("popup.command_failed", command=type(command).__name__, code=exc.code)
            raise

    async def _run(self, effects: Iterable[Effect]) -> None:
        for effect in effects:
            if isinstance(effect, FetchSummary):
                _log.info("export.requested", sheet=effect.sheet_name, max_rows=effect.max_rows)
                result_set = await self._fetch_summary(effect)
                transition = self._reducer.dispatch(
                    self._state, ExportReady(effect.sheet_name, result_set)
                )
                self._state = transition.state
                await self._run(transition.effects)
            elif isinstance(effect, DeliverDocument):
                await self._reducer.exporter.deliver(
                    effect.document, effect.suggested_name, self._delivery
                )
                self._state = replace(self._state, message=None)
            elif isinstance(effect, PersistSetting):
                await self._host_call(
                    "settings.set", self._sync(lambda: self._store.set(effect.key, effect.value))
                )
            elif isinstance(effect, SaveSettings):
                await self._host_call("settings.save", self._store.save)
            elif isinstance(effect, CloseDialog):
                await self._host_call("dialog.close", self._sync(lambda: self._dialog.close(effect.payload)))
                self._state = replace(self._state, closed=True)
                _log.info("popup.closed", selected=len(self._state.selection))
            else:
                raise TypeError(f"Unsupported effect {type(effect).__name__!r}")

    async def _fetch_summary(self, effect: FetchSummary) -> ResultSet:
        worksheets = await self._host_call("list_worksheets", self._sync(self._host.list_worksheets))
        if not any(ws.name == effect.sheet_name for ws in worksheets):
            raise NotFoundError("Worksheet", effect.sheet_name)
        return await self._host_call(
            "get_summary_data",
            lambda: self._host.get_summary_data(effect.sheet_name, max_rows=effect.max_rows),
        )

    @staticmethod
    def _sync(fn: Callable[[], T]) -> Callable[[], Awaitable[T]]:
        async def _call() -> T:
            return fn()

        return _call

    @staticmethod
    async def _host_call(operation: str, call: Callable[[], Awaitable[T]]) -> T:
        try:
            return await call()
        except BaseError:
            raise
        except Exception as exc:
            raise HostCommunicationError(operation, cause=exc) from exc
