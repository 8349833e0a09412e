"""Application session – PopupState."""
from __future__ import annotations

from dataclasses import dataclass, field, replace

from datasource_picker.application.selection import ChecklistEntry, SelectionSet

__all__ = ["PopupState"]


@dataclass(frozen=True)
class PopupState:
    """Everything the popup knows between two events."""

    selection: SelectionSet = field(default_factory=SelectionSet)
    open_payload: str = ""
    checklist: tuple[ChecklistEntry, ...] = ()
    exporting: str | None = None  # sheet awaiting the host, if any
    message: str | None = None    # last user-visible message
    closed: bool = False

    @property
    def export_in_flight(self) -> bool:
        return self.exporting is not None

    def with_selection(self, selection: SelectionSet) -> "PopupState":
        checklist = tuple(
            replace(entry, checked=entry.name in selection) for entry in self.checklist
        )
        return replace(self, selection=selection, checklist=checklist)

    def failed(self, message: str) -> "PopupState":
        """Keep the popup open and the selection intact, clear the in-flight export."""
        return replace(self, exporting=None, message=message)
