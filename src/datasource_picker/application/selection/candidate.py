"""Application selection – CandidateItem and ChecklistEntry value objects."""
from __future__ import annotations

from dataclasses import dataclass

__all__ = ["CandidateItem", "ChecklistEntry"]


@dataclass(frozen=True)
class CandidateItem:
    """A worksheet offered by the host as a selectable data source."""

    name: str

    def is_eligible(self, marker: str) -> bool:
        """True when the worksheet name carries the eligibility *marker*."""
        return marker in self.name

    def label(self, marker: str) -> str:
        return self.name.replace(marker, "")


@dataclass(frozen=True)
class ChecklistEntry:
    """One rendered checklist row."""

    name: str
    label: str
    checked: bool
