"""Application selection – SelectionReconciler.

Reconciles the checklist shown in the popup against the worksheets the host
offers and the selection persisted by a previous session.
"""
from __future__ import annotations

from typing import Iterable, Sequence

from datasource_picker.application.selection.candidate import CandidateItem, ChecklistEntry
from datasource_picker.application.selection.selection_set import SelectionSet

__all__ = ["SelectionReconciler"]


class SelectionReconciler:
    """Seeds, renders and mutates a :class:`SelectionSet`.

    Parameters
    ----------
    marker:
        Substring a worksheet name must contain to be offered in the
        checklist (default ``"*"``).
    """

    def __init__(self, marker: str = "*") -> None:
        self._marker = marker

    @property
    def marker(self) -> str:
        return self._marker

    def visible(self, candidates: Iterable[CandidateItem]) -> list[CandidateItem]:
        """Eligible candidates, deduplicated by name (first occurrence wins)."""
        seen: set[str] = set()
        result: list[CandidateItem] = []
        for candidate in candidates:
            if candidate.name in seen or not candidate.is_eligible(self._marker):
                continue
            seen.add(candidate.name)
            result.append(candidate)
        return result

    def seed(
        self,
        candidates: Sequence[CandidateItem],  # noqa: ARG002
        prior_selection: Iterable[str],
    ) -> SelectionSet:
        """Return the initial selection for a freshly opened popup.

        The prior selection is kept whole: names that are not rendered
        (missing from *candidates* or lacking the marker) stay selected so
        that closing the popup persists them again.
        """
        return SelectionSet.of(prior_selection)

    def checklist(
        self,
        candidates: Sequence[CandidateItem],
        selection: SelectionSet,
    ) -> list[ChecklistEntry]:
        return [
            ChecklistEntry(
                name=candidate.name,
                label=candidate.label(self._marker),
                checked=candidate.name in selection,
            )
            for candidate in self.visible(candidates)
        ]

    @staticmethod
    def toggle(selection: SelectionSet, name: str) -> SelectionSet:
        return selection.toggle(name)

    @staticmethod
    def snapshot(selection: SelectionSet) -> list[str]:
        return selection.snapshot()
