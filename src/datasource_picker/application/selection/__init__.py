"""Application selection – checklist reconciliation and persistence codec."""
from datasource_picker.application.selection.candidate import CandidateItem, ChecklistEntry
from datasource_picker.application.selection.codec import decode_selection, encode_selection
from datasource_picker.application.selection.reconciler import SelectionReconciler
from datasource_picker.application.selection.selection_set import SelectionSet

__all__ = [
    "CandidateItem",
    "ChecklistEntry",
    "SelectionReconciler",
    "SelectionSet",
    "decode_selection",
    "encode_selection",
]
