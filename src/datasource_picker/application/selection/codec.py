"""Application selection – JSON codec for persisted selections."""
from __future__ import annotations

import json

from datasource_picker.application.selection.selection_set import SelectionSet
from datasource_picker.kernel.errors import SerializationError

__all__ = ["decode_selection", "encode_selection"]


def encode_selection(selection: SelectionSet) -> str:
    """Serialise *selection* as a JSON array of names in insertion order."""
    return json.dumps(selection.snapshot(), ensure_ascii=False)


def decode_selection(raw: str | None) -> SelectionSet:
    """Parse a stored selection; ``None`` or ``""`` yields an empty set."""
    if raw is None or not raw.strip():
        return SelectionSet()
    try:
        value = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise SerializationError(
            f"Stored selection is not valid JSON: {exc.msg}",
            payload_type="selection",
            cause=exc,
        ) from exc
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise SerializationError(
            "Stored selection must be a JSON array of strings",
            payload_type="selection",
            detail={"raw": raw},
        )
    return SelectionSet.of(value)
