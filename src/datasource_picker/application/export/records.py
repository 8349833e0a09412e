"""Application export – ResultSet to ExportRecord conversion."""
from __future__ import annotations

from typing import TypeAlias

from datasource_picker.application.export.result_set import ResultSet

__all__ = ["ExportRecord", "normalize_cell", "to_records"]

ExportRecord: TypeAlias = dict[str, str]


def normalize_cell(text: str, *, strip_thousands_separator: bool = True) -> str:
    """Drop thousands-separator commas from a formatted value.

    Assumes a locale that groups digits with ``,``; free text containing a
    comma loses it too.
    """
    if strip_thousands_separator:
        return text.replace(",", "")
    return text


def to_records(
    result_set: ResultSet,
    *,
    strip_thousands_separator: bool = True,
) -> list[ExportRecord]:
    """Zip every row with the column names, positionally.

    Record keys follow column order.  When two columns share a name the
    later cell's value wins.  Cells beyond the last column are ignored.
    """
    names = result_set.column_names
    records: list[ExportRecord] = []
    for row in result_set.rows:
        record: ExportRecord = {}
        for name, cell in zip(names, row):
            record[name] = normalize_cell(
                cell.formatted_value,
                strip_thousands_separator=strip_thousands_separator,
            )
        records.append(record)
    return records
