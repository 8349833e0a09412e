"""Application export – DelimitedDocument and CsvDocumentWriter."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from datasource_picker.application.export.records import ExportRecord

__all__ = ["CsvDocumentWriter", "DelimitedDocument"]


@dataclass(frozen=True)
class DelimitedDocument:
    """A finished delimited-text export (header line + one line per record)."""

    text: str
    content_type: str = "text/csv"

    @property
    def lines(self) -> list[str]:
        return self.text.split("\n")

    def to_bytes(self, *, bom: bool = False) -> bytes:
        """UTF-8 payload, optionally prefixed with a BOM for spreadsheet tools."""
        prefix = "\ufeff" if bom else ""
        return (prefix + self.text).encode("utf-8")


class CsvDocumentWriter:
    """Renders export records as delimited text.

    Lines are separated by a single ``\\n`` with no trailing newline.  With
    ``quote_fields`` enabled, fields holding the delimiter, a double quote
    or a line break are quoted RFC 4180 style; otherwise fields are joined
    verbatim.
    """

    def __init__(
        self,
        delimiter: str = ",",
        *,
        quote_fields: bool = True,
        content_type: str = "text/csv",
    ) -> None:
        self._delimiter = delimiter
        self._quote_fields = quote_fields
        self._content_type = content_type

    def write(
        self,
        records: Sequence[ExportRecord],
        columns: Sequence[str],
    ) -> DelimitedDocument:
        rows = [list(columns)]
        rows.extend([record.get(col, "") for col in columns] for record in records)

        encode = self._quote if self._quote_fields else str
        text = "\n".join(self._delimiter.join(encode(field) for field in row) for row in rows)
        return DelimitedDocument(text=text, content_type=self._content_type)

    def _quote(self, field: str) -> str:
        # an empty field stays empty so a one-column row is a blank line
        if any(ch in field for ch in (self._delimiter, '"', "\r", "\n")):
            return '"' + field.replace('"', '""') + '"'
        return field
