"""Application export – ResultSet, Column and Cell."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Sequence

__all__ = ["Cell", "Column", "ResultSet"]


@dataclass(frozen=True)
class Column:
    """A column of host summary data."""

    field_name: str
    data_type: str = ""  # host type hint, e.g. "float", "string"


@dataclass(frozen=True)
class Cell:
    """A single cell: the raw host value plus its display-formatted text."""

    value: Any
    formatted_value: str


@dataclass(frozen=True)
class ResultSet:
    """Summary data returned by the host for one worksheet.

    Rows are aligned positionally with ``columns``.
    """

    columns: tuple[Column, ...]
    rows: tuple[tuple[Cell, ...], ...] = field(default_factory=tuple)

    @property
    def column_names(self) -> list[str]:
        return [col.field_name for col in self.columns]

    @property
    def is_empty(self) -> bool:
        return not self.rows

    @classmethod
    def from_values(
        cls,
        columns: Sequence[str],
        rows: Sequence[Sequence[Any]],
    ) -> "ResultSet":
        """Build a result set whose formatted values are ``str(value)``."""
        return cls(
            columns=tuple(Column(name) for name in columns),
            rows=tuple(
                tuple(Cell(value=v, formatted_value="" if v is None else str(v)) for v in row)
                for row in rows
            ),
        )
