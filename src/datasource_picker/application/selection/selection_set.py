"""Application selection – SelectionSet value object."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

__all__ = ["SelectionSet"]


@dataclass(frozen=True, eq=False)
class SelectionSet:
    """Insertion-ordered set of chosen worksheet names.

    Equality is set equality; :meth:`snapshot` keeps insertion order for
    persistence.  Every mutation returns a new instance.
    """

    names: tuple[str, ...] = ()

    @classmethod
    def of(cls, names: Iterable[str]) -> "SelectionSet":
        """Build from *names*, keeping the first occurrence of duplicates."""
        return cls(tuple(dict.fromkeys(names)))

    def __contains__(self, name: object) -> bool:
        return name in self.names

    def __iter__(self) -> Iterator[str]:
        return iter(self.names)

    def __len__(self) -> int:
        return len(self.names)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SelectionSet):
            return NotImplemented
        return frozenset(self.names) == frozenset(other.names)

    def __hash__(self) -> int:
        return hash(frozenset(self.names))

    @property
    def first(self) -> str | None:
        """The earliest selected name, or ``None`` when nothing is selected."""
        return self.names[0] if self.names else None

    def toggle(self, name: str) -> "SelectionSet":
        """Remove *name* if selected, otherwise append it."""
        if name in self.names:
            return SelectionSet(tuple(n for n in self.names if n != name))
        return SelectionSet(self.names + (name,))

    def snapshot(self) -> list[str]:
        return list(self.names)
