"""Entry datatypes produced by the directory walker."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class EntryKind(str, enum.Enum):
    """Classification shown in the type column."""

    DIRECTORY = "Directory"
    FILE = "File"


@dataclass(frozen=True)
class Entry:
    """One listed filesystem node with display-ready columns.

    ``path``, ``size``, ``kind`` and ``modified`` are the four displayed
    columns. The empty-folder marker uses ``kind=None`` and an empty size.
    """

    path: str
    size: str
    kind: EntryKind | None
    modified: str
    depth: int = 0
    size_bytes: int | None = None
    mtime_ns: int | None = None

    @property
    def kind_label(self) -> str:
        """Return the type column text (blank for the empty-folder marker)."""
        return "" if self.kind is None else self.kind.value

    @property
    def is_directory(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    @property
    def is_empty_marker(self) -> bool:
        return self.kind is None

    def as_row(self) -> tuple[str, str, str, str]:
        """Return ``(path, size, kind, modified)`` as handed to display sinks."""
        return (self.path, self.size, self.kind_label, self.modified)


__all__ = [
    "EntryKind",
    "Entry",
]
