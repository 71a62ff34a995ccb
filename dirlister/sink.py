"""Display sink interface the lister writes rows into."""

from __future__ import annotations

from typing import Protocol


class ListingSink(Protocol):
    """Anything that can show listing rows.

    ``reset`` clears previous results, ``set_address`` names the listed root,
    and ``append_row`` receives one row per entry in walk order.
    """

    def reset(self) -> None: ...

    def set_address(self, path: str) -> None: ...

    def append_row(self, path: str, size: str, kind: str, modified: str) -> None: ...


class CollectingSink:
    """In-memory sink keeping rows as ``(path, size, kind, modified)`` tuples."""

    def __init__(self) -> None:
        self.rows: list[tuple[str, str, str, str]] = []
        self.address = ""
        self.reset_count = 0

    def reset(self) -> None:
        self.rows.clear()
        self.address = ""
        self.reset_count += 1

    def set_address(self, path: str) -> None:
        self.address = path

    def append_row(self, path: str, size: str, kind: str, modified: str) -> None:
        self.rows.append((path, size, kind, modified))


__all__ = ["ListingSink", "CollectingSink"]
