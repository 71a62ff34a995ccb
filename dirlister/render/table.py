"""Streaming table and TSV sinks for terminal output.

Rows are written as they arrive, so column widths are fixed up front: size,
type and modified have known maximum widths and the path takes whatever is
left of the terminal, clipped from the left.
"""

from __future__ import annotations

import csv
from typing import TextIO

from ..listing import DIRECTORY_SIZE, EMPTY_FOLDER_TEXT, EntryKind
from ..ui_theme import DEFAULT_THEME, UITheme
from .ansi import clip_left, clip_right, pad, sanitize_cell

SIZE_COL_WIDTH = 10
KIND_COL_WIDTH = len(EntryKind.DIRECTORY.value)
MODIFIED_COL_WIDTH = len("01/15/2010 12:37:52 PM")
COLUMN_GAP = "  "
MIN_PATH_COL_WIDTH = 12
HEADER_LABELS = ("Size", "Type", "Modified", "Path")


def _fixed_columns_width() -> int:
    return SIZE_COL_WIDTH + KIND_COL_WIDTH + MODIFIED_COL_WIDTH + 3 * len(COLUMN_GAP)


def path_column_width(total_width: int) -> int:
    """Return columns available to the path cell for a ``total_width`` terminal."""
    return max(MIN_PATH_COL_WIDTH, total_width - _fixed_columns_width())


class TerminalTableSink:
    """Render listing rows as an aligned, themed table on ``stream``.

    The address line and column header are written lazily before the first
    row, so a reset listing that never receives rows prints nothing.
    """

    def __init__(self, stream: TextIO, width: int = 80, theme: UITheme = DEFAULT_THEME) -> None:
        self.stream = stream
        self.width = max(1, width)
        self.theme = theme
        self.address = ""
        self.row_count = 0
        self._header_written = False

    def _styled(self, style: str, text: str) -> str:
        if not style or not text:
            return text
        return f"{style}{text}{self.theme.reset}"

    def reset(self) -> None:
        self.address = ""
        self.row_count = 0
        self._header_written = False

    def set_address(self, path: str) -> None:
        self.address = path

    def _write_header(self) -> None:
        theme = self.theme
        if self.address:
            address = clip_left(sanitize_cell(self.address), self.width)
            self.stream.write(self._styled(theme.address, address) + "\n")
        size_label, kind_label, modified_label, path_label = HEADER_LABELS
        header = COLUMN_GAP.join(
            (
                pad(size_label, SIZE_COL_WIDTH, align_right=True),
                pad(kind_label, KIND_COL_WIDTH),
                pad(modified_label, MODIFIED_COL_WIDTH),
                path_label,
            )
        )
        self.stream.write(self._styled(theme.header, header) + "\n")
        divider_width = min(self.width, _fixed_columns_width() + path_column_width(self.width))
        self.stream.write(self._styled(theme.divider, "─" * divider_width) + "\n")
        self._header_written = True

    def append_row(self, path: str, size: str, kind: str, modified: str) -> None:
        if not self._header_written:
            self._write_header()

        theme = self.theme
        if path == EMPTY_FOLDER_TEXT and not kind:
            path_style = theme.empty_marker
        elif kind == EntryKind.DIRECTORY.value:
            path_style = theme.directory
        else:
            path_style = theme.file
        size_style = theme.divider if size == DIRECTORY_SIZE else theme.size
        kind_style = theme.directory if kind == EntryKind.DIRECTORY.value else ""

        path_cell = clip_left(sanitize_cell(path), path_column_width(self.width))
        cells = (
            self._styled(size_style, pad(clip_right(size, SIZE_COL_WIDTH), SIZE_COL_WIDTH, align_right=True)),
            self._styled(kind_style, pad(kind, KIND_COL_WIDTH)),
            self._styled(theme.modified, pad(modified, MODIFIED_COL_WIDTH)),
            self._styled(path_style, path_cell),
        )
        self.stream.write(COLUMN_GAP.join(cells).rstrip(" ") + "\n")
        self.row_count += 1

    def finish(self) -> None:
        """Write a trailing entry count when any rows were shown."""
        if self.row_count <= 0:
            return
        noun = "entry" if self.row_count == 1 else "entries"
        self.stream.write(self._styled(self.theme.divider, f"{self.row_count:,} {noun}") + "\n")
        self.stream.flush()


class DelimitedSink:
    """Write rows as tab-separated values with a header line."""

    def __init__(self, stream: TextIO, delimiter: str = "\t") -> None:
        self.stream = stream
        self.row_count = 0
        self._writer = csv.writer(stream, delimiter=delimiter, lineterminator="\n")
        self._header_written = False

    def reset(self) -> None:
        self.row_count = 0
        self._header_written = False

    def set_address(self, path: str) -> None:
        pass

    def append_row(self, path: str, size: str, kind: str, modified: str) -> None:
        if not self._header_written:
            self._writer.writerow(("path", "size", "type", "modified"))
            self._header_written = True
        self._writer.writerow((path, size, kind, modified))
        self.row_count += 1

    def finish(self) -> None:
        self.stream.flush()


__all__ = [
    "SIZE_COL_WIDTH",
    "KIND_COL_WIDTH",
    "MODIFIED_COL_WIDTH",
    "path_column_width",
    "TerminalTableSink",
    "DelimitedSink",
]
