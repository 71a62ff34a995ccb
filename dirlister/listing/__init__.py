"""Directory listing domain: entry records, formatting, and the walker.

This package has no terminal or UI dependencies:
- ``Entry`` records with display-ready columns
- size/date column formatting
- the pre-order directory walker
"""

from __future__ import annotations

from .types import Entry, EntryKind
from .formatting import DIRECTORY_SIZE, EMPTY_FOLDER_TEXT, format_modified, format_size
from .walker import InvalidPath, empty_folder_entry, entry_for_child, iter_entries, list_directory

__all__ = [
    "Entry",
    "EntryKind",
    "DIRECTORY_SIZE",
    "EMPTY_FOLDER_TEXT",
    "format_modified",
    "format_size",
    "InvalidPath",
    "empty_folder_entry",
    "entry_for_child",
    "iter_entries",
    "list_directory",
]
