"""Column formatting for sizes and modification times."""

from __future__ import annotations

from datetime import datetime

BYTES_PER_KB = 1024
DIRECTORY_SIZE = "N/A"
EMPTY_FOLDER_TEXT = "This is an empty folder"
MODIFIED_DATE_FORMAT = "%m/%d/%Y %I:%M:%S"


def format_size(size_bytes: int) -> str:
    """Return ``size_bytes`` as whole kilobytes, rounded down.

    ``123456`` becomes ``"120 KB"`` and anything under 1024 bytes is ``"0 KB"``.
    """
    return f"{size_bytes // BYTES_PER_KB} KB"


def format_modified(mtime_ns: int) -> str:
    """Format a nanosecond timestamp as ``MM/dd/yyyy hh:mm:ss AM``.

    Uses local time. The meridiem marker is always English ``AM``/``PM`` so the
    column does not depend on ``LC_TIME``.
    """
    stamp = datetime.fromtimestamp(mtime_ns // 1_000_000_000)
    meridiem = "AM" if stamp.hour < 12 else "PM"
    return f"{stamp.strftime(MODIFIED_DATE_FORMAT)} {meridiem}"


__all__ = [
    "BYTES_PER_KB",
    "DIRECTORY_SIZE",
    "EMPTY_FOLDER_TEXT",
    "format_size",
    "format_modified",
]
