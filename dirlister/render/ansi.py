"""Display-width measurement and clipping for table cells.

Cells are measured as terminal columns, not characters, so wide CJK names and
combining marks keep the columns aligned.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
ELLIPSIS = "…"


def char_display_width(ch: str) -> int:
    """Return terminal column width for one character.

    Combining marks consume no columns, East Asian wide/fullwidth characters
    consume two, and everything else one.
    """
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    """Return terminal column width for possibly ANSI-styled ``text``."""
    plain = ANSI_ESCAPE_RE.sub("", text)
    return sum(char_display_width(ch) for ch in plain)


def sanitize_cell(text: str) -> str:
    """Replace control characters (newlines in file names, ESC) with ``?``."""
    return "".join("?" if unicodedata.category(ch) == "Cc" else ch for ch in text)


def clip_right(text: str, max_cols: int) -> str:
    """Keep the start of ``text``, ending in an ellipsis when it was cut."""
    if max_cols <= 0:
        return ""
    if display_width(text) <= max_cols:
        return text
    out: list[str] = []
    col = 0
    for ch in text:
        w = char_display_width(ch)
        if col + w > max_cols - 1:
            break
        out.append(ch)
        col += w
    return "".join(out) + ELLIPSIS


def clip_left(text: str, max_cols: int) -> str:
    """Keep the end of ``text``, starting with an ellipsis when it was cut.

    Used for paths, where the file name at the end matters most.
    """
    if max_cols <= 0:
        return ""
    if display_width(text) <= max_cols:
        return text
    out: list[str] = []
    col = 0
    for ch in reversed(text):
        w = char_display_width(ch)
        if col + w > max_cols - 1:
            break
        out.append(ch)
        col += w
    return ELLIPSIS + "".join(reversed(out))


def pad(text: str, width: int, *, align_right: bool = False) -> str:
    """Pad ``text`` with spaces to ``width`` display columns."""
    fill = " " * max(0, width - display_width(text))
    return fill + text if align_right else text + fill
