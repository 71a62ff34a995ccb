"""Path-selection sources: where the directory to list comes from.

A source is a zero-argument callable returning a path, or ``None`` when the
user aborted the selection.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

PathSource = Callable[[], Path | None]
PROMPT_TEXT = "Directory to list"


def fixed_path_source(path: str | Path) -> PathSource:
    """Return a source that always selects ``path``."""
    selected = Path(path)

    def select() -> Path | None:
        return selected

    return select


def prompt_path_source(
    input_fn: Callable[[str], str] | None = None,
    default: Path | None = None,
) -> PathSource:
    """Return a source that asks for a directory on the terminal.

    Blank input picks ``default`` when given and aborts otherwise. EOF and
    Ctrl-C abort. ``~`` is expanded. ``input_fn`` defaults to the builtin
    ``input``, looked up at prompt time.
    """

    def select() -> Path | None:
        prompt = f"{PROMPT_TEXT} [{default}]: " if default is not None else f"{PROMPT_TEXT}: "
        try:
            answer = (input_fn or input)(prompt)
        except (EOFError, KeyboardInterrupt):
            return None
        answer = answer.strip()
        if not answer:
            return default
        return Path(answer).expanduser()

    return select


__all__ = ["PathSource", "PROMPT_TEXT", "fixed_path_source", "prompt_path_source"]
