"""Directory lister controller tying a path source, the walker, and a sink.

The two recognized failures, a cancelled selection and a path that does not
exist, become user notices plus a sink reset. Every other filesystem error is
left to propagate.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from .listing import InvalidPath, iter_entries
from .selection import PathSource
from .sink import ListingSink

logger = logging.getLogger(__name__)

INVALID_PATH_MESSAGE = "The specified filename is invalid!"
CANCELLED_MESSAGE = "You cancelled the operation."


class DirectoryLister:
    """List a selected directory into ``sink``, reporting problems via ``notify``."""

    def __init__(
        self,
        sink: ListingSink,
        notify: Callable[[str], None],
        *,
        follow_symlinks: bool = True,
    ) -> None:
        self.sink = sink
        self.notify = notify
        self.follow_symlinks = follow_symlinks
        self.base_path: Path | None = None

    def select_directory(self, source: PathSource) -> bool:
        """Clear previous results, ask ``source`` for a path, and list it."""
        self.sink.reset()
        self.base_path = source()
        self.sink.set_address(str(self.base_path) if self.base_path is not None else "")
        return self.show_directory_contents(self.base_path)

    def show_directory_contents(self, path: Path | None) -> bool:
        """Append one row per entry under ``path``.

        Returns ``False`` after showing a notice when ``path`` is ``None``
        (selection aborted) or does not exist.
        """
        if path is None:
            self._fail(CANCELLED_MESSAGE)
            return False
        try:
            entries = iter_entries(path, follow_symlinks=self.follow_symlinks)
        except InvalidPath as exc:
            logger.info("Cannot list %s: path does not exist", exc.path)
            self._fail(INVALID_PATH_MESSAGE)
            return False

        count = 0
        for entry in entries:
            self.sink.append_row(*entry.as_row())
            count += 1
        logger.info("Listed %d rows for %s", count, path)
        return True

    def _fail(self, message: str) -> None:
        self.notify(message)
        self.sink.reset()


__all__ = ["INVALID_PATH_MESSAGE", "CANCELLED_MESSAGE", "DirectoryLister"]
