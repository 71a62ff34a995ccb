"""Depth-first directory enumeration producing display entries.

Entries come out in pre-order (a directory before its children) and in the
order ``os.scandir`` reports them; nothing is sorted. Traversal keeps an
explicit stack instead of recursing, and remembers ``(st_dev, st_ino)`` of every
expanded directory so symlink loops are listed once instead of forever.
"""

from __future__ import annotations

import errno
import logging
import os
from collections.abc import Iterator
from pathlib import Path

from .formatting import DIRECTORY_SIZE, EMPTY_FOLDER_TEXT, format_modified, format_size
from .types import Entry, EntryKind

logger = logging.getLogger(__name__)


class InvalidPath(FileNotFoundError):
    """Raised when the path to list does not exist."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        super().__init__(errno.ENOENT, "No such file or directory", os.fspath(path))
        self.path = Path(path)


def _directory_key(path: str | os.PathLike[str]) -> tuple[int, int]:
    """Identity of the directory ``path`` points at, following symlinks."""
    stat = os.stat(path)
    return (stat.st_dev, stat.st_ino)


def _scan(directory: str | os.PathLike[str]) -> list[os.DirEntry[str]]:
    """Return directory children in enumeration order."""
    with os.scandir(directory) as entries:
        return list(entries)


def empty_folder_entry(directory: Path) -> Entry:
    """Build the marker row shown in place of an empty listing."""
    mtime_ns = directory.stat().st_mtime_ns
    return Entry(
        path=EMPTY_FOLDER_TEXT,
        size="",
        kind=None,
        modified=format_modified(mtime_ns),
        mtime_ns=mtime_ns,
    )


def entry_for_child(child: os.DirEntry[str], depth: int, follow_symlinks: bool = True) -> Entry:
    """Classify and format one scanned child.

    Dangling and looping symlinks (ENOENT, ELOOP) are listed as files using
    the link's own stat data.
    """
    try:
        is_dir = child.is_dir(follow_symlinks=follow_symlinks)
        stat = child.stat(follow_symlinks=follow_symlinks)
    except OSError:
        if not child.is_symlink():
            raise
        is_dir = False
        stat = child.stat(follow_symlinks=False)

    mtime_ns = int(stat.st_mtime_ns)
    if is_dir:
        return Entry(
            path=child.path,
            size=DIRECTORY_SIZE,
            kind=EntryKind.DIRECTORY,
            modified=format_modified(mtime_ns),
            depth=depth,
            mtime_ns=mtime_ns,
        )
    size_bytes = int(stat.st_size)
    return Entry(
        path=child.path,
        size=format_size(size_bytes),
        kind=EntryKind.FILE,
        modified=format_modified(mtime_ns),
        depth=depth,
        size_bytes=size_bytes,
        mtime_ns=mtime_ns,
    )


def _walk(root: Path, follow_symlinks: bool) -> Iterator[Entry]:
    if not root.is_dir():
        yield empty_folder_entry(root)
        return

    visited = {_directory_key(root)}
    children = _scan(root)
    if not children:
        yield empty_folder_entry(root)
        return

    count = 0
    stack: list[tuple[os.DirEntry[str], int]] = [(child, 1) for child in reversed(children)]
    while stack:
        child, depth = stack.pop()
        entry = entry_for_child(child, depth, follow_symlinks)
        count += 1
        yield entry
        if not entry.is_directory:
            continue

        key = _directory_key(child.path)
        if key in visited:
            logger.warning("Not descending into %s: directory already listed", child.path)
            continue
        visited.add(key)
        # Reversed so the first scanned child is popped first.
        stack.extend((grandchild, depth + 1) for grandchild in reversed(_scan(child.path)))

    logger.debug("Listed %d entries under %s", count, root)


def iter_entries(root: str | os.PathLike[str], *, follow_symlinks: bool = True) -> Iterator[Entry]:
    """Lazily list every descendant of ``root`` in pre-order.

    Raises ``InvalidPath`` immediately (not on first ``next()``) when ``root``
    does not exist. An empty directory, or a root that is not a directory,
    yields a single empty-folder marker entry. Permission and I/O errors from
    the filesystem propagate while iterating.
    """
    root_path = Path(os.path.abspath(root))
    # exists() follows symlinks and reports False for dangling or looping
    # links, so such a root is invalid too.
    if not root_path.exists():
        raise InvalidPath(root_path)
    logger.debug("Walking %s (follow_symlinks=%s)", root_path, follow_symlinks)
    return _walk(root_path, follow_symlinks)


def list_directory(root: str | os.PathLike[str], *, follow_symlinks: bool = True) -> list[Entry]:
    """Return ``iter_entries(root)`` as a list."""
    return list(iter_entries(root, follow_symlinks=follow_symlinks))


__all__ = [
    "InvalidPath",
    "empty_folder_entry",
    "entry_for_child",
    "iter_entries",
    "list_directory",
]
