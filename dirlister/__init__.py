"""Public package surface for dirlister.

Exports ``main`` for programmatic CLI invocation and the listing API.
"""

from __future__ import annotations

from .listing import Entry, EntryKind, InvalidPath, iter_entries, list_directory


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = ["main", "Entry", "EntryKind", "InvalidPath", "iter_entries", "list_directory"]
