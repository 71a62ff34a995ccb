"""Command-line front door for dirlister.

Parses CLI options, picks the path source (argument or prompt) and the output
sink (table or TSV), then runs one listing through ``DirectoryLister``.
"""

from __future__ import annotations

import argparse
import logging
import shutil
import sys
from collections.abc import Callable
from pathlib import Path
from typing import TextIO

from . import config
from .lister import DirectoryLister
from .logging_config import setup_logging
from .render import DelimitedSink, TerminalTableSink
from .selection import fixed_path_source, prompt_path_source
from .ui_theme import UITheme, available_theme_names, resolve_theme

logger = logging.getLogger(__name__)


def _theme_name(value: str) -> str:
    """argparse type for ``--theme`` values."""
    candidate = value.strip().lower()
    if candidate not in available_theme_names():
        raise argparse.ArgumentTypeError(
            f"unknown theme {value!r} (choose from {', '.join(available_theme_names())})"
        )
    return candidate


def _default_render_width() -> int:
    """Resolve table width from current terminal size."""
    term = shutil.get_terminal_size((80, 24))
    return max(1, term.columns)


def _stream_wants_color(stream: TextIO) -> bool:
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def _notice_writer(stream: TextIO, theme: UITheme) -> Callable[[str], None]:
    """Return a ``notify`` callback printing ``Error: <message>`` to ``stream``."""

    def notify(message: str) -> None:
        label = f"{theme.notice_error}Error:{theme.reset}" if theme.notice_error else "Error:"
        stream.write(f"{label} {message}\n")
        stream.flush()

    return notify


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dirlister",
        description="Recursively list a directory with size, type, and last-modified time.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Directory to list. Prompts for one when omitted.",
    )
    parser.add_argument(
        "--theme",
        type=_theme_name,
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument("--tsv", action="store_true", help="Print tab-separated rows instead of a table.")
    parser.add_argument(
        "--follow-symlinks",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Descend into symlinked directories (default: on, or the saved preference).",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr.")
    parser.add_argument("--log-file", type=Path, default=None, help="Also write debug logs to this file.")
    return parser


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and list one directory.

    ``default_path`` is primarily for tests; it replaces the remembered last
    directory as the prompt default. Exits with status 1 when the selection
    was cancelled or the path does not exist. Explicit ``--theme`` and
    ``--[no-]follow-symlinks`` values are remembered after a successful
    listing.
    """
    args = build_parser().parse_args()
    setup_logging(verbose=args.verbose, log_file=args.log_file)

    theme_name = args.theme if args.theme is not None else config.load_theme_name()
    follow_symlinks = args.follow_symlinks if args.follow_symlinks is not None else config.load_follow_symlinks()
    logger.debug("Options: theme=%s follow_symlinks=%s tsv=%s", theme_name, follow_symlinks, args.tsv)

    stdout_theme = resolve_theme(theme_name, no_color=args.no_color or not _stream_wants_color(sys.stdout))
    stderr_theme = resolve_theme(theme_name, no_color=args.no_color or not _stream_wants_color(sys.stderr))

    if args.tsv:
        sink: DelimitedSink | TerminalTableSink = DelimitedSink(sys.stdout)
    else:
        sink = TerminalTableSink(sys.stdout, width=_default_render_width(), theme=stdout_theme)

    if args.path is not None:
        source = fixed_path_source(args.path)
    else:
        prompt_default = default_path if default_path is not None else config.load_last_directory()
        source = prompt_path_source(default=prompt_default)

    lister = DirectoryLister(sink, _notice_writer(sys.stderr, stderr_theme), follow_symlinks=follow_symlinks)
    listed = lister.select_directory(source)
    sink.finish()
    if not listed:
        raise SystemExit(1)

    if args.theme is not None:
        config.save_theme_name(args.theme)
    if args.follow_symlinks is not None:
        config.save_follow_symlinks(args.follow_symlinks)
    assert lister.base_path is not None
    # A file root lists as the empty-folder row; only directories become the prompt default.
    if lister.base_path.is_dir():
        config.save_last_directory(lister.base_path.absolute())


if __name__ == "__main__":
    main()
