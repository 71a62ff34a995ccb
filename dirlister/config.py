"""Persistent JSON config helpers.

Stores the UI theme, the last listed directory, and the symlink preference.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "dirlister"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem errors are ignored so an unwritable config never stops a
    listing.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError:
        pass


def _load_nonempty_str(key: str) -> str | None:
    value = load_config().get(key)
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def _save_nonempty_str(key: str, value: str) -> None:
    stripped = str(value).strip()
    if not stripped:
        return
    config = load_config()
    config[key] = stripped
    save_config(config)


def load_theme_name() -> str | None:
    """Load persisted UI theme name, returning ``None`` when unset/invalid."""
    return _load_nonempty_str("theme")


def save_theme_name(theme_name: str) -> None:
    """Persist selected UI theme name."""
    _save_nonempty_str("theme", theme_name)


def load_last_directory() -> Path | None:
    """Load the most recently listed directory, if one was recorded."""
    value = _load_nonempty_str("last_directory")
    return Path(value) if value is not None else None


def save_last_directory(path: Path) -> None:
    """Remember ``path`` as the default answer for the next prompt."""
    _save_nonempty_str("last_directory", str(path))


def load_follow_symlinks() -> bool:
    """Return persisted symlink-following preference.

    Only explicit boolean values are accepted; anything else falls back to
    ``True``.
    """
    value = load_config().get("follow_symlinks")
    return value if isinstance(value, bool) else True


def save_follow_symlinks(follow_symlinks: bool) -> None:
    """Persist symlink-following preference as a boolean."""
    config = load_config()
    config["follow_symlinks"] = bool(follow_symlinks)
    save_config(config)
