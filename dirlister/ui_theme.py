"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the listing table and notices.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    address: str
    header: str
    divider: str
    directory: str
    file: str
    size: str
    modified: str
    empty_marker: str
    notice_error: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    address="\033[1;38;5;81m",
    header="\033[1m",
    divider="\033[2m",
    directory="\033[1;34m",
    file="\033[38;5;252m",
    size="\033[38;5;109m",
    modified="\033[2;38;5;250m",
    empty_marker="\033[3;38;5;250m",
    notice_error="\033[1;31m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    address="\033[1;38;5;45m",
    header="\033[1;38;5;153m",
    divider="\033[2;38;5;31m",
    directory="\033[1;38;5;45m",
    file="\033[38;5;252m",
    size="\033[38;5;73m",
    modified="\033[2;38;5;110m",
    empty_marker="\033[3;38;5;110m",
    notice_error="\033[1;38;5;203m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    address="",
    header="",
    divider="",
    directory="",
    file="",
    size="",
    modified="",
    empty_marker="",
    notice_error="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
