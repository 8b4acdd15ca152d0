"""UI theme definitions and selection helpers.

Themes are UI-only ANSI palettes (listing, panels, command line). Syntax
highlighting style for previews remains a separate setting.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    divider: str
    reset: str
    listing_title: str
    listing_selected: str
    listing_marker: str
    listing_dir: str
    listing_file: str
    listing_other: str
    preview_title: str
    info_title: str
    error_notice: str


DEFAULT_THEME = UITheme(
    name="default",
    divider="\033[33m",
    reset="\033[0m",
    listing_title="\033[1;33m",
    listing_selected="\033[1;30;43m",
    listing_marker="\033[1;33m",
    listing_dir="\033[1;34m",
    listing_file="\033[38;5;252m",
    listing_other="\033[38;5;244m",
    preview_title="\033[1;94m",
    info_title="\033[1;32m",
    error_notice="\033[7;31m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    divider="\033[2;38;5;31m",
    reset="\033[0m",
    listing_title="\033[1;38;5;45m",
    listing_selected="\033[1;38;5;16;48;5;45m",
    listing_marker="\033[38;5;39m",
    listing_dir="\033[1;38;5;45m",
    listing_file="\033[38;5;252m",
    listing_other="\033[38;5;110m",
    preview_title="\033[1;38;5;117m",
    info_title="\033[1;38;5;84m",
    error_notice="\033[7;38;5;203m",
)

PLAIN_THEME = UITheme(
    name="plain",
    divider="",
    reset="",
    listing_title="",
    listing_selected="\033[7m",
    listing_marker="",
    listing_dir="",
    listing_file="",
    listing_other="",
    preview_title="",
    info_title="",
    error_notice="\033[7m",
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
    if no_color or (name or "").strip().lower() == PLAIN_THEME.name:
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
