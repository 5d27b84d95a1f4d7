"""UI theme definitions and selection helpers.

Themes are ANSI palettes for pane chrome, file rows and the path editor.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    divider: str
    reverse: str
    reset: str
    pane_header: str
    file_source: str
    file_default: str
    empty_hint: str
    input_text: str
    input_border: str
    suggestion: str


DEFAULT_THEME = UITheme(
    name="default",
    divider="\033[2m",
    reverse="\033[7m",
    reset="\033[0m",
    pane_header="\033[1;34m",
    file_source="\033[38;5;110m",
    file_default="\033[38;5;252m",
    empty_hint="\033[2;38;5;250m",
    input_text="\033[1;38;5;81m",
    input_border="\033[38;5;45m",
    suggestion="\033[38;5;252m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    divider="\033[2;38;5;31m",
    reverse="\033[7m",
    reset="\033[0m",
    pane_header="\033[1;38;5;45m",
    file_source="\033[38;5;117m",
    file_default="\033[38;5;252m",
    empty_hint="\033[2;38;5;110m",
    input_text="\033[1;38;5;45m",
    input_border="\033[38;5;39m",
    suggestion="\033[38;5;153m",
)

PLAIN_THEME = UITheme(
    name="plain",
    divider="",
    reverse="",
    reset="",
    pane_header="",
    file_source="",
    file_default="",
    empty_hint="",
    input_text="",
    input_border="",
    suggestion="",
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
