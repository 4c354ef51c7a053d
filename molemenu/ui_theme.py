"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the menu chrome (title, status, rows, footer).
The plain theme is used when color is disabled.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    reverse: str
    title: str
    dim: str
    cursor: str
    filter_applied: str
    filter_editing: str
    help_heading: str
    help_key: str
    checkbox_on: str = "◉"
    checkbox_off: str = "○"
    cursor_marker: str = "➤"
    arrow_up: str = "↑"
    arrow_down: str = "↓"


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    reverse="\033[7m",
    title="\033[0;35m",
    dim="\033[0;90m",
    cursor="\033[0;34m",
    filter_applied="\033[0;32m",
    filter_editing="\033[1;33m",
    help_heading="\033[1;38;5;81m",
    help_key="\033[38;5;229m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    reverse="",
    title="",
    dim="",
    cursor="",
    filter_applied="",
    filter_editing="",
    help_heading="",
    help_key="",
    checkbox_on="[x]",
    checkbox_off="[ ]",
    cursor_marker=">",
    arrow_up="^",
    arrow_down="v",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    PLAIN_THEME.name: PLAIN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable theme names."""
    return tuple(sorted(_THEMES.keys()))


def resolve_theme(name: str | None = None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    if not name:
        return DEFAULT_THEME
    return _THEMES.get(str(name).strip().lower(), DEFAULT_THEME)


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "resolve_theme",
]
