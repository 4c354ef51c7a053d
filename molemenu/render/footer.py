"""Footer control hints and width-aware wrapping."""

from __future__ import annotations

from collections.abc import Sequence

from ..ansi import display_width
from ..ui_theme import UITheme


def browse_segments(theme: UITheme) -> tuple[str, ...]:
    d, r = theme.dim, theme.reset
    return (
        f"{d}{theme.arrow_up}/{theme.arrow_down}{r} Navigate",
        f"{d}Space{r} Select",
        f"{d}Enter{r} Confirm",
        f"{d}S/s{r} Sort",
        f"{d}R/r{r} Reverse",
        f"{d}F/f{r} Filter",
        f"{d}A{r} All",
        f"{d}N{r} None",
        f"{d}?{r} Help",
        f"{d}Q/ESC{r} Quit",
    )


def editing_segments(theme: UITheme) -> tuple[str, ...]:
    d, r = theme.dim, theme.reset
    return (
        f"{d}Type to filter{r}",
        f"{d}Delete{r} Backspace",
        f"{d}Enter{r} Apply",
        f"{d}ESC{r} Cancel",
    )


def segment_separator(theme: UITheme) -> str:
    return f"  {theme.dim}|{theme.reset}  "


def wrap_control_segments(segments: Sequence[str], separator: str, columns: int) -> list[str]:
    """Join hint segments into lines no wider than ``columns``.

    Breaks only between whole segments; a single segment wider than the
    terminal is kept intact on its own line. Widths ignore ANSI sequences.
    """
    lines: list[str] = []
    line = ""
    for segment in segments:
        candidate = segment if not line else f"{line}{separator}{segment}"
        if line and display_width(candidate) > columns:
            lines.append(line)
            line = segment
        else:
            line = candidate
    lines.append(line)
    return lines
