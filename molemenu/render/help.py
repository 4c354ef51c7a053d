"""Full-screen help page listing every menu control."""

from __future__ import annotations

import os

from ..ui_theme import DEFAULT_THEME, UITheme


def help_page_lines(theme: UITheme = DEFAULT_THEME) -> list[str]:
    k, r = theme.help_key, theme.reset
    rows = (
        (f"{theme.arrow_up} / {theme.arrow_down}", "Navigate up/down"),
        ("Space", "Select/deselect item"),
        ("Enter", "Confirm selection"),
        ("S", "Change sort mode (Date / Name / Size)"),
        ("R", "Reverse current sort (asc/desc)"),
        ("F", "Filter mode, type to filter (case-insensitive; prefix with ' to match from start)"),
        ("A", "Select all (visible items)"),
        ("N", "Deselect all (visible items)"),
        ("Delete", "Backspace filter (in filter mode)"),
        ("Q / ESC", "Exit (ESC leaves filter mode first)"),
    )
    lines = [
        f"{theme.help_heading}Help - Navigation Controls{r}",
        "==========================",
        "",
    ]
    for key, text in rows:
        lines.append(f"  {k}{key:<17}{r}  {text}")
    lines.extend(["", f"{theme.dim}Press any key to continue...{r}"])
    return lines


def render_help_page(fd: int, theme: UITheme = DEFAULT_THEME) -> None:
    """Clear the screen and draw the help page on ``fd``."""
    out = ["\033[H\033[J"]
    out.extend(f"{line}\n" for line in help_page_lines(theme))
    os.write(fd, "".join(out).encode("utf-8", errors="replace"))
