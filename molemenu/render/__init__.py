"""Rendering engine for the paginated selection menu.

Builds complete frames from a ``MenuViewModel`` and writes them to the display
fd. Every frame homes the cursor, clears each line it writes, and always emits
``page_size`` item rows so a shorter page never leaves stale rows behind.
"""

from __future__ import annotations

import os

from ..ansi import clip_ansi_line
from ..model import SORT_LABELS
from ..ui_theme import DEFAULT_THEME, UITheme
from ..view_model import MenuViewModel
from .footer import (
    browse_segments,
    editing_segments,
    segment_separator,
    wrap_control_segments,
)
from .help import help_page_lines, render_help_page

DEFAULT_COLUMNS = 80
CLEAR_LINE = "\r\033[2K"


def terminal_columns(fd: int | None = None) -> int:
    """Return the display width, trying ``$COLUMNS`` then the fd, else 80."""
    raw = os.environ.get("COLUMNS", "").strip()
    if raw.isdigit() and int(raw) > 0:
        return int(raw)
    if fd is not None:
        try:
            columns = os.get_terminal_size(fd).columns
        except OSError:
            columns = 0
        if columns > 0:
            return columns
    return DEFAULT_COLUMNS


def selected_with_ansi(text: str, theme: UITheme = DEFAULT_THEME) -> str:
    """Apply cursor-row styling without discarding existing ANSI colors."""
    if not text or not theme.reverse:
        return text

    # Keep reverse video active even when the text contains internal resets.
    return theme.reverse + text.replace("\033[0m", "\033[0;7m") + theme.reset


def _header_line(model: MenuViewModel, title: str, theme: UITheme) -> str:
    return (
        f"{theme.title}{title}{theme.reset}  "
        f"{theme.dim}{model.selected_count}/{model.total_items} selected{theme.reset}"
    )


def _filter_label(model: MenuViewModel, theme: UITheme) -> str:
    if model.filter_editing:
        return f"{theme.filter_editing}{model.filter_query}{theme.reset}{theme.dim} [editing]{theme.reset}"
    if model.applied_query:
        suffix = f"{theme.dim} [searching…]{theme.reset}" if model.searching else ""
        return f"{theme.filter_applied}{model.applied_query}{theme.reset}{suffix}"
    return f"{theme.dim}—{theme.reset}"


def _status_line(model: MenuViewModel, theme: UITheme) -> str:
    arrow = theme.arrow_down if model.sort_reverse else theme.arrow_up
    sort_label = SORT_LABELS.get(model.sort_key, model.sort_key.title())
    return (
        f"{theme.dim}Sort:{theme.reset} {sort_label} {arrow}  "
        f"{theme.dim}|{theme.reset}  {theme.dim}Filter:{theme.reset} {_filter_label(model, theme)}"
    )


def _empty_state_line(model: MenuViewModel, theme: UITheme) -> str:
    if model.filter_editing:
        return f"{theme.dim}Type to filter (prefix with ' to match from start){theme.reset}"
    if model.searching:
        return f"{theme.dim}Searching…{theme.reset}"
    return f"{theme.dim}No items available{theme.reset}"


def _item_row(model: MenuViewModel, original_index: int, is_cursor: bool, theme: UITheme) -> str:
    checkbox = theme.checkbox_on if model.selected[original_index] else theme.checkbox_off
    label = model.items[original_index].label
    if is_cursor:
        return selected_with_ansi(f"{theme.cursor}{theme.cursor_marker} {checkbox} {label}{theme.reset}", theme)
    return f"  {checkbox} {label}"


def item_rows(model: MenuViewModel, theme: UITheme = DEFAULT_THEME) -> list[str]:
    """Return exactly ``page_size`` item-area rows, padded with blanks."""
    rows: list[str] = []
    page = model.page_indices()
    if not page:
        rows.append(_empty_state_line(model, theme))
    for offset, original_index in enumerate(page):
        rows.append(_item_row(model, original_index, offset == model.cursor_pos, theme))
    rows.extend("" for _ in range(model.page_size - len(rows)))
    return rows


def footer_lines(model: MenuViewModel, columns: int, theme: UITheme = DEFAULT_THEME) -> list[str]:
    segments = editing_segments(theme) if model.filter_editing else browse_segments(theme)
    return wrap_control_segments(segments, segment_separator(theme), columns)


def build_menu_lines(
    model: MenuViewModel,
    title: str,
    columns: int = DEFAULT_COLUMNS,
    theme: UITheme = DEFAULT_THEME,
) -> list[str]:
    """Compose all lines of one frame, top to bottom."""
    lines = [_header_line(model, title, theme), _status_line(model, theme)]
    if model.filter_editing:
        lines.append(f"{theme.dim}Tip:{theme.reset} prefix with {theme.filter_editing}'{theme.reset} to match from start")
    # Header, status and tip lines never exceed the width.
    lines = [clip_ansi_line(line, columns) for line in lines]
    lines.append("")
    lines.extend(clip_ansi_line(row, columns) if row else row for row in item_rows(model, theme))
    lines.append("")
    lines.extend(footer_lines(model, columns, theme))
    return lines


def render_menu(
    model: MenuViewModel,
    title: str,
    fd: int,
    *,
    columns: int | None = None,
    theme: UITheme = DEFAULT_THEME,
) -> None:
    """Write one full frame to ``fd``.

    The width is sampled per frame; nothing is cached between renders.
    """
    if columns is None:
        columns = terminal_columns(fd)
    out = ["\033[H"]
    for line in build_menu_lines(model, title, columns, theme):
        out.append(f"{CLEAR_LINE}{line}\n")
    out.append("\033[J")
    os.write(fd, "".join(out).encode("utf-8", errors="replace"))


__all__ = [
    "CLEAR_LINE",
    "DEFAULT_COLUMNS",
    "build_menu_lines",
    "footer_lines",
    "help_page_lines",
    "item_rows",
    "render_help_page",
    "render_menu",
    "selected_with_ansi",
    "terminal_columns",
    "wrap_control_segments",
]
