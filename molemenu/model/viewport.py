"""Viewport math: clamping and single-step scrolling.

All helpers are pure and return new ``(top_index, cursor_pos)`` pairs.
"""

from __future__ import annotations


def max_top_index(visible_total: int, page_size: int) -> int:
    return max(0, visible_total - page_size)


def rows_on_page(visible_total: int, top_index: int, page_size: int) -> int:
    """Return how many rows the current page actually shows."""
    return max(0, min(page_size, visible_total - top_index))


def clamp_viewport(top_index: int, cursor_pos: int, visible_total: int, page_size: int) -> tuple[int, int]:
    """Clamp ``top_index`` into ``[0, max_top]`` and the cursor into the page."""
    top = max(0, min(top_index, max_top_index(visible_total, page_size)))
    shown = rows_on_page(visible_total, top, page_size)
    if shown <= 0:
        return top, 0
    cursor = max(0, min(cursor_pos, shown - 1))
    return top, cursor


def step_viewport(
    top_index: int,
    cursor_pos: int,
    delta: int,
    visible_total: int,
    page_size: int,
) -> tuple[int, int]:
    """Move the cursor by one row in ``delta``'s direction.

    The cursor moves within the page; at a page edge the window scrolls by a
    single row instead. Nothing wraps around at either end of the list.
    """
    top, cursor = clamp_viewport(top_index, cursor_pos, visible_total, page_size)
    if visible_total <= 0 or delta == 0:
        return top, cursor

    if delta < 0:
        if cursor > 0:
            return top, cursor - 1
        if top > 0:
            return top - 1, cursor
        return top, cursor

    if top + cursor >= visible_total - 1:
        return top, cursor
    shown = rows_on_page(visible_total, top, page_size)
    if cursor < shown - 1:
        return top, cursor + 1
    if top + shown < visible_total:
        return clamp_viewport(top + 1, cursor, visible_total, page_size)
    return top, cursor
