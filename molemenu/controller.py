"""Event loop for the selection menu.

Each iteration renders the current state, blocks for exactly one key, and
applies the resulting transition. The loop ends with ``Confirmed`` or
``Cancelled``; there are no timers besides the decoder's escape timeout.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Union

from .input import (
    ALL,
    CHAR,
    DELETE,
    DOWN,
    ENTER,
    FILTER,
    HELP,
    NONE,
    QUIT,
    REVERSE,
    SORT,
    SPACE,
    UP,
    KeyEvent,
)
from .view_model import MenuViewModel

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Confirmed:
    """User pressed Enter; ``indices`` are original item indices, ascending."""

    indices: tuple[int, ...] = ()

    confirmed = True

    def as_csv(self) -> str:
        return ",".join(str(idx) for idx in self.indices)


@dataclass(frozen=True)
class Cancelled:
    """User quit the menu without confirming."""

    confirmed = False


MenuResult = Union[Confirmed, Cancelled]


@dataclass(frozen=True)
class MenuCallbacks:
    """Injected side effects used by ``run_menu``.

    Keeping terminal I/O behind callbacks lets tests drive the loop with a
    scripted key sequence.
    """

    render: Callable[[MenuViewModel], None]
    read_key: Callable[[bool], KeyEvent]
    show_help: Callable[[], None]
    drain_input: Callable[[], None] = lambda: None


def _confirm(model: MenuViewModel, auto_select_cursor_on_empty_confirm: bool) -> Confirmed:
    indices = model.selected_indices()
    if not indices and auto_select_cursor_on_empty_confirm:
        cursor = model.cursor_index()
        if cursor is not None:
            indices = [cursor]
    return Confirmed(tuple(indices))


def handle_editing_key(model: MenuViewModel, key: KeyEvent, callbacks: MenuCallbacks) -> None:
    """Apply one key while the filter query is being edited."""
    if key.name == CHAR:
        model.append_filter_char(key.char)
    elif key.name == DELETE:
        model.backspace_filter()
    elif key.name == ENTER:

        def paint_searching() -> None:
            callbacks.render(model)
            callbacks.drain_input()

        model.apply_filter(on_searching=paint_searching)
    elif key.name == QUIT:
        model.cancel_filter_edit()
    elif key.name == UP:
        model.move_cursor(-1)
    elif key.name == DOWN:
        model.move_cursor(1)


def handle_browsing_key(model: MenuViewModel, key: KeyEvent, callbacks: MenuCallbacks) -> bool:
    """Apply one key while browsing. Returns ``False`` for keys it ignores."""
    if key.name == UP:
        model.move_cursor(-1)
    elif key.name == DOWN:
        model.move_cursor(1)
    elif key.name == SPACE:
        model.toggle_cursor_selection()
    elif key.name == ALL:
        model.select_all_visible()
    elif key.name == NONE:
        model.deselect_all_visible()
    elif key.name == SORT:
        model.cycle_sort()
    elif key.name == REVERSE:
        model.toggle_reverse()
    elif key.name == FILTER:
        model.begin_filter_edit()
    elif key.name == HELP:
        callbacks.show_help()
    else:
        return False
    return True


def run_menu(
    model: MenuViewModel,
    callbacks: MenuCallbacks,
    *,
    auto_select_cursor_on_empty_confirm: bool = False,
) -> MenuResult:
    """Drive ``model`` until the user confirms or cancels."""
    while True:
        callbacks.render(model)
        key = callbacks.read_key(model.filter_editing)

        if model.filter_editing:
            handle_editing_key(model, key, callbacks)
            continue

        if key.name == QUIT:
            logger.debug("menu cancelled")
            return Cancelled()
        if key.name == ENTER:
            result = _confirm(model, auto_select_cursor_on_empty_confirm)
            logger.debug("menu confirmed with %d selected", len(result.indices))
            return result
        handle_browsing_key(model, key, callbacks)
