"""Entry point that validates caller input and runs one menu session."""

from __future__ import annotations

import contextlib
import logging
import os
import sys
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import replace

from .config import MenuSettings, load_menu_settings
from .controller import Cancelled, Confirmed, MenuCallbacks, MenuResult, run_menu
from .errors import UsageError
from .input import drain_pending_input, read_key
from .model import build_items, normalize_sort_key, parse_index_set
from .render import render_help_page, render_menu
from .terminal import TerminalSession
from .ui_theme import DEFAULT_THEME, UITheme
from .view_model import MenuViewModel

logger = logging.getLogger(__name__)

CONTROLLING_TTY = "/dev/tty"


@contextlib.contextmanager
def open_input_fd(input_fd: int | None = None) -> Iterator[int]:
    """Yield the fd keys are read from.

    Uses ``input_fd`` when given, stdin when it is a terminal, and otherwise
    the controlling terminal so items can be piped in on stdin.
    """
    if input_fd is not None:
        yield input_fd
        return
    stdin_fd = sys.stdin.fileno()
    if os.isatty(stdin_fd):
        yield stdin_fd
        return
    try:
        tty_fd = os.open(CONTROLLING_TTY, os.O_RDONLY)
    except OSError:
        logger.warning("no controlling terminal, reading keys from stdin")
        yield stdin_fd
        return
    try:
        yield tty_fd
    finally:
        os.close(tty_fd)


def resolve_settings(
    settings: MenuSettings | None,
    *,
    sort_key: str | None,
    page_size: int | None,
    auto_select_cursor_on_empty_confirm: bool | None,
    managed_alt_screen: bool | None,
) -> MenuSettings:
    """Overlay explicit arguments on loaded settings, validating them."""
    resolved = settings if settings is not None else load_menu_settings()
    overrides: dict[str, object] = {}
    if sort_key is not None:
        normalized = normalize_sort_key(sort_key)
        if normalized is None:
            raise UsageError(f"unknown sort key: {sort_key!r}")
        overrides["sort_key"] = normalized
    if page_size is not None:
        if isinstance(page_size, bool) or not isinstance(page_size, int) or page_size < 1:
            raise UsageError(f"page size must be a positive integer, got {page_size!r}")
        overrides["page_size"] = page_size
    if auto_select_cursor_on_empty_confirm is not None:
        overrides["auto_select_cursor_on_empty_confirm"] = bool(auto_select_cursor_on_empty_confirm)
    if managed_alt_screen is not None:
        overrides["managed_alt_screen"] = bool(managed_alt_screen)
    return replace(resolved, **overrides) if overrides else resolved


def paginated_multi_select(
    title: str,
    items: Sequence[str],
    *,
    recency: Sequence[object] | None = None,
    sizes: Sequence[object] | None = None,
    preselected: Iterable[object] | None = None,
    sort_key: str | None = None,
    page_size: int | None = None,
    auto_select_cursor_on_empty_confirm: bool | None = None,
    managed_alt_screen: bool | None = None,
    settings: MenuSettings | None = None,
    input_fd: int | None = None,
    display_fd: int | None = None,
    theme: UITheme = DEFAULT_THEME,
) -> MenuResult:
    """Show an interactive multi-select menu and return the user's choice.

    ``items`` must be non-empty; ``UsageError`` is raised before the terminal
    is touched otherwise. ``recency`` (epoch seconds) and ``sizes`` (KB) are
    optional lists parallel to ``items``. ``preselected`` entries that are out
    of range or non-numeric are ignored.

    Returns ``Confirmed`` with the selected original indices (possibly empty)
    or ``Cancelled``. Drawing goes to ``display_fd`` (stderr by default), never
    to stdout.
    """
    if not items:
        raise UsageError("No items provided")
    resolved = resolve_settings(
        settings,
        sort_key=sort_key,
        page_size=page_size,
        auto_select_cursor_on_empty_confirm=auto_select_cursor_on_empty_confirm,
        managed_alt_screen=managed_alt_screen,
    )

    menu_items = build_items(items, recency, sizes)
    model = MenuViewModel.from_items(
        menu_items,
        preselected=parse_index_set(preselected, len(menu_items)),
        page_size=resolved.page_size,
        sort_key=resolved.sort_key,
    )
    out_fd = sys.stderr.fileno() if display_fd is None else display_fd

    with open_input_fd(input_fd) as key_fd:
        session = TerminalSession(key_fd, out_fd, managed_alt_screen=resolved.managed_alt_screen)

        def show_help() -> None:
            render_help_page(out_fd, theme)
            read_key(key_fd, timeout_ms=resolved.escape_timeout_ms)

        callbacks = MenuCallbacks(
            render=lambda current: render_menu(current, title, out_fd, theme=theme),
            read_key=lambda editing: read_key(key_fd, editing=editing, timeout_ms=resolved.escape_timeout_ms),
            show_help=show_help,
            drain_input=lambda: drain_pending_input(key_fd),
        )
        with session.session():
            result = run_menu(
                model,
                callbacks,
                auto_select_cursor_on_empty_confirm=resolved.auto_select_cursor_on_empty_confirm,
            )

    if isinstance(result, Cancelled):
        logger.info("selection cancelled: %s", title)
    else:
        logger.info("selection confirmed: %s (%d items)", title, len(result.indices))
    return result


__all__ = [
    "Cancelled",
    "Confirmed",
    "MenuResult",
    "open_input_fd",
    "paginated_multi_select",
    "resolve_settings",
]
