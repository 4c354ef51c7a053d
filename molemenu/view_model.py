"""Mutable menu state and the operations the controller applies to it.

``MenuViewModel`` is the single owner of the item list, the selection flags,
the filter/sort state, and the viewport. Rendering reads it; only the
controller mutates it.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field

from .model import (
    DEFAULT_SORT_KEY,
    MenuItem,
    clamp_viewport,
    filter_item_indices,
    next_sort_key,
    rows_on_page,
    sort_item_indices,
    step_viewport,
)

DEFAULT_PAGE_SIZE = 15


@dataclass
class MenuViewModel:
    items: list[MenuItem]
    page_size: int = DEFAULT_PAGE_SIZE
    sort_key: str = DEFAULT_SORT_KEY
    sort_reverse: bool = False
    filter_editing: bool = False
    filter_query: str = ""
    applied_query: str = ""
    searching: bool = False
    top_index: int = 0
    cursor_pos: int = 0
    selected: list[bool] = field(default_factory=list)
    view_indices: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.page_size = max(1, int(self.page_size))
        if len(self.selected) != len(self.items):
            self.selected = [False] * len(self.items)
        self.rebuild_view()

    @classmethod
    def from_items(
        cls,
        items: Sequence[MenuItem],
        *,
        preselected: Iterable[int] = (),
        page_size: int = DEFAULT_PAGE_SIZE,
        sort_key: str = DEFAULT_SORT_KEY,
    ) -> MenuViewModel:
        model = cls(items=list(items), page_size=page_size, sort_key=sort_key)
        for idx in preselected:
            if 0 <= idx < len(model.items):
                model.selected[idx] = True
        return model

    @property
    def total_items(self) -> int:
        return len(self.items)

    @property
    def visible_total(self) -> int:
        return len(self.view_indices)

    @property
    def selected_count(self) -> int:
        return sum(1 for flag in self.selected if flag)

    @property
    def active_query(self) -> str:
        return self.filter_query if self.filter_editing else self.applied_query

    def page_indices(self) -> list[int]:
        """Return original indices of the rows on the current page."""
        shown = rows_on_page(self.visible_total, self.top_index, self.page_size)
        return self.view_indices[self.top_index:self.top_index + shown]

    def cursor_index(self) -> int | None:
        """Return the original index under the cursor, if any row is visible."""
        pos = self.top_index + self.cursor_pos
        if 0 <= pos < self.visible_total:
            return self.view_indices[pos]
        return None

    def selected_indices(self) -> list[int]:
        return [idx for idx, flag in enumerate(self.selected) if flag]

    # Selection

    def toggle_selection(self, original_index: int) -> None:
        self.selected[original_index] = not self.selected[original_index]

    def toggle_cursor_selection(self) -> bool:
        idx = self.cursor_index()
        if idx is None:
            return False
        self.toggle_selection(idx)
        return True

    def select_all_visible(self) -> None:
        for idx in self.view_indices:
            self.selected[idx] = True

    def deselect_all_visible(self) -> None:
        for idx in self.view_indices:
            self.selected[idx] = False

    # Filtering

    def reset_viewport(self) -> None:
        self.top_index = 0
        self.cursor_pos = 0

    def begin_filter_edit(self) -> None:
        self.filter_editing = True
        self.filter_query = ""
        self.reset_viewport()
        self.rebuild_view()

    def append_filter_char(self, ch: str) -> bool:
        """Append ``ch`` to the live query; leading spaces are ignored."""
        if not self.filter_editing or not ch:
            return False
        if not self.filter_query and ch == " ":
            return False
        self.filter_query += ch
        self.rebuild_view()
        return True

    def backspace_filter(self) -> bool:
        if not self.filter_editing or not self.filter_query:
            return False
        self.filter_query = self.filter_query[:-1]
        self.rebuild_view()
        return True

    def apply_filter(self, on_searching: Callable[[], None] | None = None) -> None:
        """Commit the live query and rebuild the view.

        ``on_searching`` runs while ``searching`` is set so the caller can paint
        a progress frame before a potentially slow rebuild.
        """
        self.applied_query = self.filter_query
        self.filter_editing = False
        self.reset_viewport()
        self.searching = True
        try:
            if on_searching is not None:
                on_searching()
            self.rebuild_view()
        finally:
            self.searching = False

    def cancel_filter_edit(self) -> None:
        """Abandon editing and drop any applied filter."""
        self.filter_editing = False
        self.filter_query = ""
        self.applied_query = ""
        self.reset_viewport()
        self.rebuild_view()

    # Sorting

    def cycle_sort(self) -> None:
        self.sort_key = next_sort_key(self.sort_key)
        self.rebuild_view()

    def toggle_reverse(self) -> None:
        self.sort_reverse = not self.sort_reverse
        self.rebuild_view()

    # View

    def rebuild_view(self) -> None:
        matched = filter_item_indices(self.items, self.active_query, editing=self.filter_editing)
        self.view_indices = sort_item_indices(self.items, matched, self.sort_key, self.sort_reverse)
        self.clamp()

    def clamp(self) -> None:
        self.top_index, self.cursor_pos = clamp_viewport(
            self.top_index,
            self.cursor_pos,
            self.visible_total,
            self.page_size,
        )

    def move_cursor(self, delta: int) -> bool:
        before = (self.top_index, self.cursor_pos)
        self.top_index, self.cursor_pos = step_viewport(
            self.top_index,
            self.cursor_pos,
            delta,
            self.visible_total,
            self.page_size,
        )
        return (self.top_index, self.cursor_pos) != before
