"""Pure menu data model: items, matching, ordering, and viewport math."""

from .matching import ANCHOR_PREFIX, filter_item_indices, label_matches, split_anchor
from .sorting import sort_item_indices, sort_key_for_item
from .types import (
    DEFAULT_SORT_KEY,
    SORT_KEYS,
    SORT_LABELS,
    MenuItem,
    build_items,
    next_sort_key,
    normalize_sort_key,
    parse_index_set,
    split_csv,
)
from .viewport import clamp_viewport, max_top_index, rows_on_page, step_viewport

__all__ = [
    "ANCHOR_PREFIX",
    "DEFAULT_SORT_KEY",
    "SORT_KEYS",
    "SORT_LABELS",
    "MenuItem",
    "build_items",
    "clamp_viewport",
    "filter_item_indices",
    "label_matches",
    "max_top_index",
    "next_sort_key",
    "normalize_sort_key",
    "parse_index_set",
    "rows_on_page",
    "sort_item_indices",
    "sort_key_for_item",
    "split_anchor",
    "split_csv",
    "step_viewport",
]
