"""Label matching for the menu filter.

Matching is case-insensitive. By default the query may appear anywhere in the
label; a leading ``'`` anchors it to the start of the label.
"""

from __future__ import annotations

from collections.abc import Sequence

from .types import MenuItem

ANCHOR_PREFIX = "'"


def split_anchor(query: str) -> tuple[str, bool]:
    """Return ``(needle, anchored)`` for a raw filter query."""
    if query.startswith(ANCHOR_PREFIX):
        return query[len(ANCHOR_PREFIX):], True
    return query, False


def label_matches(label: str, query: str) -> bool:
    needle, anchored = split_anchor(query)
    folded_needle = needle.casefold()
    folded_label = label.casefold()
    if anchored:
        return folded_label.startswith(folded_needle)
    return folded_needle in folded_label


def filter_item_indices(items: Sequence[MenuItem], query: str, *, editing: bool) -> list[int]:
    """Return original indices of items passing ``query``.

    While the query is being edited an empty query matches nothing, so the
    list does not flash every item before the user has typed anything. An
    applied empty query matches everything.
    """
    if not query:
        return [] if editing else [item.index for item in items]
    return [item.index for item in items if label_matches(item.label, query)]
