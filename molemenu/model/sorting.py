"""Deterministic ordering of filtered item indices."""

from __future__ import annotations

from collections.abc import Sequence

from .types import MenuItem


def sort_key_for_item(item: MenuItem, sort_key: str) -> tuple[object, int]:
    """Build the comparison key for one item, tie-broken by original index.

    Items without a recency value sort by their list position; items without
    a size sort as zero.
    """
    if sort_key == "name":
        return (item.label.casefold(), item.index)
    if sort_key == "size":
        return (item.size if item.size is not None else 0, item.index)
    return (item.recency if item.recency is not None else item.index, item.index)


def sort_item_indices(
    items: Sequence[MenuItem],
    indices: Sequence[int],
    sort_key: str,
    reverse: bool = False,
) -> list[int]:
    """Order ``indices`` by ``sort_key``.

    The reversed order is exactly the ascending order read backwards, so
    toggling reverse never reshuffles ties.
    """
    ordered = sorted(indices, key=lambda idx: sort_key_for_item(items[idx], sort_key))
    if reverse:
        ordered.reverse()
    return ordered
