"""Item records and sort-mode constants for the selection menu."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

SORT_KEYS: tuple[str, ...] = ("date", "name", "size")
SORT_LABELS: dict[str, str] = {"date": "Date", "name": "Name", "size": "Size"}
DEFAULT_SORT_KEY = "date"


@dataclass(frozen=True)
class MenuItem:
    """One selectable row.

    ``index`` is the caller's original position and the item's stable identity.
    ``recency`` is an epoch timestamp in seconds and ``size`` is in KB; either
    may be ``None`` when the caller did not supply metadata.
    """

    index: int
    label: str
    recency: int | None = None
    size: int | None = None


def normalize_sort_key(value: object) -> str | None:
    """Return a known sort key for ``value`` or ``None``."""
    if not isinstance(value, str):
        return None
    candidate = value.strip().lower()
    return candidate if candidate in SORT_KEYS else None


def next_sort_key(current: str) -> str:
    """Cycle date -> name -> size -> date."""
    try:
        pos = SORT_KEYS.index(current)
    except ValueError:
        return DEFAULT_SORT_KEY
    return SORT_KEYS[(pos + 1) % len(SORT_KEYS)]


def _metadata_value(values: Sequence[object] | None, idx: int) -> int | None:
    if values is None or idx >= len(values):
        return None
    raw = values[idx]
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str):
        stripped = raw.strip()
        try:
            return int(stripped)
        except ValueError:
            return None
    return None


def build_items(
    labels: Sequence[str],
    recency: Sequence[object] | None = None,
    sizes: Sequence[object] | None = None,
) -> list[MenuItem]:
    """Zip labels with optional parallel metadata into ``MenuItem`` records.

    Metadata lists shorter than ``labels`` leave the remaining items without a
    value; extra entries are ignored. Non-numeric entries count as missing.
    """
    return [
        MenuItem(
            index=idx,
            label=str(label),
            recency=_metadata_value(recency, idx),
            size=_metadata_value(sizes, idx),
        )
        for idx, label in enumerate(labels)
    ]


def parse_index_set(values: Iterable[object] | None, total: int) -> set[int]:
    """Validate caller-supplied preselected indices.

    Accepts ints or numeric strings; out-of-range, negative and non-numeric
    entries are silently dropped.
    """
    selected: set[int] = set()
    if values is None:
        return selected
    for raw in values:
        if isinstance(raw, bool):
            continue
        if isinstance(raw, int):
            idx = raw
        elif isinstance(raw, str) and raw.strip().isdigit():
            idx = int(raw.strip())
        else:
            continue
        if 0 <= idx < total:
            selected.add(idx)
    return selected


def split_csv(value: str | None) -> list[str]:
    """Split a comma-separated list, dropping whitespace."""
    if not value:
        return []
    return ["".join(part.split()) for part in value.split(",")]
