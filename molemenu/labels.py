"""Row formatting for application-scanner records.

The app scanner emits ``epoch|app_path|app_name|bundle_id|size|last_used``
lines. These helpers turn them into fixed-width menu labels plus the numeric
metadata the menu sorts on.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

NAME_WIDTH = 24
RECORD_FIELDS = 6

_HUMAN_SIZE_RE = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*([KMGT]?)i?B?\s*$", re.IGNORECASE)
_UNIT_KB = {"": 1 / 1024, "K": 1, "M": 1024, "G": 1024**2, "T": 1024**3}


@dataclass(frozen=True)
class AppRecord:
    epoch: int
    path: str
    name: str
    bundle_id: str
    size: str
    last_used: str

    @property
    def size_kb(self) -> int | None:
        return human_size_to_kb(self.size)

    def label(self) -> str:
        return format_app_display(self.name, self.size, self.last_used)


def human_size_to_kb(text: str) -> int | None:
    """Convert ``du -sh`` style sizes ("1.2G", "512K", "300B") to whole KB."""
    match = _HUMAN_SIZE_RE.match(text or "")
    if match is None:
        return None
    value = float(match.group(1))
    unit = match.group(2).upper()
    return int(round(value * _UNIT_KB[unit]))


def format_app_display(name: str, size: str, last_used: str) -> str:
    """Return ``name (size) | last_used`` with the name padded to 24 columns.

    Names longer than 24 characters are cut to 21 and suffixed with ``...``.
    Missing or zero sizes render as ``Unknown``.
    """
    truncated = name if len(name) <= NAME_WIDTH else f"{name[:NAME_WIDTH - 3]}..."
    size_str = size if size not in {"", "0", "Unknown"} else "Unknown"
    return f"{truncated:<{NAME_WIDTH}} ({size_str}) | {last_used}"


def parse_app_record(line: str) -> AppRecord | None:
    """Parse one scanner line; returns ``None`` for malformed input."""
    parts = line.rstrip("\r\n").split("|")
    if len(parts) < RECORD_FIELDS:
        return None
    # App names may contain "|"; everything between bundle id and path is the name.
    epoch_s, path = parts[0], parts[1]
    size, last_used = parts[-2], parts[-1]
    bundle_id = parts[-3]
    name = "|".join(parts[2:-3])
    try:
        epoch = int(epoch_s.strip() or 0)
    except ValueError:
        epoch = 0
    return AppRecord(epoch=epoch, path=path, name=name, bundle_id=bundle_id, size=size, last_used=last_used)
