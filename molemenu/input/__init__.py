"""Input-layer public API for key decoding.

``read_key`` turns raw terminal bytes into ``KeyEvent`` values; the event
names are plain string constants so the controller can dispatch on them.
"""

from .keys import (
    ALL,
    CHAR,
    DELETE,
    DOWN,
    ENTER,
    FILTER,
    HELP,
    LEFT,
    NONE,
    OTHER,
    QUIT,
    REVERSE,
    RIGHT,
    SORT,
    SPACE,
    UP,
    KeyEvent,
    char_event,
)
from .reader import ESC_SEQUENCE_TIMEOUT_MS, drain_pending_input, read_key

__all__ = [
    "read_key",
    "drain_pending_input",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "KeyEvent",
    "char_event",
    "ALL",
    "CHAR",
    "DELETE",
    "DOWN",
    "ENTER",
    "FILTER",
    "HELP",
    "LEFT",
    "NONE",
    "OTHER",
    "QUIT",
    "REVERSE",
    "RIGHT",
    "SORT",
    "SPACE",
    "UP",
]
