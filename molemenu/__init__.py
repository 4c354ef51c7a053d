"""Interactive paginated multi-select menu for the terminal.

``paginated_multi_select`` shows a scrollable, filterable, sortable list and
returns ``Confirmed`` with the chosen original indices or ``Cancelled``.
"""

from __future__ import annotations

import logging

from .controller import Cancelled, Confirmed, MenuResult
from .errors import MenuError, SessionInterrupted, TerminalUnavailable, UsageError
from .menu import paginated_multi_select

__version__ = "0.3.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "Cancelled",
    "Confirmed",
    "MenuError",
    "MenuResult",
    "SessionInterrupted",
    "TerminalUnavailable",
    "UsageError",
    "paginated_multi_select",
]
