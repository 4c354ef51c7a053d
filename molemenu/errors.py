"""Exception taxonomy for the selection menu.

Usage problems are raised before the terminal is touched. Terminal problems
degrade instead of failing, and interrupts always exit after restoration.
"""

from __future__ import annotations


class MenuError(Exception):
    """Base class for menu errors."""


class UsageError(MenuError, ValueError):
    """Caller supplied arguments the menu cannot run with (e.g. no items)."""


class TerminalUnavailable(MenuError):
    """Terminal attributes could not be captured (not a TTY, or tcgetattr failed)."""


class SessionInterrupted(SystemExit):
    """Raised from a signal handler once the terminal has been restored.

    The exit status is ``128 + signum`` so callers can tell an interrupt (130)
    or a termination request (143) apart from a cancel.
    """

    def __init__(self, signum: int) -> None:
        super().__init__(128 + signum)
        self.signum = signum


__all__ = [
    "MenuError",
    "UsageError",
    "TerminalUnavailable",
    "SessionInterrupted",
]
