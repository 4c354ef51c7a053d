"""Terminal control for the menu session.

Owns cbreak-mode lifecycle, alternate-screen switching, cursor visibility, and
the SIGINT/SIGTERM handlers that restore the terminal before the process
exits. ``exit()`` is idempotent, so a normal return and a late signal can both
call it safely.
"""

from __future__ import annotations

import contextlib
import logging
import os
import signal
import subprocess
import termios
import tty

from .errors import SessionInterrupted, TerminalUnavailable

logger = logging.getLogger(__name__)

ENTER_ALT_SCREEN = b"\x1b[?1049h"
LEAVE_ALT_SCREEN = b"\x1b[?1049l"
CLEAR_SCREEN = b"\x1b[2J\x1b[H"
CURSOR_HOME = b"\x1b[H"
HIDE_CURSOR = b"\x1b[?25l"
SHOW_CURSOR = b"\x1b[?25h"

HANDLED_SIGNALS: tuple[int, ...] = (signal.SIGINT, signal.SIGTERM)


def capture_tty_state(fd: int) -> list:
    """Return ``tcgetattr`` output for ``fd`` or raise ``TerminalUnavailable``."""
    if not os.isatty(fd):
        raise TerminalUnavailable(f"fd {fd} is not a terminal")
    try:
        return termios.tcgetattr(fd)
    except termios.error as exc:
        raise TerminalUnavailable(str(exc)) from exc


def reset_terminal_sane(fd: int) -> None:
    """Best-effort generic reset used when no saved attributes exist."""
    for args in (["stty", "sane"], ["stty", "echo", "icanon"]):
        try:
            result = subprocess.run(args, stdin=fd, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL, check=False)
        except OSError:
            continue
        if result.returncode == 0:
            return


class TerminalSession:
    """Manage terminal mode transitions for one menu invocation."""

    def __init__(self, stdin_fd: int, display_fd: int, *, managed_alt_screen: bool = False) -> None:
        """Bind input/display fds; ``managed_alt_screen`` means a parent owns the alt screen."""
        self.stdin_fd = stdin_fd
        self.display_fd = display_fd
        self.managed_alt_screen = managed_alt_screen
        self.active = False
        self.degraded = False
        self._saved_tty_state: list | None = None
        self._previous_handlers: dict[int, object] = {}
        self._restoring = False
        self._deferred_signal: int | None = None

    def _write(self, data: bytes) -> None:
        try:
            os.write(self.display_fd, data)
        except OSError:
            logger.debug("display write failed", exc_info=True)

    def enter(self) -> None:
        """Switch to cbreak mode, the alternate screen, and a hidden cursor."""
        if self.active:
            return
        try:
            self._saved_tty_state = capture_tty_state(self.stdin_fd)
        except TerminalUnavailable as exc:
            logger.warning("terminal attributes unavailable, running degraded: %s", exc)
            self._saved_tty_state = None
            self.degraded = True

        self.active = True
        self._install_signal_handlers()

        if self._saved_tty_state is not None:
            try:
                # cbreak clears ECHO and ICANON but keeps ISIG, so Ctrl-C still signals.
                tty.setcbreak(self.stdin_fd, termios.TCSANOW)
            except termios.error:
                logger.warning("could not switch terminal to cbreak mode", exc_info=True)
                self.degraded = True

        if self.managed_alt_screen:
            self._write(CURSOR_HOME + HIDE_CURSOR)
        else:
            self._write(ENTER_ALT_SCREEN + CLEAR_SCREEN + HIDE_CURSOR)
        logger.debug("terminal session entered (degraded=%s)", self.degraded)

    def exit(self) -> None:
        """Restore terminal attributes, cursor, and main screen exactly once.

        A handled signal that arrives while restoring is deferred until every
        step has run, then re-raised as ``SessionInterrupted``.
        """
        if not self.active:
            return
        self._restoring = True
        self.active = False
        try:
            self._restore_terminal()
        finally:
            self._restore_signal_handlers()
            self._restoring = False
        logger.debug("terminal session restored")

        deferred, self._deferred_signal = self._deferred_signal, None
        if deferred is not None:
            raise SessionInterrupted(deferred)

    def _restore_terminal(self) -> None:
        restored = False
        if self._saved_tty_state is not None:
            try:
                termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)
                restored = True
            except termios.error:
                logger.warning("could not restore saved terminal attributes", exc_info=True)
        if not restored:
            reset_terminal_sane(self.stdin_fd)

        if self.managed_alt_screen:
            self._write(SHOW_CURSOR)
        else:
            self._write(SHOW_CURSOR + LEAVE_ALT_SCREEN)

    def _install_signal_handlers(self) -> None:
        for signum in HANDLED_SIGNALS:
            try:
                self._previous_handlers[signum] = signal.signal(signum, self._handle_signal)
            except ValueError:
                # Only the main thread may install handlers.
                logger.debug("signal handlers not installed off the main thread")
                return

    def _restore_signal_handlers(self) -> None:
        for signum, handler in self._previous_handlers.items():
            try:
                signal.signal(signum, handler)
            except (ValueError, TypeError):
                logger.debug("could not restore handler for signal %s", signum)
        self._previous_handlers.clear()

    def _handle_signal(self, signum: int, _frame: object) -> None:
        logger.info("menu interrupted by signal %s", signum)
        if self._restoring:
            self._deferred_signal = signum
            return
        self.exit()
        raise SessionInterrupted(signum)

    @contextlib.contextmanager
    def session(self):
        try:
            self.enter()
            yield self
        finally:
            self.exit()
