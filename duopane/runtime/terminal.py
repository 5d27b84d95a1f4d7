"""Terminal control helpers for the TUI session.

Owns raw-mode lifecycle and alternate-screen switching. Entering TUI mode is
all-or-nothing; leaving it is best-effort so restoration always runs.
"""

from __future__ import annotations

import contextlib
import logging
import os
import termios
import tty

logger = logging.getLogger(__name__)

ENTER_TUI_SEQUENCE = b"\x1b[?1049h\x1b[?25l"
LEAVE_ALT_SCREEN_SEQUENCE = b"\x1b[?1049l"
SHOW_CURSOR_SEQUENCE = b"\x1b[?25h"


class TerminalSetupError(RuntimeError):
    """The terminal could not be put into raw alternate-screen mode."""


class TerminalController:
    """Manage terminal mode transitions for one interactive session."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Capture tty state; raises ``TerminalSetupError`` when stdin is not a tty."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        try:
            self._saved_tty_state = termios.tcgetattr(stdin_fd)
        except termios.error as exc:
            raise TerminalSetupError(f"stdin is not a terminal: {exc}") from exc

    def enable_tui_mode(self) -> None:
        """Enter raw mode and the alternate screen with the cursor hidden."""
        try:
            tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        except termios.error as exc:
            raise TerminalSetupError(f"cannot enable raw mode: {exc}") from exc
        try:
            os.write(self.stdout_fd, ENTER_TUI_SEQUENCE)
        except OSError as exc:
            termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)
            raise TerminalSetupError(f"cannot enter alternate screen: {exc}") from exc

    def disable_tui_mode(self) -> None:
        """Show the cursor, leave the alternate screen and restore tty attributes."""
        for sequence in (SHOW_CURSOR_SEQUENCE, LEAVE_ALT_SCREEN_SEQUENCE):
            try:
                os.write(self.stdout_fd, sequence)
            except OSError as exc:
                logger.debug("terminal restore write %r failed: %s", sequence, exc)
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)

    @contextlib.contextmanager
    def raw_mode(self):
        """Context manager that brackets code with TUI enter/exit calls."""
        self.enable_tui_mode()
        try:
            yield
        finally:
            self.disable_tui_mode()


__all__ = [
    "ENTER_TUI_SEQUENCE",
    "LEAVE_ALT_SCREEN_SEQUENCE",
    "SHOW_CURSOR_SEQUENCE",
    "TerminalSetupError",
    "TerminalController",
]
