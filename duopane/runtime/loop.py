"""Main interactive event loop for the terminal UI.

Each tick polls for one key with a bounded timeout, feeds it to the state
machine, performs the requested effects, then redraws. The redraw happens on
every tick, idle or not, so the screen always shows the latest state.
"""

from __future__ import annotations

import logging
import shutil
from collections.abc import Callable
from dataclasses import dataclass

from ..input import read_key
from ..state import AppState, KeyOutcome
from .terminal import TerminalController

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuntimeLoopTiming:
    """Timing constants controlling interactive loop behavior."""

    poll_timeout_ms: int


@dataclass(frozen=True)
class RuntimeLoopCallbacks:
    """Injected operations used by ``run_main_loop``."""

    handle_key: Callable[[AppState, str], KeyOutcome]
    perform_effects: Callable[[AppState, KeyOutcome], None]
    render: Callable[[AppState, int, int], None]


def normalize_enter_key(key: str, skip_next_lf: bool) -> tuple[str, bool]:
    """Fold CR/LF tokens into ``ENTER``; a LF right after CR is swallowed.

    Returns the key to dispatch (``""`` when swallowed) and the new
    ``skip_next_lf`` flag.
    """
    if key == "ENTER_LF" and skip_next_lf:
        return "", False
    if key == "ENTER_CR":
        return "ENTER", True
    if key == "ENTER_LF":
        return "ENTER", False
    return key, False


def run_main_loop(
    state: AppState,
    terminal: TerminalController,
    stdin_fd: int,
    timing: RuntimeLoopTiming,
    callbacks: RuntimeLoopCallbacks,
) -> None:
    """Run the interactive loop until a key handler asks to quit."""
    skip_next_lf = False
    with terminal.raw_mode():
        logger.info("interactive loop started")
        while True:
            try:
                key = read_key(stdin_fd, timeout_ms=timing.poll_timeout_ms)
            except KeyboardInterrupt:
                key = ""
            key, skip_next_lf = normalize_enter_key(key, skip_next_lf)

            if key:
                outcome = callbacks.handle_key(state, key)
                if outcome.quit:
                    break
                callbacks.perform_effects(state, outcome)

            term = shutil.get_terminal_size((80, 24))
            callbacks.render(state, term.columns, term.lines)
    logger.info("interactive loop stopped")


__all__ = [
    "RuntimeLoopTiming",
    "RuntimeLoopCallbacks",
    "normalize_enter_key",
    "run_main_loop",
]
