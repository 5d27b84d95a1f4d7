"""Runtime composition layer for duopane.

Builds initial state, wires listing/search/rendering into loop callbacks, and
starts the loop. This is the one place where every collaborator meets.
"""

from __future__ import annotations

import logging
import sys
from functools import partial
from pathlib import Path

from ..input import handle_key
from ..listing import list_directory_files
from ..render import render_frame
from ..search import SearchDispatcher
from ..state import AppState
from ..ui_theme import resolve_theme
from .effects import EffectRunner, perform_effects
from .loop import RuntimeLoopCallbacks, RuntimeLoopTiming, run_main_loop
from .terminal import TerminalController

logger = logging.getLogger(__name__)


def run_browser(
    home_path: str,
    search_root: Path,
    *,
    search_depth: int,
    poll_timeout_ms: int,
    theme_name: str | None = None,
    no_color: bool = False,
    show_right_listing: bool = True,
) -> AppState:
    """Run the interactive two-pane browser until the user quits.

    Raises ``TerminalSetupError`` before any drawing when the terminal cannot
    enter raw alternate-screen mode. Returns the final state.
    """
    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    terminal = TerminalController(stdin_fd, stdout_fd)

    state = AppState.initial(home_path)
    theme = resolve_theme(theme_name, no_color=no_color)
    logger.info(
        "starting: home=%r search_root=%s depth=%d theme=%s",
        home_path,
        search_root,
        search_depth,
        theme.name,
    )

    with SearchDispatcher(search_root, max_depth=search_depth) as dispatcher:
        runner = EffectRunner(
            list_directory=partial(list_directory_files, base_root=search_root),
            searches=dispatcher,
        )
        callbacks = RuntimeLoopCallbacks(
            handle_key=handle_key,
            perform_effects=partial(perform_effects, runner=runner),
            render=partial(render_frame, theme=theme, show_right_listing=show_right_listing),
        )
        run_main_loop(
            state,
            terminal,
            stdin_fd,
            RuntimeLoopTiming(poll_timeout_ms=poll_timeout_ms),
            callbacks,
        )
    return state


__all__ = ["run_browser"]
