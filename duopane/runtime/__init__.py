"""Runtime for the two-pane browser: terminal, config, effects and loop.

``run_browser`` is what the CLI starts; the loop contracts and config loader
are exported for composition code and tests.
"""

from __future__ import annotations

from .app import run_browser
from .config import AppConfig, load_app_config
from .effects import EffectRunner, perform_effects
from .loop import RuntimeLoopCallbacks, RuntimeLoopTiming, run_main_loop
from .terminal import TerminalController, TerminalSetupError

__all__ = [
    "AppConfig",
    "EffectRunner",
    "RuntimeLoopCallbacks",
    "RuntimeLoopTiming",
    "TerminalController",
    "TerminalSetupError",
    "load_app_config",
    "perform_effects",
    "run_browser",
    "run_main_loop",
]
