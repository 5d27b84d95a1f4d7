"""Read-only JSON config helpers.

Supplies startup defaults (home path, search depth, poll timeout, theme, right
listing). Malformed or missing config falls back to built-in defaults.
Nothing is ever written back.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from ..search import DEFAULT_SEARCH_DEPTH
from ..state import DEFAULT_HOME_PATH

APP_NAME = "duopane"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
DEFAULT_POLL_TIMEOUT_MS = 250


@dataclass(frozen=True)
class AppConfig:
    home_path: str = DEFAULT_HOME_PATH
    search_depth: int = DEFAULT_SEARCH_DEPTH
    poll_timeout_ms: int = DEFAULT_POLL_TIMEOUT_MS
    theme: str | None = None
    show_right_listing: bool = True


def load_config_data(path: Path | None = None) -> dict[str, object]:
    """Load the JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    config_path = CONFIG_PATH if path is None else path
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def _positive_int(value: object, default: int) -> int:
    # bool is an int subclass; reject it explicitly.
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        return default
    return value


def _nonempty_str(value: object) -> str | None:
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def load_app_config(path: Path | None = None) -> AppConfig:
    """Build ``AppConfig`` from the config file, keeping defaults for bad values."""
    data = load_config_data(path)
    defaults = AppConfig()
    show_right_listing = data.get("show_right_listing")
    return AppConfig(
        home_path=_nonempty_str(data.get("home_path")) or defaults.home_path,
        search_depth=_positive_int(data.get("search_depth"), defaults.search_depth),
        poll_timeout_ms=_positive_int(data.get("poll_timeout_ms"), defaults.poll_timeout_ms),
        theme=_nonempty_str(data.get("theme")),
        show_right_listing=(
            show_right_listing if isinstance(show_right_listing, bool) else defaults.show_right_listing
        ),
    )


__all__ = [
    "APP_NAME",
    "CONFIG_FILENAME",
    "CONFIG_PATH",
    "DEFAULT_POLL_TIMEOUT_MS",
    "AppConfig",
    "load_config_data",
    "load_app_config",
]
