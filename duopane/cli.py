"""Command-line front door for duopane.

Parses CLI options on top of the JSON config defaults, sets up optional file
logging, and dispatches into the interactive browser runtime.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .runtime import run_browser
from .runtime.config import CONFIG_PATH, load_app_config
from .runtime.terminal import TerminalSetupError
from .ui_theme import available_theme_names

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def configure_logging(log_file: Path | None) -> None:
    """Attach a DEBUG file handler to the package logger when ``log_file`` is set."""
    if log_file is None:
        return
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger = logging.getLogger("duopane")
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Browse two directories side by side with a fuzzy directory finder."
    )
    parser.add_argument("path", nargs="?", default=None, help="Initial path shown in both panes.")
    parser.add_argument(
        "--search-root",
        default=None,
        help="Directory relative search queries resolve against (default: current directory).",
    )
    parser.add_argument(
        "--depth",
        type=_positive_int,
        default=None,
        help="Directory search depth below the typed path (default: 3).",
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--config", default=None, help=f"Config file to read (default: {CONFIG_PATH}).")
    parser.add_argument("--log-file", default=None, help="Write debug logs to this file.")
    return parser


def main() -> None:
    """Parse CLI arguments and launch the browser.

    Command-line values win over config-file values, which win over built-in
    defaults. Exits with a message when stdio is not an interactive terminal.
    """
    args = build_parser().parse_args()

    config = load_app_config(Path(args.config) if args.config is not None else None)
    configure_logging(Path(args.log_file) if args.log_file is not None else None)

    search_root = Path(args.search_root) if args.search_root is not None else Path.cwd()
    if not search_root.is_dir():
        raise SystemExit(f"Search root is not a directory: {search_root}")

    if not (sys.stdin.isatty() and sys.stdout.isatty()):
        raise SystemExit("duopane needs an interactive terminal.")

    try:
        run_browser(
            args.path or config.home_path,
            search_root,
            search_depth=args.depth if args.depth is not None else config.search_depth,
            poll_timeout_ms=config.poll_timeout_ms,
            theme_name=args.theme if args.theme is not None else config.theme,
            no_color=args.no_color,
            show_right_listing=config.show_right_listing,
        )
    except TerminalSetupError as exc:
        raise SystemExit(f"Cannot start terminal UI: {exc}") from exc


if __name__ == "__main__":
    main()
