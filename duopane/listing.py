"""Directory listing for pane contents.

Lists the regular files directly inside a directory. Failures never reach the
caller: an unopenable directory lists as empty and an unclassifiable child is
skipped.
"""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path

logger = logging.getLogger(__name__)


def _is_regular_file(entry: os.DirEntry) -> bool:
    """Classify ``entry`` without following symlinks."""
    try:
        mode = entry.stat(follow_symlinks=False).st_mode
    except OSError:
        return False
    return stat.S_ISREG(mode)


def list_directory_files(path: str, base_root: Path | None = None) -> list[str]:
    """Return paths of regular files directly inside ``path``.

    ``~`` is expanded before opening and relative paths resolve against
    ``base_root`` (the process cwd when ``None``), the same way directory
    search resolves them. Order follows directory iteration and is not sorted.
    Missing, unreadable or non-directory paths return ``[]``.
    """
    directory = os.path.expanduser(path)
    # An empty path stays unopenable rather than naming ``base_root`` itself.
    if directory and base_root is not None and not os.path.isabs(directory):
        directory = os.path.join(base_root, directory)
    try:
        entries = os.scandir(directory)
    except OSError as exc:
        logger.debug("cannot open %r for listing: %s", path, exc)
        return []

    files: list[str] = []
    with entries:
        try:
            for child in entries:
                if _is_regular_file(child):
                    files.append(child.path)
        except OSError as exc:
            # Keep what was read before iteration broke off.
            logger.debug("listing %r stopped early: %s", path, exc)
    return files


__all__ = ["list_directory_files"]
