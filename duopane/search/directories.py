"""Fuzzy directory search rooted at the typed path.

Candidates are directories under the query path (bounded depth), collected
with ``find`` when it is installed and ``os.walk`` otherwise, then ranked with
``fuzzy_score`` against the query text.
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
from pathlib import Path

from .fuzzy import DEFAULT_RANK_LIMIT, rank_labels

logger = logging.getLogger(__name__)

DEFAULT_SEARCH_DEPTH = 3
REASON_INVOCATION = "invocation"
REASON_EXIT_STATUS = "exit_status"


class DirectorySearchError(Exception):
    """A directory search produced no usable result.

    ``reason`` is ``"invocation"`` when the search could not be started and
    ``"exit_status"`` when it ran but did not succeed (including no match).
    """

    def __init__(self, reason: str, query: str, detail: str = "") -> None:
        self.reason = reason
        self.query = query
        self.detail = detail
        message = f"directory search for {query!r} failed ({reason})"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


def _root_argument(query: str) -> str:
    """Map the query onto the path handed to the walker."""
    root = os.path.expanduser(query)
    # ``find`` would parse a leading dash as an expression.
    if root.startswith("-"):
        root = os.path.join(".", root)
    return root


def _collect_directories_find(root: str, base_root: Path, max_depth: int) -> list[str] | None:
    """Return directories printed by ``find``, or ``None`` when it is not installed."""
    if shutil.which("find") is None:
        return None

    cmd = ["find", root, "-maxdepth", str(max_depth), "-type", "d", "-print"]
    try:
        proc = subprocess.run(
            cmd,
            cwd=base_root,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            errors="replace",
            check=False,
        )
    except OSError as exc:
        raise DirectorySearchError(REASON_INVOCATION, root, str(exc)) from exc

    labels = [line for line in proc.stdout.splitlines() if line]
    # Unreadable subdirectories make find exit non-zero while still printing the rest.
    if proc.returncode != 0 and not labels:
        detail = proc.stderr.strip() or f"find exited with status {proc.returncode}"
        raise DirectorySearchError(REASON_EXIT_STATUS, root, detail)
    return labels


def _collect_directories_walk(root: str, base_root: Path, max_depth: int) -> list[str]:
    start = Path(root) if os.path.isabs(root) else base_root / root
    if not start.is_dir():
        raise DirectorySearchError(REASON_EXIT_STATUS, root, "not a directory")

    labels: list[str] = [root]
    for dirpath, dirnames, _filenames in os.walk(start):
        relative = Path(dirpath).relative_to(start)
        depth = 0 if relative == Path(".") else len(relative.parts)
        if depth >= max_depth:
            dirnames[:] = []
            continue
        # Match ``find -type d``, which does not count symlinks to directories.
        dirnames[:] = [name for name in dirnames if not os.path.islink(os.path.join(dirpath, name))]
        for name in dirnames:
            labels.append(os.path.join(root, *relative.parts, name))
    return labels


def collect_directories(root: str, base_root: Path, max_depth: int = DEFAULT_SEARCH_DEPTH) -> list[str]:
    """Return directory labels under ``root`` down to ``max_depth`` levels."""
    labels = _collect_directories_find(root, base_root, max_depth)
    if labels is None:
        labels = _collect_directories_walk(root, base_root, max_depth)
    return labels


def search_directories(
    query: str,
    base_root: Path,
    max_depth: int = DEFAULT_SEARCH_DEPTH,
    limit: int = DEFAULT_RANK_LIMIT,
) -> list[str]:
    """Return directories under ``query`` ranked by fuzzy match against ``query``.

    Relative queries resolve against ``base_root``. Raises
    ``DirectorySearchError`` when the root cannot be walked or nothing matches.
    """
    if not query:
        raise DirectorySearchError(REASON_EXIT_STATUS, query, "empty query")

    root = _root_argument(query)
    labels = collect_directories(root, base_root, max_depth)
    ranked = rank_labels(os.path.expanduser(query), labels, limit=limit)
    if not ranked:
        raise DirectorySearchError(REASON_EXIT_STATUS, query, "no matching directory")
    logger.debug("search %r: %d candidates, %d ranked", query, len(labels), len(ranked))
    return ranked


__all__ = [
    "DEFAULT_SEARCH_DEPTH",
    "REASON_INVOCATION",
    "REASON_EXIT_STATUS",
    "DirectorySearchError",
    "collect_directories",
    "search_directories",
]
