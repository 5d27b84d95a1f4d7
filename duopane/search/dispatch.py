"""Out-of-line execution of directory searches.

Every keystroke submits one search to a thread pool. Requests are numbered so
callers can tell which reply they are looking at; nothing is cancelled or
de-duplicated, and replies carry no priority over each other.
"""

from __future__ import annotations

import itertools
import threading
from collections.abc import Callable
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path

from .directories import DEFAULT_SEARCH_DEPTH, DirectorySearchError, search_directories

SearchFunction = Callable[[str, Path, int], list[str]]


@dataclass(frozen=True)
class SearchReply:
    """Outcome of one search request; exactly one of ``paths``/``error`` is set."""

    request_id: int
    query: str
    paths: list[str] | None = None
    error: DirectorySearchError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class SearchDispatcher:
    """Run searches on worker threads and hand back futures of ``SearchReply``."""

    def __init__(
        self,
        base_root: Path,
        max_depth: int = DEFAULT_SEARCH_DEPTH,
        search: SearchFunction = search_directories,
        max_workers: int = 4,
    ) -> None:
        self.base_root = base_root
        self.max_depth = max_depth
        self._search = search
        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="duopane-search")
        self._ids = itertools.count(1)
        self._ids_lock = threading.Lock()

    def _run(self, request_id: int, query: str) -> SearchReply:
        try:
            paths = self._search(query, self.base_root, self.max_depth)
        except DirectorySearchError as exc:
            return SearchReply(request_id=request_id, query=query, error=exc)
        return SearchReply(request_id=request_id, query=query, paths=list(paths))

    def submit(self, query: str) -> Future[SearchReply]:
        """Start a search for ``query`` and return its pending reply."""
        with self._ids_lock:
            request_id = next(self._ids)
        return self._executor.submit(self._run, request_id, query)

    def shutdown(self) -> None:
        self._executor.shutdown(wait=False, cancel_futures=True)

    def __enter__(self) -> SearchDispatcher:
        return self

    def __exit__(self, *_exc_info) -> None:
        self.shutdown()


__all__ = ["SearchFunction", "SearchReply", "SearchDispatcher"]
