"""Search package exports.

Combines fuzzy scoring, the directory search service and its thread-pool
dispatcher in one import surface.
"""

from __future__ import annotations

from .directories import (
    DEFAULT_SEARCH_DEPTH,
    REASON_EXIT_STATUS,
    REASON_INVOCATION,
    DirectorySearchError,
    collect_directories,
    search_directories,
)
from .dispatch import SearchDispatcher, SearchReply
from .fuzzy import fuzzy_score, rank_labels

__all__ = [
    "DEFAULT_SEARCH_DEPTH",
    "REASON_EXIT_STATUS",
    "REASON_INVOCATION",
    "DirectorySearchError",
    "SearchDispatcher",
    "SearchReply",
    "collect_directories",
    "fuzzy_score",
    "rank_labels",
    "search_directories",
]
