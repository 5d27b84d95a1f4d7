"""Execution of side effects requested by key handling.

Listings run synchronously. Searches run on the dispatcher's worker pool and
the reply is awaited before the loop polls the next key, then merged into the
edit session. Merging never checks request identity, so whichever reply is
merged last wins.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from concurrent.futures import Future
from dataclasses import dataclass
from typing import Protocol

from ..search import SearchReply
from ..state import AppState, KeyOutcome, ListRequest, SearchRequest, Side

logger = logging.getLogger(__name__)


class SearchSubmitter(Protocol):
    def submit(self, query: str) -> Future[SearchReply]: ...


@dataclass(frozen=True)
class EffectRunner:
    """Collaborators that carry out listing and search requests."""

    list_directory: Callable[[str], list[str]]
    searches: SearchSubmitter


def apply_listing(state: AppState, side: Side, entries: list[str]) -> None:
    pane = state.pane(side)
    pane.entries = list(entries)
    pane.selected = None


def apply_search_reply(state: AppState, reply: SearchReply) -> bool:
    """Merge ``reply`` into the active edit session.

    Failed replies leave existing suggestions untouched. Returns whether the
    suggestions were replaced.
    """
    session = state.edit
    if session is None:
        logger.debug("dropping search reply #%d for %r: not editing", reply.request_id, reply.query)
        return False
    if reply.error is not None:
        logger.debug("search reply #%d kept previous suggestions: %s", reply.request_id, reply.error)
        return False
    session.suggestions = list(reply.paths or [])
    state.last_search_request_id = reply.request_id
    return True


def run_search(state: AppState, request: SearchRequest, runner: EffectRunner) -> SearchReply:
    state.search_requests_issued += 1
    future = runner.searches.submit(request.query)
    reply = future.result()
    apply_search_reply(state, reply)
    return reply


def run_listing(state: AppState, request: ListRequest, runner: EffectRunner) -> None:
    entries = runner.list_directory(request.path)
    logger.debug("listed %d files in %r for %s pane", len(entries), request.path, request.side.value)
    apply_listing(state, request.side, entries)


def perform_effects(state: AppState, outcome: KeyOutcome, runner: EffectRunner) -> None:
    """Carry out every effect in ``outcome`` in order."""
    for effect in outcome.effects:
        if isinstance(effect, SearchRequest):
            run_search(state, effect, runner)
        elif isinstance(effect, ListRequest):
            run_listing(state, effect, runner)


__all__ = [
    "SearchSubmitter",
    "EffectRunner",
    "apply_listing",
    "apply_search_reply",
    "run_search",
    "run_listing",
    "perform_effects",
]
