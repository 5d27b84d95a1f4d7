"""Fuzzy scoring and ranking of candidate labels against a query."""

from __future__ import annotations

import heapq

DEFAULT_RANK_LIMIT = 200


def fuzzy_score(query: str, candidate: str) -> int | None:
    """Score ``candidate`` as an in-order subsequence match of ``query``.

    Returns ``None`` when some query character cannot be matched. Consecutive
    runs and matches right after a path separator or word break score higher;
    gaps and long candidates cost points.
    """
    if not query:
        return 0
    query_folded = query.casefold()
    candidate_folded = candidate.casefold()

    score = 0
    prev_idx = -1
    run = 0
    for needle in query_folded:
        idx = candidate_folded.find(needle, prev_idx + 1)
        if idx < 0:
            return None
        if idx == prev_idx + 1:
            run += 1
            score += 20 + min(16, run * 4)
        else:
            gap = idx - prev_idx - 1
            run = 0
            score -= min(40, gap * 2)
        if idx == 0 or candidate_folded[idx - 1] in "/_- .":
            score += 35
        prev_idx = idx

    score -= len(candidate_folded) // 5
    return score


def rank_labels(query: str, labels: list[str], limit: int = DEFAULT_RANK_LIMIT) -> list[str]:
    """Return matching ``labels`` best-first, ties broken by label text."""
    scored: list[tuple[int, str]] = []
    for label in labels:
        score = fuzzy_score(query, label)
        if score is None:
            continue
        scored.append((score, label))
    best = heapq.nsmallest(max(1, limit), scored, key=lambda item: (-item[0], item[1]))
    return [label for _score, label in best]


__all__ = ["DEFAULT_RANK_LIMIT", "fuzzy_score", "rank_labels"]
