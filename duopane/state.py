"""Mutable UI state for the two-pane browser.

One ``AppState`` is created at startup and mutated in place by key handling
and by the runtime loop when listing/search results come back.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

DEFAULT_HOME_PATH = "~/"


class Side(str, Enum):
    """Which pane a path edit targets."""

    LEFT = "left"
    RIGHT = "right"


@dataclass
class Pane:
    path: str
    entries: list[str] | None = None
    selected: int | None = None


@dataclass
class EditSession:
    """Path-edit session; exists only while the app is in edit mode."""

    target: Side
    input: str = ""
    suggestions: list[str] | None = None
    suggestion_cursor: int | None = None

    def highlighted_index(self) -> int | None:
        """Return the cursor when it points inside ``suggestions``, else ``None``.

        ``suggestion_cursor`` is never clamped on input, and suggestions can
        shrink after it was set, so readers must go through this helper.
        """
        cursor = self.suggestion_cursor
        if cursor is None or not self.suggestions:
            return None
        if 0 <= cursor < len(self.suggestions):
            return cursor
        return None

    def highlighted_suggestion(self) -> str | None:
        idx = self.highlighted_index()
        if idx is None or self.suggestions is None:
            return None
        return self.suggestions[idx]


@dataclass
class AppState:
    left: Pane
    right: Pane
    edit: EditSession | None = None
    last_search_request_id: int = 0
    search_requests_issued: int = 0

    @classmethod
    def initial(cls, home_path: str = DEFAULT_HOME_PATH) -> AppState:
        """Both panes at ``home_path`` with nothing listed yet."""
        return cls(left=Pane(path=home_path), right=Pane(path=home_path))

    @property
    def editing(self) -> bool:
        return self.edit is not None

    def pane(self, side: Side) -> Pane:
        return self.left if side is Side.LEFT else self.right


@dataclass(frozen=True)
class SearchRequest:
    """Side effect: run a directory search for ``query``."""

    query: str


@dataclass(frozen=True)
class ListRequest:
    """Side effect: list regular files of ``path`` into the ``side`` pane."""

    side: Side
    path: str


@dataclass(frozen=True)
class KeyOutcome:
    """Result of feeding one key to the state machine."""

    quit: bool = False
    effects: tuple[SearchRequest | ListRequest, ...] = field(default_factory=tuple)


__all__ = [
    "DEFAULT_HOME_PATH",
    "Side",
    "Pane",
    "EditSession",
    "AppState",
    "SearchRequest",
    "ListRequest",
    "KeyOutcome",
]
