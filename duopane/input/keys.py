"""Modal key dispatch for browse and path-edit modes.

Handlers mutate ``AppState`` in place and return a ``KeyOutcome`` naming the
side effects the runtime loop must perform. Nothing here blocks or does I/O.
"""

from __future__ import annotations

from ..state import AppState, EditSession, KeyOutcome, ListRequest, SearchRequest, Side

_NO_OP = KeyOutcome()

EDIT_TARGET_KEYS: dict[str, Side] = {
    "H": Side.LEFT,
    "L": Side.RIGHT,
}


def is_printable_key(key: str) -> bool:
    """Return whether ``key`` is a single printable character token."""
    return len(key) == 1 and key.isprintable()


def move_suggestion_cursor_up(session: EditSession) -> None:
    cursor = session.suggestion_cursor
    if cursor is None:
        return
    session.suggestion_cursor = cursor - 1 if cursor > 0 else None


def move_suggestion_cursor_down(session: EditSession) -> None:
    # No upper clamp here; readers use ``EditSession.highlighted_index``.
    cursor = session.suggestion_cursor
    session.suggestion_cursor = 0 if cursor is None else cursor + 1


def handle_browse_key(state: AppState, key: str) -> KeyOutcome:
    """Handle one key while no path edit is active."""
    if key == "q":
        return KeyOutcome(quit=True)
    target = EDIT_TARGET_KEYS.get(key)
    if target is not None:
        state.edit = EditSession(target=target)
    return _NO_OP


def commit_edit(state: AppState, session: EditSession) -> KeyOutcome:
    """Confirm the typed path for the edited pane and leave edit mode.

    The typed text is stored verbatim, valid or not; listing it is requested
    from the loop, which writes the result back into ``entries``.
    """
    path = session.input
    state.pane(session.target).path = path
    session.input = ""
    state.edit = None
    return KeyOutcome(effects=(ListRequest(side=session.target, path=path),))


def cancel_edit(state: AppState, session: EditSession) -> KeyOutcome:
    session.input = ""
    state.edit = None
    return _NO_OP


def handle_edit_key(state: AppState, session: EditSession, key: str) -> KeyOutcome:
    """Handle one key while editing ``session.target``'s path."""
    if key == "ESC":
        return cancel_edit(state, session)
    if key == "ENTER":
        return commit_edit(state, session)
    if key == "UP":
        move_suggestion_cursor_up(session)
        return _NO_OP
    if key == "DOWN":
        move_suggestion_cursor_down(session)
        return _NO_OP
    if key == "TAB":
        # TODO: accept the highlighted suggestion into the input buffer.
        return _NO_OP
    if key == "BACKSPACE":
        session.input = session.input[:-1]
        return KeyOutcome(effects=(SearchRequest(session.input),))
    if is_printable_key(key):
        session.input += key
        return KeyOutcome(effects=(SearchRequest(session.input),))
    return _NO_OP


def handle_key(state: AppState, key: str) -> KeyOutcome:
    """Dispatch ``key`` on the current mode."""
    session = state.edit
    if session is None:
        return handle_browse_key(state, key)
    return handle_edit_key(state, session, key)


__all__ = [
    "EDIT_TARGET_KEYS",
    "is_printable_key",
    "move_suggestion_cursor_up",
    "move_suggestion_cursor_down",
    "handle_browse_key",
    "handle_edit_key",
    "commit_edit",
    "cancel_edit",
    "handle_key",
]
