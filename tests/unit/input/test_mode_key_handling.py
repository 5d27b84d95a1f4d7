"""Browse/edit mode transition tests.

Covers mode switches, path commit/cancel, and suggestion-cursor movement,
including the unclamped ``Down`` behavior that readers must tolerate.
"""

from __future__ import annotations

import copy
import unittest

from duopane.input import handle_key
from duopane.state import AppState, EditSession, KeyOutcome, ListRequest, SearchRequest, Side


def _browse_state() -> AppState:
    state = AppState.initial("/srv")
    state.left.entries = ["/srv/a.txt"]
    state.left.selected = 0
    state.right.entries = []
    return state


def _edit_state(target: Side = Side.LEFT, **session_fields) -> AppState:
    state = _browse_state()
    state.edit = EditSession(target=target, **session_fields)
    return state


class BrowseModeKeyTests(unittest.TestCase):
    def test_q_requests_quit_without_touching_state(self) -> None:
        state = _browse_state()
        before = copy.deepcopy(state)

        outcome = handle_key(state, "q")

        self.assertTrue(outcome.quit)
        self.assertEqual(outcome.effects, ())
        self.assertEqual(state, before)

    def test_h_and_l_open_empty_edit_session_for_each_pane(self) -> None:
        for key, side in (("H", Side.LEFT), ("L", Side.RIGHT)):
            with self.subTest(key=key):
                state = _browse_state()
                outcome = handle_key(state, key)

                self.assertEqual(outcome, KeyOutcome())
                self.assertEqual(state.edit, EditSession(target=side))
                self.assertEqual(state.edit.input, "")
                self.assertIsNone(state.edit.suggestions)

    def test_other_browse_keys_are_no_ops(self) -> None:
        for key in ("h", "l", "Q", "x", "ESC", "ENTER", "UP", "DOWN", "TAB", "BACKSPACE", "CTRL_C", " ", "é"):
            with self.subTest(key=key):
                state = _browse_state()
                before = copy.deepcopy(state)

                outcome = handle_key(state, key)

                self.assertFalse(outcome.quit)
                self.assertEqual(outcome.effects, ())
                self.assertEqual(state, before)


class EditModeKeyTests(unittest.TestCase):
    def test_escape_discards_session_and_keeps_pane(self) -> None:
        state = _browse_state()
        before_left = copy.deepcopy(state.left)

        handle_key(state, "H")
        handle_key(state, "t")
        outcome = handle_key(state, "ESC")

        self.assertEqual(outcome.effects, ())
        self.assertIsNone(state.edit)
        self.assertEqual(state.left, before_left)

    def test_printable_keys_append_and_request_search(self) -> None:
        state = _edit_state()

        first = handle_key(state, "a")
        second = handle_key(state, "q")

        self.assertEqual(state.edit.input, "aq")
        self.assertEqual(first.effects, (SearchRequest("a"),))
        self.assertEqual(second.effects, (SearchRequest("aq"),))
        self.assertFalse(second.quit)

    def test_backspace_trims_and_requests_search_even_when_empty(self) -> None:
        state = _edit_state(input="ab")

        outcome = handle_key(state, "BACKSPACE")
        self.assertEqual(state.edit.input, "a")
        self.assertEqual(outcome.effects, (SearchRequest("a"),))

        handle_key(state, "BACKSPACE")
        outcome = handle_key(state, "BACKSPACE")
        self.assertEqual(state.edit.input, "")
        self.assertEqual(outcome.effects, (SearchRequest(""),))

    def test_enter_commits_path_and_requests_listing(self) -> None:
        state = _edit_state(target=Side.RIGHT, input="/does/not/matter", suggestions=["/x"])

        outcome = handle_key(state, "ENTER")

        self.assertIsNone(state.edit)
        self.assertEqual(state.right.path, "/does/not/matter")
        self.assertEqual(outcome.effects, (ListRequest(side=Side.RIGHT, path="/does/not/matter"),))
        self.assertEqual(state.left.path, "/srv")

    def test_enter_clears_buffer_of_the_committed_session(self) -> None:
        state = _edit_state(input="")
        session = state.edit

        outcome = handle_key(state, "ENTER")

        self.assertEqual(session.input, "")
        self.assertIsNone(state.edit)
        self.assertEqual(state.left.path, "")
        self.assertEqual(outcome.effects, (ListRequest(side=Side.LEFT, path=""),))

    def test_tab_and_unknown_tokens_are_no_ops(self) -> None:
        for key in ("TAB", "LEFT", "RIGHT", "UNKNOWN", "CTRL_C"):
            with self.subTest(key=key):
                state = _edit_state(input="ab", suggestions=["ab"], suggestion_cursor=0)
                before = copy.deepcopy(state)

                outcome = handle_key(state, key)

                self.assertEqual(outcome, KeyOutcome())
                self.assertEqual(state, before)


class SuggestionCursorTests(unittest.TestCase):
    def test_down_n_times_from_none_lands_on_n_minus_one(self) -> None:
        for presses in (1, 2, 5):
            with self.subTest(presses=presses):
                state = _edit_state()
                for _ in range(presses):
                    handle_key(state, "DOWN")
                self.assertEqual(state.edit.suggestion_cursor, presses - 1)

    def test_up_from_zero_clears_and_up_from_none_stays_none(self) -> None:
        state = _edit_state(suggestion_cursor=0)

        handle_key(state, "UP")
        self.assertIsNone(state.edit.suggestion_cursor)

        handle_key(state, "UP")
        self.assertIsNone(state.edit.suggestion_cursor)

    def test_up_decrements_positive_cursor(self) -> None:
        state = _edit_state(suggestion_cursor=3)
        handle_key(state, "UP")
        self.assertEqual(state.edit.suggestion_cursor, 2)

    def test_down_runs_past_end_and_highlight_reports_none(self) -> None:
        state = _edit_state(suggestions=["a", "b"])

        for _ in range(4):
            handle_key(state, "DOWN")

        self.assertEqual(state.edit.suggestion_cursor, 3)
        self.assertIsNone(state.edit.highlighted_index())
        self.assertIsNone(state.edit.highlighted_suggestion())

    def test_highlight_follows_cursor_when_in_range(self) -> None:
        state = _edit_state(suggestions=["a", "b"])
        handle_key(state, "DOWN")
        handle_key(state, "DOWN")

        self.assertEqual(state.edit.highlighted_index(), 1)
        self.assertEqual(state.edit.highlighted_suggestion(), "b")

    def test_shrinking_suggestions_leaves_cursor_but_drops_highlight(self) -> None:
        session = EditSession(target=Side.LEFT, suggestions=["a", "b", "c"], suggestion_cursor=2)
        session.suggestions = ["a"]

        self.assertEqual(session.suggestion_cursor, 2)
        self.assertIsNone(session.highlighted_index())


if __name__ == "__main__":
    unittest.main()
