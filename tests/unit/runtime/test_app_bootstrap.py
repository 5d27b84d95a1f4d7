"""Tests for runtime composition in ``run_browser``."""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from duopane.runtime import app
from duopane.runtime.terminal import TerminalSetupError
from duopane.state import KeyOutcome, ListRequest, Side
from duopane.ui_theme import OCEAN_THEME, PLAIN_THEME


class RunBrowserTests(unittest.TestCase):
    def _run(self, search_root: Path = Path("/work"), **kwargs):
        captured = {}

        def fake_loop(state, terminal, stdin_fd, timing, callbacks) -> None:
            captured.update(state=state, terminal=terminal, stdin_fd=stdin_fd, timing=timing, callbacks=callbacks)

        with mock.patch("duopane.runtime.app.sys") as sys_mock, mock.patch(
            "duopane.runtime.app.TerminalController"
        ) as controller_cls, mock.patch("duopane.runtime.app.run_main_loop", side_effect=fake_loop):
            sys_mock.stdin.fileno.return_value = 10
            sys_mock.stdout.fileno.return_value = 11
            state = app.run_browser(
                "/home/me",
                search_root,
                search_depth=kwargs.pop("search_depth", 3),
                poll_timeout_ms=kwargs.pop("poll_timeout_ms", 250),
                **kwargs,
            )
        return state, controller_cls, captured

    def test_initial_state_and_loop_wiring(self) -> None:
        state, controller_cls, captured = self._run(poll_timeout_ms=90)

        controller_cls.assert_called_once_with(10, 11)
        self.assertIs(captured["state"], state)
        self.assertIs(captured["terminal"], controller_cls.return_value)
        self.assertEqual(captured["stdin_fd"], 10)
        self.assertEqual(captured["timing"].poll_timeout_ms, 90)
        self.assertEqual(state.left.path, "/home/me")
        self.assertEqual(state.right.path, "/home/me")
        self.assertIsNone(state.left.entries)
        self.assertIsNone(state.edit)

    def test_render_callback_carries_theme_and_listing_flag(self) -> None:
        _state, _controller_cls, captured = self._run(theme_name="ocean", show_right_listing=False)
        render = captured["callbacks"].render
        self.assertIs(render.keywords["theme"], OCEAN_THEME)
        self.assertFalse(render.keywords["show_right_listing"])

        _state, _controller_cls, captured = self._run(theme_name="ocean", no_color=True)
        self.assertIs(captured["callbacks"].render.keywords["theme"], PLAIN_THEME)

    def test_effects_callback_lists_through_directory_lister(self) -> None:
        _state, _controller_cls, captured = self._run()
        state = captured["state"]
        runner = captured["callbacks"].perform_effects.keywords["runner"]
        self.assertIs(runner.list_directory.func, app.list_directory_files)
        self.assertEqual(runner.list_directory.keywords, {"base_root": Path("/work")})

        outcome = KeyOutcome(effects=(ListRequest(side=Side.LEFT, path="/nonexistent/duopane/path"),))
        captured["callbacks"].perform_effects(state, outcome)
        self.assertEqual(state.left.entries, [])

    def test_relative_commit_lists_against_search_root_not_cwd(self) -> None:
        with tempfile.TemporaryDirectory() as search_tmp, tempfile.TemporaryDirectory() as cwd_tmp:
            search_root = Path(search_tmp)
            (search_root / "docs").mkdir()
            (search_root / "docs" / "readme.txt").write_text("hi\n", encoding="utf-8")
            previous_cwd = os.getcwd()
            os.chdir(cwd_tmp)
            try:
                _state, _controller_cls, captured = self._run(search_root=search_root)
                state = captured["state"]
                outcome = KeyOutcome(effects=(ListRequest(side=Side.LEFT, path="docs"),))
                captured["callbacks"].perform_effects(state, outcome)
            finally:
                os.chdir(previous_cwd)

            self.assertEqual(state.left.entries, [str(search_root / "docs" / "readme.txt")])

    def test_terminal_setup_failure_propagates_before_loop(self) -> None:
        with mock.patch("duopane.runtime.app.sys") as sys_mock, mock.patch(
            "duopane.runtime.app.TerminalController",
            side_effect=TerminalSetupError("stdin is not a terminal"),
        ), mock.patch("duopane.runtime.app.run_main_loop") as loop_mock:
            sys_mock.stdin.fileno.return_value = 0
            sys_mock.stdout.fileno.return_value = 1
            with self.assertRaises(TerminalSetupError):
                app.run_browser("~/", Path("/"), search_depth=3, poll_timeout_ms=250)

        loop_mock.assert_not_called()

class RuntimePackageSurfaceTests(unittest.TestCase):
    def test_package_exports_are_the_implementations(self) -> None:
        from duopane import runtime
        from duopane.runtime import loop

        self.assertIs(runtime.run_browser, app.run_browser)
        self.assertIs(runtime.run_main_loop, loop.run_main_loop)
        self.assertIs(runtime.RuntimeLoopCallbacks, loop.RuntimeLoopCallbacks)


if __name__ == "__main__":
    unittest.main()
