"""Thread-pool search dispatcher tests."""

from __future__ import annotations

import threading
import unittest
from pathlib import Path

from duopane.search import DirectorySearchError, SearchDispatcher, SearchReply


class SearchDispatcherTests(unittest.TestCase):
    def test_successful_search_resolves_to_reply_with_paths(self) -> None:
        calls: list[tuple[str, Path, int]] = []

        def fake_search(query: str, base_root: Path, max_depth: int) -> list[str]:
            calls.append((query, base_root, max_depth))
            return [f"{query}/one", f"{query}/two"]

        with SearchDispatcher(Path("/base"), max_depth=2, search=fake_search) as dispatcher:
            reply = dispatcher.submit("src").result(timeout=5)

        self.assertEqual(calls, [("src", Path("/base"), 2)])
        self.assertTrue(reply.ok)
        self.assertEqual(reply, SearchReply(request_id=1, query="src", paths=["src/one", "src/two"]))

    def test_search_error_becomes_failed_reply(self) -> None:
        error = DirectorySearchError("exit_status", "nope", "no matching directory")

        def failing_search(query: str, base_root: Path, max_depth: int) -> list[str]:
            raise error

        with SearchDispatcher(Path("/"), search=failing_search) as dispatcher:
            reply = dispatcher.submit("nope").result(timeout=5)

        self.assertFalse(reply.ok)
        self.assertIs(reply.error, error)
        self.assertIsNone(reply.paths)

    def test_request_ids_increase_per_submission(self) -> None:
        with SearchDispatcher(Path("/"), search=lambda query, _root, _depth: [query]) as dispatcher:
            replies = [dispatcher.submit(query).result(timeout=5) for query in ("a", "ab", "abc")]

        self.assertEqual([reply.request_id for reply in replies], [1, 2, 3])
        self.assertEqual([reply.query for reply in replies], ["a", "ab", "abc"])

    def test_older_request_can_complete_after_newer_one(self) -> None:
        release_first = threading.Event()

        def gated_search(query: str, _root: Path, _depth: int) -> list[str]:
            if query == "a":
                release_first.wait(timeout=5)
            return [query]

        with SearchDispatcher(Path("/"), search=gated_search) as dispatcher:
            first = dispatcher.submit("a")
            second = dispatcher.submit("ab")
            second_reply = second.result(timeout=5)
            self.assertFalse(first.done())
            release_first.set()
            first_reply = first.result(timeout=5)

        self.assertEqual(second_reply.request_id, 2)
        self.assertEqual(first_reply.request_id, 1)


if __name__ == "__main__":
    unittest.main()
