"""
Tests for CLI entry points.

These tests focus on:
- exit codes (input errors -> 1, unreadable payload -> 2)
- table output for the count views, captured from the rich console
"""

import io
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from rich.console import Console

import scheduledata.cli as cli
from scheduledata.cli import _parse_id, main


class TestCLI(unittest.TestCase):
    def setUp(self) -> None:
        self.out = io.StringIO()
        patcher = mock.patch.object(cli, "console", Console(file=self.out, width=120, color_system=None))
        patcher.start()
        self.addCleanup(patcher.stop)

    def _run(self, *argv: str) -> int:
        with self.assertRaises(SystemExit) as ctx:
            main(list(argv))
        return ctx.exception.code

    def test_search_requires_text(self) -> None:
        self.assertNotEqual(self._run("search", ""), 0)

    def test_search_finds_events(self) -> None:
        self.assertEqual(self._run("search", "netcode"), 0)
        self.assertIn("Rollback Netcode in Practice", self.out.getvalue())

    def test_categories_show_counts(self) -> None:
        self.assertEqual(self._run("categories"), 0)
        text = self.out.getvalue()
        self.assertIn("Mid Career", text)
        self.assertIn("MID_CAREER", text)

    def test_rooms_by_event(self) -> None:
        self.assertEqual(self._run("rooms-by-event", "701"), 0)
        self.assertIn("Auditorium", self.out.getvalue())

    def test_rooms_by_event_without_room(self) -> None:
        self.assertEqual(self._run("rooms-by-event", "704"), 0)
        self.assertIn("No room for event 704", self.out.getvalue())

    def test_events_by_stream(self) -> None:
        self.assertEqual(self._run("events-by-stream", "301"), 0)
        text = self.out.getvalue()
        self.assertIn("Shader Workshop", text)
        self.assertNotIn("Writing Branching Dialogue", text)

    def test_summary(self) -> None:
        self.assertEqual(self._run("summary"), 0)
        self.assertIn("session_types", self.out.getvalue())

    def test_unreadable_payload_exits_2(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            code = self._run("--data", str(Path(d) / "missing.json"), "summary")
        self.assertEqual(code, 2)

    def test_parse_id(self) -> None:
        self.assertEqual(_parse_id("42"), 42)
        self.assertEqual(_parse_id(" 0 "), 0)
        self.assertEqual(_parse_id("panel-b1"), "panel-b1")


if __name__ == "__main__":
    unittest.main()
