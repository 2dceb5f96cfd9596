"""
Unit tests for loading payload files.

Loader contract:
- load_payload raises PayloadLoadError for missing or broken files
- load_payload_or_empty returns {} instead
- the packaged sample loads and builds a store
"""

import tempfile
import unittest
from pathlib import Path

from scheduledata import build
from scheduledata.errors import PayloadLoadError
from scheduledata.loader import load_payload, load_payload_or_empty


class TestLoader(unittest.TestCase):
    def test_missing_file_raises(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            with self.assertRaises(PayloadLoadError) as ctx:
                load_payload(Path(d) / "missing.json")
            self.assertEqual(ctx.exception.reason, "file not found")

    def test_invalid_json_raises(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "broken.json"
            p.write_text("{not json", encoding="utf-8")
            with self.assertRaises(PayloadLoadError):
                load_payload(p)

    def test_or_empty_returns_empty_dict(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            with self.assertLogs("scheduledata.loader", level="ERROR"):
                self.assertEqual(load_payload_or_empty(Path(d) / "missing.json"), {})

    def test_reads_payload(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "schedule.json"
            p.write_text('{"timeSlots": []}', encoding="utf-8")
            self.assertEqual(load_payload(str(p)), {"timeSlots": []})

    def test_packaged_sample_builds(self) -> None:
        views = build(load_payload())
        self.assertEqual(len(views.events.get_all_events()), 4)
        counts = {c.id: c.event_count for c in views.categories.get_categories_with_event_counts()}
        self.assertEqual(counts, {101: 2, 102: 2, 103: 1})
        self.assertEqual(views.categories.get_category(103).name, "Senior / Leadership")
        self.assertEqual([e.id for e in views.streams.get_events_by_stream(301)], [701, 703])


if __name__ == "__main__":
    unittest.main()
