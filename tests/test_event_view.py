"""
Unit tests for EventView (lookups, category filter, search, featured, speaker).
"""

import unittest

from payloads import conference_payload

from scheduledata.errors import ErrorKind
from scheduledata.event_view import EventView
from scheduledata.store import EntityStore


class TestEventView(unittest.TestCase):
    def setUp(self) -> None:
        self.view = EventView(EntityStore.from_payload(conference_payload()))

    def test_get_event_and_all(self) -> None:
        self.assertEqual(self.view.get_event(72).title, "Branching Dialogue")
        self.assertIsNone(self.view.get_event(1))
        self.assertEqual([e.id for e in self.view.get_all_events()], [71, 72, 73])

    def test_events_by_category(self) -> None:
        self.assertEqual([e.id for e in self.view.get_events_by_category(12)], [71, 72])
        self.assertEqual([e.id for e in self.view.get_events_by_category("Student")], [72])

    def test_search_is_case_insensitive_over_text_fields(self) -> None:
        self.assertEqual([e.id for e in self.view.search_events("ROLLBACK")], [71])
        # subtitle
        self.assertEqual([e.id for e in self.view.search_events("fighting")], [71])
        self.assertEqual(self.view.search_events("nothing like this"), [])

    def test_search_rejects_empty_or_non_string(self) -> None:
        for bad in ("", None, 42):
            with self.assertLogs("scheduledata.facade", level="WARNING"):
                self.assertEqual(self.view.search_events(bad), [])  # type: ignore[arg-type]
            self.assertEqual(self.view.last_fault.kind, ErrorKind.INVALID_ARGUMENT)

    def test_featured_events(self) -> None:
        # 71 via featured speaker, 73 via its own flag
        self.assertEqual([e.id for e in self.view.get_featured_events()], [71, 73])

    def test_events_by_speaker(self) -> None:
        self.assertEqual([e.id for e in self.view.get_events_by_speaker(52)], [72])
        self.assertEqual(self.view.get_events_by_speaker(0), [])
        self.assertIsNone(self.view.last_fault)

    def test_events_by_speaker_rejects_none(self) -> None:
        with self.assertLogs("scheduledata.facade", level="WARNING"):
            self.assertEqual(self.view.get_events_by_speaker(None), [])  # type: ignore[arg-type]


if __name__ == "__main__":
    unittest.main()
