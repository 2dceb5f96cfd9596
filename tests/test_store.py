"""
Unit tests for the entity store.

Store contract:
- one read-only mapping per entity type, in insertion order
- point lookups return None for unknown ids
- dangling event references are reported once, at construction
"""

import unittest

from payloads import conference_payload, scenario_payload

from scheduledata.model import Category, Event
from scheduledata.store import EntityStore
from scheduledata.transform import Collections


class TestEntityStore(unittest.TestCase):
    def setUp(self) -> None:
        self.store = EntityStore.from_payload(conference_payload())

    def test_point_lookups(self) -> None:
        self.assertEqual(self.store.get_event(71).title, "Rollback Netcode")
        self.assertEqual(self.store.get_category(12).name, "Mid Career")
        self.assertEqual(self.store.get_room(21).title, "Auditorium")
        self.assertEqual(self.store.get_stream(32).title, "Art")
        self.assertEqual(self.store.get_session_type(42).title, "Workshop")
        self.assertEqual(self.store.get_speaker(51).display_name, "Sam Carter")
        self.assertEqual(self.store.get_schedule(61).title, "Thursday")

    def test_unknown_ids_return_none(self) -> None:
        self.assertIsNone(self.store.get_event(999))
        self.assertIsNone(self.store.get_category("11"))
        self.assertIsNone(self.store.get_room(None))

    def test_collections_keep_insertion_order(self) -> None:
        self.assertEqual(list(self.store.events()), [71, 72, 73])
        self.assertEqual([e.id for e in self.store.all_events()], [71, 72, 73])
        self.assertEqual(list(self.store.rooms()), [21, 22])

    def test_collections_are_read_only(self) -> None:
        with self.assertRaises(TypeError):
            self.store.categories()[99] = Category(id=99, name="x", key="X")  # type: ignore[index]

    def test_all_events_returns_a_fresh_list(self) -> None:
        events = self.store.all_events()
        events.clear()
        self.assertEqual(len(self.store.all_events()), 3)

    def test_events_by_category_matches_id_or_name(self) -> None:
        self.assertEqual([e.id for e in self.store.events_by_category(12)], [71, 72])
        self.assertEqual([e.id for e in self.store.events_by_category("Student")], [72])
        self.assertEqual(self.store.events_by_category("Nobody"), [])

    def test_speakers_by_event(self) -> None:
        self.assertEqual([s.id for s in self.store.speakers_by_event(71)], [51])
        self.assertEqual(self.store.speakers_by_event(73), [])
        self.assertEqual(self.store.speakers_by_event(999), [])

    def test_summary(self) -> None:
        summary = self.store.summary()
        self.assertEqual(summary["events"], 3)
        self.assertEqual(summary["rooms"], 2)
        self.assertEqual(summary["session_types"], 2)


class TestIntegrity(unittest.TestCase):
    def test_well_formed_payload_has_no_problems(self) -> None:
        store = EntityStore.from_payload(scenario_payload())
        self.assertEqual(store.validate_integrity(), [])

    def test_dangling_category_is_reported(self) -> None:
        payload = scenario_payload()
        payload["data"]["schedule"][0]["sessions"][0]["categories"].append({"id": 404})
        with self.assertLogs("scheduledata.store", level="WARNING") as logs:
            store = EntityStore.from_payload(payload)
        self.assertTrue(any("unknown category 404" in line for line in logs.output))
        # The data is kept as given
        self.assertEqual([c.id for c in store.get_event(1).categories], [5, 404])

    def test_empty_store_warns(self) -> None:
        with self.assertLogs("scheduledata.store", level="WARNING") as logs:
            EntityStore(Collections())
        self.assertTrue(any("No events" in line for line in logs.output))

    def test_duplicate_event_id_keeps_position_and_last_value(self) -> None:
        first = Event(id=1, title="first")
        second = Event(id=2, title="second")
        again = Event(id=1, title="first (again)")
        with self.assertLogs("scheduledata.store", level="WARNING"):
            store = EntityStore(Collections(events=[first, second, again]))
        self.assertEqual([e.title for e in store.all_events()], ["first (again)", "second"])


if __name__ == "__main__":
    unittest.main()
