"""
Unit tests for RoomView.

A room is a 0-or-1 relation per event: get_rooms_by_event never returns
more than one element.
"""

import unittest

from payloads import conference_payload, scenario_payload

from scheduledata.errors import ErrorKind
from scheduledata.room_view import RoomView
from scheduledata.store import EntityStore


class TestRoomView(unittest.TestCase):
    def setUp(self) -> None:
        self.view = RoomView(EntityStore.from_payload(conference_payload()))

    def test_get_room_and_all_rooms(self) -> None:
        self.assertEqual(self.view.get_room(21).capacity, 400)
        self.assertIsNone(self.view.get_room(99))
        self.assertEqual([r.id for r in self.view.get_all_rooms()], [21, 22])

    def test_rooms_by_event_single_element(self) -> None:
        rooms = self.view.get_rooms_by_event(71)
        self.assertEqual(len(rooms), 1)
        self.assertEqual(rooms[0].id, 21)

    def test_event_without_room(self) -> None:
        self.assertEqual(self.view.get_rooms_by_event(73), [])

    def test_unknown_event_warns(self) -> None:
        with self.assertLogs("scheduledata.facade", level="WARNING"):
            self.assertEqual(self.view.get_rooms_by_event(999), [])
        self.assertEqual(self.view.last_fault.kind, ErrorKind.NOT_FOUND)

    def test_falsy_event_id_is_rejected(self) -> None:
        for bad in (0, None, ""):
            with self.assertLogs("scheduledata.facade", level="WARNING"):
                self.assertEqual(self.view.get_rooms_by_event(bad), [])
            self.assertEqual(self.view.last_fault.kind, ErrorKind.INVALID_ARGUMENT)

    def test_scenario_event_has_no_room(self) -> None:
        view = RoomView(EntityStore.from_payload(scenario_payload()))
        self.assertEqual(view.get_rooms_by_event(1), [])
        self.assertEqual(view.get_all_rooms(), [])


if __name__ == "__main__":
    unittest.main()
