"""
Room view. A room is a 0-or-1 relation per event.
"""

from __future__ import annotations

from typing import List, Optional

from scheduledata.facade import BaseView, found, is_rejected_id, not_found
from scheduledata.model import EntityId, Room


class RoomView(BaseView):
    name = "RoomView"

    def get_room(self, room_id: EntityId) -> Optional[Room]:
        return self._run(
            "get_room",
            None,
            lambda store: found(store.get_room(room_id)),
            identifier=room_id,
        )

    def get_all_rooms(self) -> List[Room]:
        return self._run(
            "get_all_rooms",
            [],
            lambda store: found(list(store.rooms().values())),
        )

    def get_rooms_by_event(self, event_id: EntityId) -> List[Room]:
        """
        ``[event.room]`` when the event exists and has a room, otherwise ``[]``.
        """

        def lookup(store):
            ev = store.get_event(event_id)
            if ev is None:
                return not_found("get_rooms_by_event", event_id, "event")
            return found([ev.room] if ev.room is not None else [])

        return self._run(
            "get_rooms_by_event",
            [],
            lookup,
            identifier=event_id,
            invalid="invalid event id" if is_rejected_id(event_id) else None,
        )
