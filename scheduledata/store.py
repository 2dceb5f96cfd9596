"""
Entity store: the single owner of the normalized schedule collections.

The store is built once from a raw payload and never changes afterwards.
Collections are exposed as read-only mappings (id -> entity) in insertion
order; that order is the canonical order of every "get all" operation.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, TypeVar

from scheduledata.model import (
    Category,
    EntityId,
    Event,
    Room,
    Schedule,
    SessionType,
    Speaker,
    Stream,
)
from scheduledata.transform import Collections, transform_payload

logger = logging.getLogger(__name__)

E = TypeVar("E")


def _index(entities: Iterable[E], entity_type: str) -> Mapping[EntityId, E]:
    out: Dict[EntityId, E] = {}
    for entity in entities:
        entity_id = entity.id  # type: ignore[attr-defined]
        if entity_id in out:
            logger.warning("Duplicate %s id %r; later entry wins", entity_type, entity_id)
        out[entity_id] = entity
    return MappingProxyType(out)


class EntityStore:
    """
    Indexed, immutable snapshot of events, categories, rooms, streams,
    speakers, session types and schedules.
    """

    def __init__(self, collections: Collections) -> None:
        self._events = _index(collections.events, "event")
        self._schedules = _index(collections.schedules, "schedule")
        self._speakers = _index(collections.speakers, "speaker")
        self._categories = _index(collections.categories, "category")
        self._rooms = _index(collections.rooms, "room")
        self._streams = _index(collections.streams, "stream")
        self._session_types = _index(collections.session_types, "session type")

        self.validate_integrity()
        logger.info("Entity store ready: %s", self.summary())

    @classmethod
    def from_payload(cls, payload: Any) -> "EntityStore":
        return cls(transform_payload(payload))

    # ------------------------------------------------------------------
    # Integrity
    # ------------------------------------------------------------------

    def validate_integrity(self) -> List[str]:
        """
        Check that every event reference resolves. Returns the problems found
        (also logged as warnings); the data is kept either way.
        """
        if not self._events:
            logger.warning("No events found in data store")
        if not self._schedules:
            logger.warning("No schedules found in data store")
        if not self._speakers:
            logger.warning("No speakers found in data store")

        problems: List[str] = []
        for ev in self._events.values():
            for cat in ev.categories:
                if cat.id not in self._categories:
                    problems.append(f"event {ev.id!r} references unknown category {cat.id!r}")
            if ev.room is not None and ev.room.id not in self._rooms:
                problems.append(f"event {ev.id!r} references unknown room {ev.room.id!r}")
            if ev.stream is not None and ev.stream.id not in self._streams:
                problems.append(f"event {ev.id!r} references unknown stream {ev.stream.id!r}")
            if ev.session_type is not None and ev.session_type.id not in self._session_types:
                problems.append(f"event {ev.id!r} references unknown session type {ev.session_type.id!r}")

        for schedule in self._schedules.values():
            for slot in schedule.time_slots:
                for event_id in slot.event_ids:
                    if event_id not in self._events:
                        problems.append(
                            f"schedule {schedule.id!r} slot {slot.id!r} lists unknown event {event_id!r}"
                        )

        for problem in problems:
            logger.warning("Integrity: %s", problem)
        return problems

    def summary(self) -> Dict[str, int]:
        return {
            "events": len(self._events),
            "schedules": len(self._schedules),
            "speakers": len(self._speakers),
            "categories": len(self._categories),
            "rooms": len(self._rooms),
            "streams": len(self._streams),
            "session_types": len(self._session_types),
        }

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def events(self) -> Mapping[EntityId, Event]:
        return self._events

    def get_event(self, event_id: EntityId) -> Optional[Event]:
        return self._events.get(event_id)

    def all_events(self) -> List[Event]:
        return list(self._events.values())

    def events_by_category(self, key: Any) -> List[Event]:
        """
        Events carrying a category whose id or name equals ``key``.
        """
        return [
            ev for ev in self._events.values() if any(c.id == key or c.name == key for c in ev.categories)
        ]

    # ------------------------------------------------------------------
    # Categories, rooms, streams, session types
    # ------------------------------------------------------------------

    def categories(self) -> Mapping[EntityId, Category]:
        return self._categories

    def get_category(self, category_id: EntityId) -> Optional[Category]:
        return self._categories.get(category_id)

    def rooms(self) -> Mapping[EntityId, Room]:
        return self._rooms

    def get_room(self, room_id: EntityId) -> Optional[Room]:
        return self._rooms.get(room_id)

    def streams(self) -> Mapping[EntityId, Stream]:
        return self._streams

    def get_stream(self, stream_id: EntityId) -> Optional[Stream]:
        return self._streams.get(stream_id)

    def session_types(self) -> Mapping[EntityId, SessionType]:
        return self._session_types

    def get_session_type(self, session_type_id: EntityId) -> Optional[SessionType]:
        return self._session_types.get(session_type_id)

    # ------------------------------------------------------------------
    # Speakers and schedules
    # ------------------------------------------------------------------

    def speakers(self) -> Mapping[EntityId, Speaker]:
        return self._speakers

    def get_speaker(self, speaker_id: EntityId) -> Optional[Speaker]:
        return self._speakers.get(speaker_id)

    def speakers_by_event(self, event_id: EntityId) -> List[Speaker]:
        ev = self.get_event(event_id)
        return list(ev.speakers) if ev is not None else []

    def schedules(self) -> Mapping[EntityId, Schedule]:
        return self._schedules

    def get_schedule(self, schedule_id: EntityId) -> Optional[Schedule]:
        return self._schedules.get(schedule_id)
