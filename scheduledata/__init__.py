"""
scheduledata: read-only, in-memory access to a conference schedule.

Typical use::

    from scheduledata import build
    from scheduledata.loader import load_payload

    views = build(load_payload("schedule.json"))
    views.categories.get_categories_with_event_counts()
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from scheduledata.category_view import CategoryView
from scheduledata.event_view import EventView
from scheduledata.room_view import RoomView
from scheduledata.schedule_view import ScheduleView
from scheduledata.session_type_view import SessionTypeView
from scheduledata.speaker_view import SpeakerView
from scheduledata.store import EntityStore
from scheduledata.stream_view import StreamView


@dataclass(frozen=True)
class Views:
    """
    All views, sharing one entity store.
    """

    store: Optional[EntityStore]
    categories: CategoryView
    rooms: RoomView
    streams: StreamView
    events: EventView
    speakers: SpeakerView
    session_types: SessionTypeView
    schedules: ScheduleView

    @classmethod
    def from_store(cls, store: Optional[EntityStore]) -> "Views":
        return cls(
            store=store,
            categories=CategoryView(store),
            rooms=RoomView(store),
            streams=StreamView(store),
            events=EventView(store),
            speakers=SpeakerView(store),
            session_types=SessionTypeView(store),
            schedules=ScheduleView(store),
        )


def build(payload: Any) -> Views:
    """
    Build the store once from a raw payload and wire every view to it.
    """
    return Views.from_store(EntityStore.from_payload(payload))


__all__ = [
    "CategoryView",
    "EntityStore",
    "EventView",
    "RoomView",
    "ScheduleView",
    "SessionTypeView",
    "SpeakerView",
    "StreamView",
    "Views",
    "build",
]
