"""
Event view: point lookups, category filter, text search, featured events and
events by speaker.
"""

from __future__ import annotations

from typing import Any, List, Optional

from scheduledata.facade import BaseView, found
from scheduledata.model import EntityId, Event


def _matches(ev: Event, needle: str) -> bool:
    for text in (ev.title, ev.description, ev.subtitle):
        if isinstance(text, str) and needle in text.lower():
            return True
    return False


class EventView(BaseView):
    name = "EventView"

    def get_event(self, event_id: EntityId) -> Optional[Event]:
        return self._run(
            "get_event",
            None,
            lambda store: found(store.get_event(event_id)),
            identifier=event_id,
        )

    def get_all_events(self) -> List[Event]:
        return self._run("get_all_events", [], lambda store: found(store.all_events()))

    def get_events_by_category(self, category_key: Any) -> List[Event]:
        """
        Events tagged with a category whose id or name equals ``category_key``.
        """
        return self._run(
            "get_events_by_category",
            [],
            lambda store: found(store.events_by_category(category_key)),
            identifier=category_key,
        )

    def search_events(self, query: str) -> List[Event]:
        """
        Case-insensitive substring search over title, description and subtitle.
        """
        valid = isinstance(query, str) and bool(query)
        return self._run(
            "search_events",
            [],
            lambda store: found([ev for ev in store.all_events() if _matches(ev, query.lower())]),
            identifier=query,
            invalid=None if valid else "invalid search query",
        )

    def get_featured_events(self) -> List[Event]:
        # Featured flag on the event, or any featured speaker
        return self._run(
            "get_featured_events",
            [],
            lambda store: found(
                [ev for ev in store.all_events() if ev.featured or any(sp.featured for sp in ev.speakers)]
            ),
        )

    def get_events_by_speaker(self, speaker_id: EntityId) -> List[Event]:
        # Only None is rejected here; a speaker id of 0 is a valid lookup
        return self._run(
            "get_events_by_speaker",
            [],
            lambda store: found(
                [ev for ev in store.all_events() if any(sp.id == speaker_id for sp in ev.speakers)]
            ),
            identifier=speaker_id,
            invalid="invalid speaker id" if speaker_id is None else None,
        )
