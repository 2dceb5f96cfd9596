"""
Transformation (raw payload -> normalized entities).

Two raw shapes are understood:

- the event platform API payload::

      {"data": {"speakers": [...], "categories": [...], "rooms": [...],
                "streams": [...], "sessionTypes": [...],
                "schedule": [{"id": ..., "date": ..., "sessions": [...]}]}}

- the static time-slot configuration used by the widget::

      {"timeSlots": [{"id": ..., "timeRange": ..., "title": ...,
                      "events": [{"id": ..., "category": ..., "title": ...}]}]}

Important rules:
- top-level entity lists are the primary source; entities embedded in
  sessions are only added when their id is not known yet
- events reference the normalized objects, never the raw dicts
- an entity without an id is rejected (InvalidEntityError)
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from bs4 import BeautifulSoup

from scheduledata.errors import InvalidEntityError
from scheduledata.model import (
    Category,
    EntityId,
    Event,
    Room,
    Schedule,
    SessionType,
    Speaker,
    Stream,
    TimeSlot,
)

logger = logging.getLogger(__name__)

SHAPE_API = "api"
SHAPE_TIME_SLOTS = "time_slots"

STREAM_KEYS: Dict[str, str] = {
    "Story and Narrative": "STORY_NARRATIVE",
    "Story & Narrative": "STORY_NARRATIVE",
    "Production & QA": "PRODUCTION_QA",
    "Culture": "CULTURE",
    "Business & Marketing": "BUSINESS_MARKETING",
    "Business": "BUSINESS_MARKETING",
    "Art": "ART",
    "Audio": "AUDIO",
    "Programming": "PROGRAMMING",
    "Data, Testing or Research": "DATA_TESTING_RESEARCH",
    "Realities (VR, AR, MR)": "REALITIES_VR_AR_MR",
    "Realities (AR, MR, VR)": "REALITIES_VR_AR_MR",
    "Game Design": "GAME_DESIGN",
    "Serious & Educational Games": "SERIOUS_EDUCATIONAL",
}
DEFAULT_STREAM_KEY = "PROGRAMMING"


@dataclass
class Collections:
    """
    Normalized entity lists in payload order, ready to be indexed by the store.
    """

    events: List[Event] = field(default_factory=list)
    schedules: List[Schedule] = field(default_factory=list)
    speakers: List[Speaker] = field(default_factory=list)
    categories: List[Category] = field(default_factory=list)
    rooms: List[Room] = field(default_factory=list)
    streams: List[Stream] = field(default_factory=list)
    session_types: List[SessionType] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def strip_html(value: Any) -> Any:
    """
    Return the text content of an HTML fragment. Non-strings pass through.
    """
    if not isinstance(value, str):
        return value
    return BeautifulSoup(value, "html.parser").get_text()


def category_key(name: Optional[str]) -> str:
    """
    'Mid Career / Senior' -> 'MID_CAREER_SENIOR'
    """
    if not name:
        return "UNKNOWN"
    key = re.sub(r"[^A-Z0-9]", "_", name.upper())
    key = re.sub(r"_+", "_", key)
    return key.strip("_") or "UNKNOWN"


def stream_key(title: Optional[str]) -> str:
    if not title:
        return DEFAULT_STREAM_KEY
    return STREAM_KEYS.get(title, DEFAULT_STREAM_KEY)


def _list_of(container: Mapping[str, Any], key: str) -> List[Any]:
    # Malformed collections count as empty
    value = container.get(key)
    return list(value) if isinstance(value, list) else []


def _require_id(entity_type: str, raw: Any) -> EntityId:
    if not isinstance(raw, Mapping):
        raise InvalidEntityError(entity_type, raw)
    entity_id = raw.get("id")
    if entity_id is None or entity_id == "" or isinstance(entity_id, bool):
        raise InvalidEntityError(entity_type, raw)
    return entity_id


def _extra(raw: Mapping[str, Any], known: Tuple[str, ...]) -> Dict[str, Any]:
    return {k: v for k, v in raw.items() if k not in known}


def _put_first(index: Dict[EntityId, Any], entity: Any) -> Any:
    """
    Insert unless the id is already known; return the entity stored under the id.
    """
    if entity.id not in index:
        index[entity.id] = entity
    return index[entity.id]


def _put_last(index: Dict[EntityId, Any], entity: Any, entity_type: str) -> None:
    # A repeated id keeps its first position and takes the later value
    if entity.id in index:
        logger.warning("Duplicate %s id %r in payload; later entry wins", entity_type, entity.id)
    index[entity.id] = entity


# ---------------------------------------------------------------------------
# Entity normalization
# ---------------------------------------------------------------------------


def normalize_category(raw: Mapping[str, Any]) -> Category:
    entity_id = _require_id("category", raw)
    name = strip_html(raw.get("name")) or ""
    return Category(
        id=entity_id,
        name=name,
        key=category_key(name),
        extra=_extra(raw, ("id", "name")),
    )


def normalize_room(raw: Mapping[str, Any]) -> Room:
    entity_id = _require_id("room", raw)
    return Room(
        id=entity_id,
        title=raw.get("title") or "",
        capacity=raw.get("capacity") or 0,
        extra=_extra(raw, ("id", "title", "capacity")),
    )


def normalize_stream(raw: Mapping[str, Any]) -> Stream:
    entity_id = _require_id("stream", raw)
    title = raw.get("title") or ""
    return Stream(
        id=entity_id,
        title=title,
        colour=raw.get("streamColour") or "#000000",
        key=stream_key(title),
        extra=_extra(raw, ("id", "title", "streamColour")),
    )


def normalize_session_type(raw: Mapping[str, Any]) -> SessionType:
    entity_id = _require_id("session type", raw)
    return SessionType(
        id=entity_id,
        title=raw.get("title") or "",
        colour=raw.get("colour") or "#000000",
        extra=_extra(raw, ("id", "title", "colour")),
    )


def normalize_speaker(raw: Mapping[str, Any]) -> Speaker:
    entity_id = _require_id("speaker", raw)

    # Combined "position at company" for display
    position = raw.get("position") or ""
    company = raw.get("company") or None
    if company and position:
        position = f"{position} at {company}"
    elif company:
        position = company

    expertise = raw.get("expertise")
    return Speaker(
        id=entity_id,
        display_name=raw.get("displayName") or raw.get("name") or "",
        position=position,
        company=company,
        bio=strip_html(raw.get("copy")) or "",
        headshot=raw.get("speakerImage") or "",
        expertise=tuple(str(x) for x in expertise) if isinstance(expertise, list) else (),
        featured=bool(raw.get("featured", False)),
        extra=_extra(
            raw,
            ("id", "displayName", "name", "position", "company", "copy", "speakerImage", "expertise", "featured"),
        ),
    )


# ---------------------------------------------------------------------------
# API payload
# ---------------------------------------------------------------------------


def _sessions(day: Any) -> List[Any]:
    return _list_of(day, "sessions") if isinstance(day, Mapping) else []


def _embedded(sessions: List[Any], key: str) -> List[Mapping[str, Any]]:
    out: List[Mapping[str, Any]] = []
    for session in sessions:
        if not isinstance(session, Mapping):
            continue
        value = session.get(key)
        if isinstance(value, list):
            out.extend(v for v in value if isinstance(v, Mapping))
        elif isinstance(value, Mapping):
            out.append(value)
    return out


def _derive_time_slots(sessions: List[Event]) -> Tuple[TimeSlot, ...]:
    """
    Group a day's events by (start, end) in first-seen order.
    """
    slots: Dict[Tuple[Optional[str], Optional[str]], List[EntityId]] = {}
    for ev in sessions:
        slots.setdefault((ev.start_time, ev.end_time), []).append(ev.id)

    out: List[TimeSlot] = []
    for (start, end), ids in slots.items():
        start_s = start or ""
        end_s = end or ""
        out.append(
            TimeSlot(
                id=f"{start_s}-{end_s}",
                time_range=f"{start_s} - {end_s}".strip(" -"),
                event_ids=tuple(ids),
            )
        )
    return tuple(out)


def transform_api_payload(payload: Mapping[str, Any]) -> Collections:
    """
    Normalize an event platform API payload.
    """
    data = payload.get("data")
    if not isinstance(data, Mapping):
        logger.warning("API payload has no 'data' object; nothing to load")
        return Collections()

    days = [d for d in _list_of(data, "schedule") if isinstance(d, Mapping)]
    all_sessions = [s for d in days for s in _sessions(d)]

    speakers: Dict[EntityId, Speaker] = {}
    categories: Dict[EntityId, Category] = {}
    rooms: Dict[EntityId, Room] = {}
    streams: Dict[EntityId, Stream] = {}
    session_types: Dict[EntityId, SessionType] = {}

    # Top-level lists first, embedded copies only fill gaps
    for raw in _list_of(data, "speakers"):
        sp = normalize_speaker(raw)
        _put_last(speakers, sp, "speaker")
    for raw in _embedded(all_sessions, "speakers"):
        _put_first(speakers, normalize_speaker(raw))

    for raw in _list_of(data, "categories"):
        cat = normalize_category(raw)
        _put_last(categories, cat, "category")

    for raw in _list_of(data, "rooms"):
        room = normalize_room(raw)
        _put_last(rooms, room, "room")
    for raw in _embedded(all_sessions, "room"):
        _put_first(rooms, normalize_room(raw))

    for raw in _list_of(data, "streams"):
        st = normalize_stream(raw)
        _put_last(streams, st, "stream")
    for raw in _embedded(all_sessions, "stream"):
        _put_first(streams, normalize_stream(raw))

    for raw in _list_of(data, "sessionTypes"):
        stype = normalize_session_type(raw)
        _put_last(session_types, stype, "session type")
    for raw in _embedded(all_sessions, "type"):
        _put_first(session_types, normalize_session_type(raw))

    events: List[Event] = []
    schedules: List[Schedule] = []
    for day in days:
        day_id = _require_id("schedule", day)
        day_events: List[Event] = []
        for session in _sessions(day):
            ev = _api_event(session, day, categories, rooms, streams, session_types, speakers)
            day_events.append(ev)
        events.extend(day_events)
        schedules.append(
            Schedule(
                id=day_id,
                title=day.get("title") or "",
                date=day.get("date"),
                time_slots=_derive_time_slots(day_events),
                extra=_extra(day, ("id", "title", "date", "sessions")),
            )
        )

    logger.debug(
        "Transformed API payload: %d events, %d schedules, %d speakers",
        len(events),
        len(schedules),
        len(speakers),
    )
    return Collections(
        events=events,
        schedules=schedules,
        speakers=list(speakers.values()),
        categories=list(categories.values()),
        rooms=list(rooms.values()),
        streams=list(streams.values()),
        session_types=list(session_types.values()),
    )


def _resolve(index: Dict[EntityId, Any], raw: Any, normalize) -> Any:
    if not isinstance(raw, Mapping):
        return None
    entity = normalize(raw)
    return index.get(entity.id, entity)


def _api_event(
    session: Any,
    day: Mapping[str, Any],
    categories: Dict[EntityId, Category],
    rooms: Dict[EntityId, Room],
    streams: Dict[EntityId, Stream],
    session_types: Dict[EntityId, SessionType],
    speakers: Dict[EntityId, Speaker],
) -> Event:
    entity_id = _require_id("event", session)

    # Unknown categories stay dangling; the store reports them
    event_categories = tuple(
        _resolve(categories, raw, normalize_category) for raw in _list_of(session, "categories") if isinstance(raw, Mapping)
    )
    event_speakers = tuple(
        _resolve(speakers, raw, normalize_speaker) for raw in _list_of(session, "speakers") if isinstance(raw, Mapping)
    )

    return Event(
        id=entity_id,
        title=session.get("title") or "",
        subtitle=session.get("subtitle"),
        description=strip_html(session.get("copy")) or "",
        start_time=session.get("startTime"),
        end_time=session.get("endTime"),
        categories=event_categories,
        room=_resolve(rooms, session.get("room"), normalize_room),
        stream=_resolve(streams, session.get("stream"), normalize_stream),
        session_type=_resolve(session_types, session.get("type"), normalize_session_type),
        speakers=event_speakers,
        featured=bool(session.get("featured", False)),
        schedule_id=day.get("id"),
        schedule_title=day.get("title"),
        schedule_date=day.get("date"),
        extra=_extra(
            session,
            (
                "id", "title", "subtitle", "copy", "startTime", "endTime", "categories",
                "room", "stream", "type", "speakers", "featured",
            ),
        ),
    )


# ---------------------------------------------------------------------------
# Static time-slot configuration
# ---------------------------------------------------------------------------


def transform_time_slots(config: Mapping[str, Any]) -> Collections:
    """
    Normalize a static time-slot configuration into one schedule.
    """
    schedule_id = config.get("id") or "schedule"
    schedule_title = config.get("title") or ""

    categories: Dict[EntityId, Category] = {}
    events: List[Event] = []
    slots: List[TimeSlot] = []

    for i, raw_slot in enumerate(_list_of(config, "timeSlots"), start=1):
        if not isinstance(raw_slot, Mapping):
            continue
        items = _list_of(raw_slot, "events") or _list_of(raw_slot, "workshops")
        kind = "break" if raw_slot.get("type") == "break" or not items else "sessions"

        slot_event_ids: List[EntityId] = []
        for item in items:
            entity_id = _require_id("event", item)
            name = item.get("category")
            event_categories: Tuple[Category, ...] = ()
            if name:
                key = category_key(name)
                cat = _put_first(categories, Category(id=key, name=name, key=key))
                event_categories = (cat,)

            events.append(
                Event(
                    id=entity_id,
                    title=item.get("title") or "",
                    categories=event_categories,
                    schedule_id=schedule_id,
                    schedule_title=schedule_title or None,
                    extra=_extra(item, ("id", "title", "category")),
                )
            )
            slot_event_ids.append(entity_id)

        slots.append(
            TimeSlot(
                id=str(raw_slot.get("id") or f"slot-{i}"),
                title=raw_slot.get("title") or "",
                time_range=raw_slot.get("timeRange") or "",
                kind=kind,
                event_ids=tuple(slot_event_ids),
            )
        )

    schedule = Schedule(
        id=schedule_id,
        title=schedule_title,
        time_slots=tuple(slots),
        extra=_extra(config, ("id", "title", "timeSlots")),
    )
    logger.debug("Transformed time-slot config: %d slots, %d events", len(slots), len(events))
    return Collections(events=events, schedules=[schedule], categories=list(categories.values()))


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def detect_shape(payload: Any) -> Optional[str]:
    if not isinstance(payload, Mapping):
        return None
    if isinstance(payload.get("data"), Mapping):
        return SHAPE_API
    if "timeSlots" in payload:
        return SHAPE_TIME_SLOTS
    return None


def transform_payload(payload: Any) -> Collections:
    """
    Normalize any supported payload. Unknown shapes produce empty collections.
    """
    shape = detect_shape(payload)
    if shape == SHAPE_API:
        return transform_api_payload(payload)
    if shape == SHAPE_TIME_SLOTS:
        return transform_time_slots(payload)
    logger.warning("Unrecognized schedule payload; expected 'data' or 'timeSlots'")
    return Collections()
