"""
Central data model definitions used across the project.

Every entity is a frozen dataclass with a mandatory ``id``. Relations between
events and the other entities are explicit, optional fields:

- Event.categories   -> zero or more Category
- Event.room         -> at most one Room
- Event.stream       -> at most one Stream
- Event.session_type -> at most one SessionType
- Event.speakers     -> zero or more Speaker

Fields the store does not interpret are kept in ``extra`` so nothing from the
raw payload is lost.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Tuple, Union

EntityId = Union[int, str]


@dataclass(frozen=True)
class Category:
    """
    Audience category (e.g. "Student", "Mid Career").

    ``event_count`` stays None on stored objects. It is only filled in on the
    copies returned by the count views.
    """

    id: EntityId
    name: str
    key: str
    extra: Mapping[str, Any] = field(default_factory=dict, compare=False, repr=False)
    event_count: Optional[int] = None


@dataclass(frozen=True)
class Room:
    id: EntityId
    title: str
    capacity: int = 0
    extra: Mapping[str, Any] = field(default_factory=dict, compare=False, repr=False)


@dataclass(frozen=True)
class Stream:
    """
    Subject area of an event (e.g. "Programming", "Art").
    """

    id: EntityId
    title: str
    colour: str = "#000000"
    key: str = "PROGRAMMING"
    extra: Mapping[str, Any] = field(default_factory=dict, compare=False, repr=False)
    event_count: Optional[int] = None


@dataclass(frozen=True)
class SessionType:
    id: EntityId
    title: str
    colour: str = "#000000"
    extra: Mapping[str, Any] = field(default_factory=dict, compare=False, repr=False)
    event_count: Optional[int] = None


@dataclass(frozen=True)
class Speaker:
    id: EntityId
    display_name: str
    position: str = ""
    company: Optional[str] = None
    bio: str = ""
    headshot: str = ""
    expertise: Tuple[str, ...] = ()
    featured: bool = False
    extra: Mapping[str, Any] = field(default_factory=dict, compare=False, repr=False)


@dataclass(frozen=True)
class Event:
    """
    One scheduled session.

    ``schedule_*`` fields point back to the schedule day the event was
    listed under.
    """

    id: EntityId
    title: str
    subtitle: Optional[str] = None
    description: str = ""
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    categories: Tuple[Category, ...] = ()
    room: Optional[Room] = None
    stream: Optional[Stream] = None
    session_type: Optional[SessionType] = None
    speakers: Tuple[Speaker, ...] = ()
    featured: bool = False
    schedule_id: Optional[EntityId] = None
    schedule_title: Optional[str] = None
    schedule_date: Optional[str] = None
    extra: Mapping[str, Any] = field(default_factory=dict, compare=False, repr=False)


@dataclass(frozen=True)
class TimeSlot:
    """
    A block of the day. Break slots carry no events.
    """

    id: str
    title: str = ""
    time_range: str = ""
    kind: str = "sessions"
    event_ids: Tuple[EntityId, ...] = ()

    @property
    def is_break(self) -> bool:
        return self.kind == "break"


@dataclass(frozen=True)
class Schedule:
    """
    One schedule day (API payload) or one time-slot configuration.
    """

    id: EntityId
    title: str = ""
    date: Optional[str] = None
    time_slots: Tuple[TimeSlot, ...] = ()
    extra: Mapping[str, Any] = field(default_factory=dict, compare=False, repr=False)
