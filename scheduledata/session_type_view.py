"""
Session type view: mirrors the stream view over ``Event.session_type``.
"""

from __future__ import annotations

from typing import List, Optional

from scheduledata.facade import BaseView, count_references, found, is_rejected_id, single, with_event_counts
from scheduledata.model import EntityId, Event, SessionType


class SessionTypeView(BaseView):
    name = "SessionTypeView"

    def get_session_type(self, session_type_id: EntityId) -> Optional[SessionType]:
        return self._run(
            "get_session_type",
            None,
            lambda store: found(store.get_session_type(session_type_id)),
            identifier=session_type_id,
        )

    def get_all_session_types(self) -> List[SessionType]:
        return self._run(
            "get_all_session_types",
            [],
            lambda store: found(list(store.session_types().values())),
        )

    def get_session_types_with_event_counts(self) -> List[SessionType]:
        def lookup(store):
            counts = count_references(store.all_events(), lambda ev: single(ev.session_type))
            return found(with_event_counts(store.session_types().values(), counts))

        return self._run("get_session_types_with_event_counts", [], lookup)

    def get_events_by_session_type(self, session_type_id: EntityId) -> List[Event]:
        return self._run(
            "get_events_by_session_type",
            [],
            lambda store: found(
                [
                    ev
                    for ev in store.all_events()
                    if ev.session_type is not None and ev.session_type.id == session_type_id
                ]
            ),
            identifier=session_type_id,
            invalid="invalid session type id" if is_rejected_id(session_type_id) else None,
        )
