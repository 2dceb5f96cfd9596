"""
Stream view: subject-area streams, event counts per stream and events by stream.
"""

from __future__ import annotations

from typing import List, Optional

from scheduledata.facade import BaseView, count_references, found, is_rejected_id, single, with_event_counts
from scheduledata.model import EntityId, Event, Stream


class StreamView(BaseView):
    name = "StreamView"

    def get_stream(self, stream_id: EntityId) -> Optional[Stream]:
        return self._run(
            "get_stream",
            None,
            lambda store: found(store.get_stream(stream_id)),
            identifier=stream_id,
        )

    def get_all_streams(self) -> List[Stream]:
        return self._run(
            "get_all_streams",
            [],
            lambda store: found(list(store.streams().values())),
        )

    def get_streams_with_event_counts(self) -> List[Stream]:
        # Each event has at most one stream, so it adds at most one count
        def lookup(store):
            counts = count_references(store.all_events(), lambda ev: single(ev.stream))
            return found(with_event_counts(store.streams().values(), counts))

        return self._run("get_streams_with_event_counts", [], lookup)

    def get_events_by_stream(self, stream_id: EntityId) -> List[Event]:
        """
        Events whose stream id equals ``stream_id``, in store order.
        """
        return self._run(
            "get_events_by_stream",
            [],
            lambda store: found(
                [ev for ev in store.all_events() if ev.stream is not None and ev.stream.id == stream_id]
            ),
            identifier=stream_id,
            invalid="invalid stream id" if is_rejected_id(stream_id) else None,
        )
