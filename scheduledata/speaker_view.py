"""
Speaker view.
"""

from __future__ import annotations

from typing import List, Optional

from scheduledata.facade import BaseView, found
from scheduledata.model import EntityId, Speaker


def _has_expertise(sp: Speaker, needle: str) -> bool:
    if sp.expertise:
        return any(needle in exp.lower() for exp in sp.expertise)
    # No expertise entries: fall back to the bio
    return bool(sp.bio) and needle in sp.bio.lower()


class SpeakerView(BaseView):
    name = "SpeakerView"

    def get_speaker(self, speaker_id: EntityId) -> Optional[Speaker]:
        return self._run(
            "get_speaker",
            None,
            lambda store: found(store.get_speaker(speaker_id)),
            identifier=speaker_id,
        )

    def get_all_speakers(self) -> List[Speaker]:
        return self._run("get_all_speakers", [], lambda store: found(list(store.speakers().values())))

    def get_speakers_by_event(self, event_id: EntityId) -> List[Speaker]:
        return self._run(
            "get_speakers_by_event",
            [],
            lambda store: found(store.speakers_by_event(event_id)),
            identifier=event_id,
        )

    def get_featured_speakers(self) -> List[Speaker]:
        return self._run(
            "get_featured_speakers",
            [],
            lambda store: found([sp for sp in store.speakers().values() if sp.featured]),
        )

    def get_speakers_by_expertise(self, expertise: str) -> List[Speaker]:
        valid = isinstance(expertise, str) and bool(expertise)
        return self._run(
            "get_speakers_by_expertise",
            [],
            lambda store: found(
                [sp for sp in store.speakers().values() if _has_expertise(sp, expertise.lower())]
            ),
            identifier=expertise,
            invalid=None if valid else "invalid expertise",
        )
