"""
Schedule view: schedule days, their time slots and the events of one slot.
"""

from __future__ import annotations

from typing import List, Optional

from scheduledata.facade import BaseView, found, is_rejected_id, not_found
from scheduledata.model import EntityId, Event, Schedule, TimeSlot


class ScheduleView(BaseView):
    name = "ScheduleView"

    def get_schedule(self, schedule_id: EntityId) -> Optional[Schedule]:
        return self._run(
            "get_schedule",
            None,
            lambda store: found(store.get_schedule(schedule_id)),
            identifier=schedule_id,
        )

    def get_all_schedules(self) -> List[Schedule]:
        return self._run("get_all_schedules", [], lambda store: found(list(store.schedules().values())))

    def get_time_slots(self, schedule_id: EntityId) -> List[TimeSlot]:
        def lookup(store):
            schedule = store.get_schedule(schedule_id)
            if schedule is None:
                return not_found("get_time_slots", schedule_id, "schedule")
            return found(list(schedule.time_slots))

        return self._run("get_time_slots", [], lookup, identifier=schedule_id)

    def get_events_for_time_slot(self, schedule_id: EntityId, time_slot_id: str) -> List[Event]:
        """
        Events listed in one time slot, resolved through the store, in slot order.
        Unknown schedules or slots give ``[]``.
        """

        def lookup(store):
            schedule = store.get_schedule(schedule_id)
            if schedule is None:
                return not_found("get_events_for_time_slot", schedule_id, "schedule")
            for slot in schedule.time_slots:
                if slot.id == time_slot_id:
                    events = (store.get_event(event_id) for event_id in slot.event_ids)
                    return found([ev for ev in events if ev is not None])
            return found([])

        rejected = is_rejected_id(schedule_id) or is_rejected_id(time_slot_id)
        return self._run(
            "get_events_for_time_slot",
            [],
            lookup,
            identifier=(schedule_id, time_slot_id),
            invalid="invalid schedule or time slot id" if rejected else None,
        )
