from __future__ import annotations

from typing import Sequence

from ..core.exceptions import ConflictError, NotAuthorizedOrNotFound
from ..events.repository import EventRepository
from .model import Attendee, AttendeeWithUser
from .repository import AttendanceRepository


class AttendanceService:
    """Use cases for marking attendance; independent of event ownership."""

    def __init__(self, attendance: AttendanceRepository, events: EventRepository):
        self._attendance = attendance
        self._events = events

    def list_attendees(self, event_id: int) -> Sequence[AttendeeWithUser]:
        return self._attendance.list_attendees(int(event_id))

    def is_attending(self, event_id: int, user_id: int) -> bool:
        return self._attendance.is_attending(int(event_id), int(user_id))

    def attend(self, event_id: int, *, user_id: int) -> Attendee:
        if not self._events.get(int(event_id)):
            raise NotAuthorizedOrNotFound("Event not found")

        # The unique (event, user) constraint still catches a concurrent duplicate.
        if self._attendance.is_attending(int(event_id), int(user_id)):
            raise ConflictError("Already attending this event")

        return self._attendance.add(int(event_id), int(user_id))

    def unattend(self, event_id: int, *, user_id: int) -> None:
        self._attendance.remove(int(event_id), int(user_id))
