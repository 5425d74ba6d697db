from __future__ import annotations

from typing import Protocol, Sequence

from .model import Attendee, AttendeeWithUser


class AttendanceRepository(Protocol):
    def list_attendees(self, event_id: int) -> Sequence[AttendeeWithUser]:
        raise NotImplementedError

    def is_attending(self, event_id: int, user_id: int) -> bool:
        raise NotImplementedError

    def add(self, event_id: int, user_id: int) -> Attendee:
        """Raises ConflictError if the (event, user) pair already exists."""

        raise NotImplementedError

    def remove(self, event_id: int, user_id: int) -> bool:
        raise NotImplementedError
