from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import to_iso
from ..users.model import User, to_public_dict


@dataclass(frozen=True)
class Attendee:
    """Attendance row: one member's intent to attend one event."""

    attendee_id: int
    event_id: int
    user_id: int
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class AttendeeWithUser:
    attendee: Attendee
    user: User


def attendee_to_dict(attendee: Attendee) -> dict:
    return {
        "id": attendee.attendee_id,
        "eventId": attendee.event_id,
        "userId": attendee.user_id,
        "createdAt": to_iso(attendee.created_at),
    }


def attendee_with_user_to_dict(item: AttendeeWithUser) -> dict:
    out = attendee_to_dict(item.attendee)
    out["user"] = to_public_dict(item.user)
    return out
