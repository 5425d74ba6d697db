from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import to_iso


@dataclass(frozen=True)
class Event:
    """Domain entity: a club event, mutable only by its creator."""

    event_id: int
    title: str
    description: str
    location: str
    date: datetime
    start_time: str
    end_time: str
    created_by: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class EventInput:
    title: str
    description: str
    location: str
    date: datetime
    start_time: str
    end_time: str


# JSON key -> column name, also the set of fields an update may touch
EVENT_FIELDS = {
    "title": "title",
    "description": "description",
    "location": "location",
    "date": "date",
    "startTime": "start_time",
    "endTime": "end_time",
}


def event_to_dict(event: Event) -> dict:
    return {
        "id": event.event_id,
        "title": event.title,
        "description": event.description,
        "location": event.location,
        "date": to_iso(event.date),
        "startTime": event.start_time,
        "endTime": event.end_time,
        "createdBy": event.created_by,
        "createdAt": to_iso(event.created_at),
        "updatedAt": to_iso(event.updated_at),
    }
