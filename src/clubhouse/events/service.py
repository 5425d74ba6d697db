from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Sequence

from ..common.validators import require_datetime, require_non_empty, require_time_of_day
from ..core.exceptions import NotAuthorizedOrNotFound, ValidationError
from .model import EVENT_FIELDS, Event, EventInput
from .repository import EventRepository

logger = logging.getLogger(__name__)

_LABELS = {
    "title": "Title",
    "description": "Description",
    "location": "Location",
    "date": "Date",
    "startTime": "Start time",
    "endTime": "End time",
}


class EventService:
    """Use cases for events: anyone signed in may create, only the creator may change."""

    def __init__(self, events: EventRepository):
        self._events = events

    @staticmethod
    def _clean(key: str, value: Any) -> Any:
        label = _LABELS[key]
        if key == "date":
            return require_datetime(value, label)
        if key in {"startTime", "endTime"}:
            return require_time_of_day(value, label)
        return require_non_empty(value, label)

    def parse_input(self, payload: Mapping[str, Any]) -> EventInput:
        cleaned = {key: self._clean(key, payload.get(key)) for key in EVENT_FIELDS}
        return EventInput(
            title=cleaned["title"],
            description=cleaned["description"],
            location=cleaned["location"],
            date=cleaned["date"],
            start_time=cleaned["startTime"],
            end_time=cleaned["endTime"],
        )

    def parse_changes(self, payload: Mapping[str, Any]) -> dict:
        """Validate only the supplied keys; returns column -> value."""
        changes = {
            EVENT_FIELDS[key]: self._clean(key, value)
            for key, value in payload.items()
            if key in EVENT_FIELDS
        }
        if not changes:
            raise ValidationError("No event fields to update")
        return changes

    def list_events(self) -> Sequence[Event]:
        return self._events.list_all()

    def get_event(self, event_id: int) -> Optional[Event]:
        return self._events.get(int(event_id))

    def create_event(self, payload: Mapping[str, Any], *, creator_id: int) -> Event:
        data = self.parse_input(payload)
        event = self._events.create(data, created_by=int(creator_id))
        logger.info("Event %s created by user %s", event.event_id, creator_id)
        return event

    def update_event(self, event_id: int, payload: Mapping[str, Any], *, requester_id: int) -> Event:
        changes = self.parse_changes(payload)
        event = self._events.update_owned(int(event_id), changes, requester_id=int(requester_id))
        if event is None:
            raise NotAuthorizedOrNotFound("Event not found or not authorized")
        return event

    def delete_event(self, event_id: int, *, requester_id: int) -> None:
        if not self._events.delete_owned(int(event_id), requester_id=int(requester_id)):
            raise NotAuthorizedOrNotFound("Event not found or not authorized")
        logger.info("Event %s deleted by user %s", event_id, requester_id)
