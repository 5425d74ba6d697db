from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence

from .model import Event, EventInput


class EventRepository(Protocol):
    def list_all(self) -> Sequence[Event]:
        """Newest event date first."""

        raise NotImplementedError

    def get(self, event_id: int) -> Optional[Event]:
        raise NotImplementedError

    def create(self, data: EventInput, *, created_by: int) -> Event:
        raise NotImplementedError

    def update_owned(self, event_id: int, changes: Mapping[str, Any], *, requester_id: int) -> Optional[Event]:
        """Apply changes only where id AND created_by match in one statement.

        Returns None when no row matched (missing or foreign).
        """

        raise NotImplementedError

    def delete_owned(self, event_id: int, *, requester_id: int) -> bool:
        """Delete where id AND created_by match; False when nothing was deleted."""

        raise NotImplementedError
