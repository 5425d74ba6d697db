from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from sqlalchemy import delete, select, update

from ..common.datetime_utils import utcnow
from ..database.orm import EventAttendeeRow, EventRow
from ..database.sqlalchemy_base import db_session
from .model import Event, EventInput
from .repository import EventRepository


def _to_event(row: EventRow) -> Event:
    return Event(
        event_id=int(row.id),
        title=row.title,
        description=row.description,
        location=row.location,
        date=row.date,
        start_time=row.start_time,
        end_time=row.end_time,
        created_by=int(row.created_by),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class SqlAlchemyEventRepository(EventRepository):
    def list_all(self) -> Sequence[Event]:
        with db_session() as session:
            rows = session.execute(select(EventRow).order_by(EventRow.date.desc(), EventRow.id.desc())).scalars()
            return [_to_event(r) for r in rows]

    def get(self, event_id: int) -> Optional[Event]:
        with db_session() as session:
            row = session.get(EventRow, int(event_id))
            return _to_event(row) if row else None

    def create(self, data: EventInput, *, created_by: int) -> Event:
        now = utcnow()
        with db_session() as session:
            row = EventRow(
                title=data.title,
                description=data.description,
                location=data.location,
                date=data.date,
                start_time=data.start_time,
                end_time=data.end_time,
                created_by=int(created_by),
                created_at=now,
                updated_at=now,
            )
            session.add(row)
            session.flush()
            return _to_event(row)

    def update_owned(self, event_id: int, changes: Mapping[str, Any], *, requester_id: int) -> Optional[Event]:
        with db_session() as session:
            result = session.execute(
                update(EventRow)
                .where(EventRow.id == int(event_id), EventRow.created_by == int(requester_id))
                .values(**dict(changes), updated_at=utcnow())
                .execution_options(synchronize_session=False)
            )
            if result.rowcount == 0:
                return None
            session.expire_all()
            row = session.get(EventRow, int(event_id))
            return _to_event(row) if row else None

    def delete_owned(self, event_id: int, *, requester_id: int) -> bool:
        owned = select(EventRow.id).where(EventRow.id == int(event_id), EventRow.created_by == int(requester_id))
        with db_session() as session:
            session.execute(
                delete(EventAttendeeRow)
                .where(EventAttendeeRow.event_id.in_(owned))
                .execution_options(synchronize_session=False)
            )
            result = session.execute(
                delete(EventRow)
                .where(EventRow.id == int(event_id), EventRow.created_by == int(requester_id))
                .execution_options(synchronize_session=False)
            )
            return result.rowcount > 0
