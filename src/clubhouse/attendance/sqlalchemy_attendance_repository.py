from __future__ import annotations

from typing import Sequence

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError

from ..common.datetime_utils import utcnow
from ..core.exceptions import ConflictError
from ..database.orm import EventAttendeeRow, UserRow
from ..database.sqlalchemy_base import db_session
from ..users.sqlalchemy_user_repository import row_to_user
from .model import Attendee, AttendeeWithUser
from .repository import AttendanceRepository


def _to_attendee(row: EventAttendeeRow) -> Attendee:
    return Attendee(
        attendee_id=int(row.id),
        event_id=int(row.event_id),
        user_id=int(row.user_id),
        created_at=row.created_at,
    )


class SqlAlchemyAttendanceRepository(AttendanceRepository):
    def list_attendees(self, event_id: int) -> Sequence[AttendeeWithUser]:
        with db_session() as session:
            rows = session.execute(
                select(EventAttendeeRow, UserRow)
                .join(UserRow, EventAttendeeRow.user_id == UserRow.id)
                .where(EventAttendeeRow.event_id == int(event_id))
                .order_by(EventAttendeeRow.created_at, EventAttendeeRow.id)
            ).all()
            return [AttendeeWithUser(attendee=_to_attendee(a), user=row_to_user(u)) for a, u in rows]

    def is_attending(self, event_id: int, user_id: int) -> bool:
        with db_session() as session:
            found = session.execute(
                select(EventAttendeeRow.id).where(
                    EventAttendeeRow.event_id == int(event_id),
                    EventAttendeeRow.user_id == int(user_id),
                )
            ).first()
            return found is not None

    def add(self, event_id: int, user_id: int) -> Attendee:
        row = EventAttendeeRow(event_id=int(event_id), user_id=int(user_id), created_at=utcnow())
        try:
            with db_session() as session:
                session.add(row)
                session.flush()
                return _to_attendee(row)
        except IntegrityError:
            raise ConflictError("Already attending this event")

    def remove(self, event_id: int, user_id: int) -> bool:
        with db_session() as session:
            result = session.execute(
                delete(EventAttendeeRow)
                .where(EventAttendeeRow.event_id == int(event_id), EventAttendeeRow.user_id == int(user_id))
                .execution_options(synchronize_session=False)
            )
            return result.rowcount > 0
