from __future__ import annotations

from datetime import datetime

import pytest

from clubhouse.attendance.sqlalchemy_attendance_repository import SqlAlchemyAttendanceRepository
from clubhouse.core.exceptions import ConflictError
from clubhouse.events.model import EventInput
from clubhouse.events.sqlalchemy_event_repository import SqlAlchemyEventRepository
from clubhouse.users.sqlalchemy_user_repository import SqlAlchemyUserRepository


def test_unique_constraint_rejects_duplicate_that_skips_precheck(app):
    with app.app_context():
        user = SqlAlchemyUserRepository().create(email="a@example.com", display_name="A", password_hash="x")
        event = SqlAlchemyEventRepository().create(
            EventInput("T", "D", "L", datetime(2025, 1, 1), "10:00", "11:00"),
            created_by=user.user_id,
        )
        repo = SqlAlchemyAttendanceRepository()
        repo.add(event.event_id, user.user_id)

        with pytest.raises(ConflictError):
            repo.add(event.event_id, user.user_id)

        attendees = repo.list_attendees(event.event_id)
        assert len(attendees) == 1
        assert attendees[0].user.display_name == "A"
