from __future__ import annotations

import logging

from sqlalchemy import inspect

from ..extensions import db
from ..users.model import Registration
from ..users.repository import UserRepository
from ..users.service import AuthService
from . import orm  # noqa: F401  (registers the tables on db.metadata)

logger = logging.getLogger(__name__)

DEMO_USERS = (
    Registration(email="captain@club.local", password="captain123", display_name="Club Captain"),
    Registration(email="member@club.local", password="member123", display_name="Club Member"),
)


def init_schema() -> None:
    """Create missing tables (idempotent). Must run inside an app context."""
    db.create_all()


def list_tables() -> list[str]:
    return sorted(inspect(db.engine).get_table_names())


def ensure_demo_users(auth_service: AuthService, users: UserRepository) -> int:
    created = 0
    for registration in DEMO_USERS:
        if users.get_by_email(registration.email):
            continue
        auth_service.register(registration)
        created += 1
    logger.info("Demo users ready (%s created)", created)
    return created
