from __future__ import annotations

from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from ..common.datetime_utils import utcnow
from ..core.exceptions import ConflictError
from ..database.orm import UserRow
from ..database.sqlalchemy_base import db_session
from .model import ExternalClaims, User
from .repository import UserRepository


def row_to_user(row: UserRow) -> User:
    return User(
        user_id=int(row.id),
        email=row.email,
        display_name=row.display_name,
        password_hash=row.password_hash,
        subject=row.subject,
        profile_image_url=row.profile_image_url,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class SqlAlchemyUserRepository(UserRepository):
    def get_by_id(self, user_id: int) -> Optional[User]:
        with db_session() as session:
            row = session.get(UserRow, int(user_id))
            return row_to_user(row) if row else None

    def get_by_email(self, email: str) -> Optional[User]:
        with db_session() as session:
            row = session.execute(select(UserRow).where(UserRow.email == email)).scalar_one_or_none()
            return row_to_user(row) if row else None

    def create(self, *, email: str, display_name: str, password_hash: str) -> User:
        now = utcnow()
        row = UserRow(
            email=email,
            display_name=display_name,
            password_hash=password_hash,
            created_at=now,
            updated_at=now,
        )
        try:
            with db_session() as session:
                session.add(row)
                session.flush()
                return row_to_user(row)
        except IntegrityError:
            raise ConflictError("User already exists")

    def upsert_by_subject(self, claims: ExternalClaims) -> User:
        try:
            return self._upsert_by_subject(claims)
        except IntegrityError:
            if not self._subject_exists(claims.subject):
                raise ConflictError("Identity could not be stored")

        # A concurrent first request inserted the same subject; the retry updates it.
        try:
            return self._upsert_by_subject(claims)
        except IntegrityError:
            raise ConflictError("Identity could not be stored")

    def _subject_exists(self, subject: str) -> bool:
        with db_session() as session:
            found = session.execute(select(UserRow.id).where(UserRow.subject == subject)).first()
            return found is not None

    def _upsert_by_subject(self, claims: ExternalClaims) -> User:
        now = utcnow()
        with db_session() as session:
            email = claims.email
            if email:
                holder = session.execute(
                    select(UserRow.id).where(UserRow.email == email, UserRow.subject.is_distinct_from(claims.subject))
                ).first()
                if holder is not None:
                    # email already belongs to another account; keep this identity without it
                    email = None

            row = session.execute(select(UserRow).where(UserRow.subject == claims.subject)).scalar_one_or_none()
            if row is None:
                row = UserRow(subject=claims.subject, created_at=now)
                session.add(row)

            row.email = email
            row.display_name = claims.display_name or email or claims.subject
            row.profile_image_url = claims.profile_image_url
            row.updated_at = now
            session.flush()
            return row_to_user(row)
