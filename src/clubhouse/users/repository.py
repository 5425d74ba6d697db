from __future__ import annotations

from typing import Optional, Protocol

from .model import ExternalClaims, User


class UserRepository(Protocol):
    """Repository interface for User.

    Note: services depend on this interface, not on a concrete database.
    """

    def get_by_id(self, user_id: int) -> Optional[User]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[User]:
        raise NotImplementedError

    def create(self, *, email: str, display_name: str, password_hash: str) -> User:
        """Raises ConflictError when the email is already registered."""

        raise NotImplementedError

    def upsert_by_subject(self, claims: ExternalClaims) -> User:
        raise NotImplementedError
