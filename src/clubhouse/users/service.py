from __future__ import annotations

import logging
from typing import Optional

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import optional_str, require_email, require_min_length
from ..core.constants import PASSWORD_MIN_LENGTH
from ..core.exceptions import AuthenticationError, ConflictError, ValidationError
from .model import ExternalClaims, Registration, User
from .repository import UserRepository

logger = logging.getLogger(__name__)


class AuthService:
    """Use cases for locally issued credentials: register and log in."""

    def __init__(self, users: UserRepository, *, hash_method: str = "scrypt"):
        self._users = users
        self._hash_method = hash_method

    @staticmethod
    def _display_name(registration: Registration, email: str) -> str:
        explicit = optional_str(registration.display_name)
        if explicit:
            return explicit
        parts = [optional_str(registration.first_name), optional_str(registration.last_name)]
        joined = " ".join(p for p in parts if p)
        return joined or email.split("@", 1)[0]

    def register(self, registration: Registration) -> User:
        email = require_email(registration.email)
        require_min_length(registration.password, "Password", PASSWORD_MIN_LENGTH)

        if self._users.get_by_email(email):
            raise ConflictError("User already exists")

        password_hash = generate_password_hash(registration.password, method=self._hash_method)
        user = self._users.create(
            email=email,
            display_name=self._display_name(registration, email),
            password_hash=password_hash,
        )
        logger.info("Registered user id=%s", user.user_id)
        return user

    def verify_password(self, email: str, password: str) -> Optional[User]:
        """Return the user when the secret matches, else None.

        Unknown email and wrong secret give the same answer so callers
        cannot enumerate accounts.
        """
        if not isinstance(email, str) or not isinstance(password, str):
            return None

        user = self._users.get_by_email(email.strip().lower())
        if not user or not user.password_hash:
            return None

        try:
            ok = check_password_hash(user.password_hash, password)
        except ValueError:
            # e.g. placeholder hashes or corrupted values
            ok = False

        return user if ok else None

    def authenticate(self, email: str, password: str) -> User:
        user = self.verify_password(email, password)
        if not user:
            raise AuthenticationError("Invalid credentials")
        return user


class UserService:
    def __init__(self, users: UserRepository):
        self._users = users

    def get_user(self, user_id: int) -> Optional[User]:
        return self._users.get_by_id(int(user_id))

    def sync_from_claims(self, claims: ExternalClaims) -> User:
        if not claims.subject:
            raise ValidationError("Identity assertion has no subject")
        return self._users.upsert_by_subject(claims)
