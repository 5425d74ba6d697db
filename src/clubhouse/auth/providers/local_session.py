from __future__ import annotations

from typing import Optional

from flask import current_app, session

from ...core.constants import SESSION_USER_KEY
from .base import IdentityProvider


class LocalSessionIdentityProvider(IdentityProvider):
    """Server-side session (cookie holds only the session id) storing the user id."""

    issues_sessions = True

    def resolve(self) -> Optional[int]:
        user_id = session.get(SESSION_USER_KEY)
        if user_id is None:
            return None
        try:
            return int(user_id)
        except (TypeError, ValueError):
            return None

    def remember(self, user_id: int) -> None:
        session.clear()
        session[SESSION_USER_KEY] = int(user_id)
        session.permanent = True
        # new sid on every sign-in; the pre-login entry is dropped from the store
        current_app.session_interface.regenerate(session)

    def forget(self) -> None:
        # An emptied, modified session is deleted from the backing store on save.
        session.clear()
