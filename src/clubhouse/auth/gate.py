from __future__ import annotations

from functools import wraps

from flask import g

from ..core.exceptions import Unauthenticated
from .providers.base import IdentityProvider


def require_identity(provider: IdentityProvider) -> int:
    """Resolve the caller or fail with Unauthenticated (answered as 401)."""
    user_id = provider.resolve()
    if user_id is None:
        raise Unauthenticated("Unauthorized")
    g.user_id = user_id
    return user_id


def current_user_id() -> int:
    return int(g.user_id)


def build_login_required(provider: IdentityProvider):
    def login_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            require_identity(provider)
            return view(*args, **kwargs)

        return wrapper

    return login_required
