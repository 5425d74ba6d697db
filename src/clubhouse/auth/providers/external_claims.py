from __future__ import annotations

import logging
from typing import Optional

from flask_jwt_extended import get_jwt, verify_jwt_in_request
from flask_jwt_extended.exceptions import JWTExtendedException
from jwt.exceptions import PyJWTError

from ...core.exceptions import DomainError
from ...users.model import ExternalClaims
from ...users.service import UserService
from .base import IdentityProvider

logger = logging.getLogger(__name__)


class ExternalClaimsIdentityProvider(IdentityProvider):
    """Identity asserted by an external provider as a signed bearer token.

    The local user row is refreshed from the claims on every authenticated
    request.
    """

    def __init__(self, users: UserService):
        self._users = users

    def resolve(self) -> Optional[int]:
        try:
            verify_jwt_in_request()
        except (JWTExtendedException, PyJWTError) as e:
            logger.info("Rejected identity assertion: %s", type(e).__name__)
            return None

        claims = get_jwt()
        if not claims.get("sub"):
            return None

        try:
            user = self._users.sync_from_claims(ExternalClaims.from_mapping(claims))
        except DomainError:
            logger.exception("Could not sync identity for subject %s", claims.get("sub"))
            return None
        return user.user_id
