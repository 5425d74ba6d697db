from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import IdentityMode
from ..core.exceptions import ValidationError
from ..users.service import UserService
from .providers.base import IdentityProvider
from .providers.external_claims import ExternalClaimsIdentityProvider
from .providers.local_session import LocalSessionIdentityProvider


@dataclass
class IdentityProviderFactory:
    """Factory Pattern: one provider per deployment, chosen by IDENTITY_MODE."""

    def for_mode(self, mode: str | IdentityMode, *, users: UserService) -> IdentityProvider:
        try:
            mode = IdentityMode(mode)
        except ValueError:
            raise ValidationError(f"Unknown IDENTITY_MODE: {mode!r}")

        if mode == IdentityMode.EXTERNAL:
            return ExternalClaimsIdentityProvider(users)
        return LocalSessionIdentityProvider()
