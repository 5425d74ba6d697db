from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional


class IdentityProvider(ABC):
    """Strategy Pattern: how a request's authenticated identity is established."""

    #: whether login/register/logout endpoints make sense for this provider
    issues_sessions: bool = False

    @abstractmethod
    def resolve(self) -> Optional[int]:
        """Return the local user id for the current request, or None."""
        raise NotImplementedError

    def remember(self, user_id: int) -> None:
        raise NotImplementedError(f"{type(self).__name__} does not issue sessions")

    def forget(self) -> None:
        raise NotImplementedError(f"{type(self).__name__} does not issue sessions")
