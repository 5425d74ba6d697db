from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping, Optional

from ..common.datetime_utils import to_iso


@dataclass(frozen=True)
class User:
    """Domain entity: a club member.

    Note: plain data object; `password_hash` never leaves the service layer
    (see `to_public_dict`).
    """

    user_id: int
    email: Optional[str]
    display_name: str
    password_hash: Optional[str] = None
    subject: Optional[str] = None
    profile_image_url: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class Registration:
    email: str
    password: str
    display_name: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None


@dataclass(frozen=True)
class ExternalClaims:
    """Profile fields taken from a verified identity assertion."""

    subject: str
    email: Optional[str] = None
    display_name: Optional[str] = None
    profile_image_url: Optional[str] = None

    @classmethod
    def from_mapping(cls, claims: Mapping[str, Any]) -> "ExternalClaims":
        given = (claims.get("given_name") or claims.get("first_name") or "").strip()
        family = (claims.get("family_name") or claims.get("last_name") or "").strip()
        name = claims.get("name") or " ".join(p for p in (given, family) if p) or None
        return cls(
            subject=str(claims["sub"]),
            email=claims.get("email"),
            display_name=name,
            profile_image_url=claims.get("picture") or claims.get("profile_image_url"),
        )


def to_public_dict(user: User) -> dict:
    return {
        "id": user.user_id,
        "email": user.email,
        "displayName": user.display_name,
        "profileImageUrl": user.profile_image_url,
        "createdAt": to_iso(user.created_at),
        "updatedAt": to_iso(user.updated_at),
    }
