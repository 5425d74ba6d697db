from __future__ import annotations

from enum import Enum


class IdentityMode(str, Enum):
    """Which identity provider a deployment runs with (never both)."""

    LOCAL = "local"
    EXTERNAL = "external"
