from __future__ import annotations

import re
from datetime import date, datetime, timezone
from typing import Any, Optional

from ..core.constants import TIME_FORMAT
from ..core.exceptions import ValidationError

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def require_non_empty(value: Any, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_min_length(value: Any, field_name: str, min_len: int) -> str:
    if not isinstance(value, str) or len(value) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters")
    return value


def require_email(value: Any, field_name: str = "Email") -> str:
    email = require_non_empty(value, field_name).lower()
    if not _EMAIL_RE.match(email):
        raise ValidationError(f"{field_name} is not a valid address")
    return email


def optional_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError("Expected a string value")
    value = value.strip()
    return value or None


def require_datetime(value: Any, field_name: str) -> datetime:
    """Accept an ISO-8601 date (YYYY-MM-DD) or datetime, with an optional trailing Z."""
    raw = require_non_empty(value, field_name)
    if raw.endswith("Z"):
        raw = raw[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(raw)
    except ValueError:
        try:
            parsed = datetime.combine(date.fromisoformat(raw), datetime.min.time())
        except ValueError:
            raise ValidationError(f"{field_name} is not a valid date")
    # Stored naive (UTC) so that ordering compares like with like
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def require_time_of_day(value: Any, field_name: str) -> str:
    raw = require_non_empty(value, field_name)
    try:
        datetime.strptime(raw, TIME_FORMAT)
    except ValueError:
        raise ValidationError(f"{field_name} must be HH:MM")
    return raw
