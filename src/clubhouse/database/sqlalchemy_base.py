from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.orm import Session

from ..extensions import db


@contextmanager
def db_session() -> Iterator[Session]:
    """Run one unit of work: commit on success, roll back and re-raise on failure."""
    session = db.session
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
