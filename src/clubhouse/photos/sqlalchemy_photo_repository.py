from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from sqlalchemy import delete, select, update

from ..common.datetime_utils import utcnow
from ..database.orm import PhotoRow, UserRow
from ..database.sqlalchemy_base import db_session
from ..users.sqlalchemy_user_repository import row_to_user
from .model import Photo, PhotoMetadata, PhotoWithUploader
from .repository import PhotoRepository


def _to_photo(row: PhotoRow) -> Photo:
    return Photo(
        photo_id=int(row.id),
        title=row.title,
        description=row.description,
        filename=row.filename,
        original_name=row.original_name,
        mime_type=row.mime_type,
        size=int(row.size),
        uploaded_by=int(row.uploaded_by),
        date_taken=row.date_taken,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class SqlAlchemyPhotoRepository(PhotoRepository):
    def list_with_uploader(self) -> Sequence[PhotoWithUploader]:
        with db_session() as session:
            rows = session.execute(
                select(PhotoRow, UserRow)
                .join(UserRow, PhotoRow.uploaded_by == UserRow.id)
                .order_by(PhotoRow.created_at.desc(), PhotoRow.id.desc())
            ).all()
            return [PhotoWithUploader(photo=_to_photo(p), uploader=row_to_user(u)) for p, u in rows]

    def list_for_uploader(self, user_id: int) -> Sequence[Photo]:
        with db_session() as session:
            rows = session.execute(
                select(PhotoRow)
                .where(PhotoRow.uploaded_by == int(user_id))
                .order_by(PhotoRow.created_at.desc(), PhotoRow.id.desc())
            ).scalars()
            return [_to_photo(r) for r in rows]

    def get(self, photo_id: int) -> Optional[Photo]:
        with db_session() as session:
            row = session.get(PhotoRow, int(photo_id))
            return _to_photo(row) if row else None

    def create(self, metadata: PhotoMetadata, *, uploaded_by: int) -> Photo:
        now = utcnow()
        with db_session() as session:
            row = PhotoRow(
                title=metadata.title,
                description=metadata.description,
                filename=metadata.filename,
                original_name=metadata.original_name,
                mime_type=metadata.mime_type,
                size=int(metadata.size),
                uploaded_by=int(uploaded_by),
                date_taken=metadata.date_taken,
                created_at=now,
                updated_at=now,
            )
            session.add(row)
            session.flush()
            return _to_photo(row)

    def update_owned(self, photo_id: int, changes: Mapping[str, Any], *, requester_id: int) -> Optional[Photo]:
        with db_session() as session:
            result = session.execute(
                update(PhotoRow)
                .where(PhotoRow.id == int(photo_id), PhotoRow.uploaded_by == int(requester_id))
                .values(**dict(changes), updated_at=utcnow())
                .execution_options(synchronize_session=False)
            )
            if result.rowcount == 0:
                return None
            session.expire_all()
            row = session.get(PhotoRow, int(photo_id))
            return _to_photo(row) if row else None

    def delete_owned(self, photo_id: int, *, requester_id: int) -> bool:
        with db_session() as session:
            result = session.execute(
                delete(PhotoRow)
                .where(PhotoRow.id == int(photo_id), PhotoRow.uploaded_by == int(requester_id))
                .execution_options(synchronize_session=False)
            )
            return result.rowcount > 0
