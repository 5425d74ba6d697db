from __future__ import annotations

from dataclasses import dataclass

from .attendance.service import AttendanceService
from .attendance.sqlalchemy_attendance_repository import SqlAlchemyAttendanceRepository
from .auth.factory import IdentityProviderFactory
from .auth.providers.base import IdentityProvider
from .core.constants import MAX_UPLOAD_BYTES
from .events.service import EventService
from .events.sqlalchemy_event_repository import SqlAlchemyEventRepository
from .photos.service import PhotoService
from .photos.sqlalchemy_photo_repository import SqlAlchemyPhotoRepository
from .photos.storage import UploadStore
from .users.service import AuthService, UserService
from .users.sqlalchemy_user_repository import SqlAlchemyUserRepository


@dataclass(frozen=True)
class Container:
    users_repo: SqlAlchemyUserRepository
    events_repo: SqlAlchemyEventRepository
    attendance_repo: SqlAlchemyAttendanceRepository
    photos_repo: SqlAlchemyPhotoRepository
    upload_store: UploadStore

    auth_service: AuthService
    user_service: UserService
    event_service: EventService
    attendance_service: AttendanceService
    photo_service: PhotoService

    identity_provider: IdentityProvider


def build_container(*, config: dict) -> Container:
    users_repo = SqlAlchemyUserRepository()
    events_repo = SqlAlchemyEventRepository()
    attendance_repo = SqlAlchemyAttendanceRepository()
    photos_repo = SqlAlchemyPhotoRepository()
    upload_store = UploadStore(config["UPLOAD_FOLDER"])

    auth_service = AuthService(users_repo, hash_method=config.get("PASSWORD_HASH_METHOD", "scrypt"))
    user_service = UserService(users_repo)
    event_service = EventService(events_repo)
    attendance_service = AttendanceService(attendance_repo, events_repo)
    photo_service = PhotoService(
        photos_repo,
        upload_store,
        max_bytes=int(config.get("MAX_UPLOAD_BYTES", MAX_UPLOAD_BYTES)),
    )

    identity_provider = IdentityProviderFactory().for_mode(
        config.get("IDENTITY_MODE", "local"),
        users=user_service,
    )

    return Container(
        users_repo=users_repo,
        events_repo=events_repo,
        attendance_repo=attendance_repo,
        photos_repo=photos_repo,
        upload_store=upload_store,
        auth_service=auth_service,
        user_service=user_service,
        event_service=event_service,
        attendance_service=attendance_service,
        photo_service=photo_service,
        identity_provider=identity_provider,
    )
