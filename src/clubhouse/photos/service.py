from __future__ import annotations

import logging
import os
from typing import Callable, Optional, Sequence

from werkzeug.datastructures import FileStorage

from ..common.validators import optional_str, require_non_empty
from ..core.constants import ALLOWED_IMAGE_EXTENSIONS, ALLOWED_IMAGE_SUBTYPES, MAX_UPLOAD_BYTES
from ..core.exceptions import NotAuthorizedOrNotFound, ValidationError
from .exif import read_capture_date
from .model import Photo, PhotoMetadata, PhotoWithUploader
from .repository import PhotoRepository
from .storage import UploadStore

logger = logging.getLogger(__name__)


def _stream_size(upload: FileStorage) -> int:
    stream = upload.stream
    stream.seek(0, os.SEEK_END)
    size = stream.tell()
    stream.seek(0)
    return size


class PhotoService:
    """Use cases for the gallery.

    Upload: validate, write the file, then insert the row.
    Delete: check ownership, delete the row, then remove the file.
    """

    def __init__(
        self,
        photos: PhotoRepository,
        store: UploadStore,
        *,
        max_bytes: int = MAX_UPLOAD_BYTES,
        capture_date_reader: Callable = read_capture_date,
    ):
        self._photos = photos
        self._store = store
        self._max_bytes = int(max_bytes)
        self._read_capture_date = capture_date_reader

    @staticmethod
    def _extension_of(filename: str) -> str:
        _, ext = os.path.splitext(filename or "")
        return ext.lower().lstrip(".")

    def validate_upload(self, upload: Optional[FileStorage]) -> tuple[str, int]:
        """Return (extension, size) or raise ValidationError; touches nothing on disk."""
        if upload is None or not upload.filename:
            raise ValidationError("No file uploaded")

        ext = self._extension_of(upload.filename)
        mime = (upload.mimetype or "").lower()
        kind, _, subtype = mime.partition("/")
        if ext not in ALLOWED_IMAGE_EXTENSIONS or kind != "image" or subtype not in ALLOWED_IMAGE_SUBTYPES:
            raise ValidationError("Only image files are allowed")

        size = _stream_size(upload)
        if size > self._max_bytes:
            raise ValidationError("File too large")
        if size == 0:
            raise ValidationError("Uploaded file is empty")
        return ext, size

    def list_photos(self) -> Sequence[PhotoWithUploader]:
        return self._photos.list_with_uploader()

    def list_user_photos(self, user_id: int) -> Sequence[Photo]:
        return self._photos.list_for_uploader(int(user_id))

    def get_photo(self, photo_id: int) -> Optional[Photo]:
        return self._photos.get(int(photo_id))

    def upload(
        self,
        upload: Optional[FileStorage],
        *,
        uploader_id: int,
        title: Optional[str] = None,
        description: Optional[str] = None,
    ) -> Photo:
        ext, size = self.validate_upload(upload)

        stored = self._store.save(upload, extension=ext)
        metadata = PhotoMetadata(
            title=optional_str(title) or upload.filename,
            description=optional_str(description),
            filename=stored.filename,
            original_name=upload.filename,
            mime_type=upload.mimetype,
            size=size,
            date_taken=self._read_capture_date(stored.path),
        )

        try:
            photo = self._photos.create(metadata, uploaded_by=int(uploader_id))
        except Exception:
            self._store.remove(stored.filename)
            raise

        logger.info("Photo %s uploaded by user %s (%s bytes)", photo.photo_id, uploader_id, size)
        return photo

    def update_photo(
        self,
        photo_id: int,
        *,
        requester_id: int,
        title: Optional[str] = None,
        description: Optional[str] = None,
    ) -> Photo:
        changes = {}
        if title is not None:
            changes["title"] = require_non_empty(title, "Title")
        if description is not None:
            changes["description"] = optional_str(description)
        if not changes:
            raise ValidationError("No photo fields to update")

        photo = self._photos.update_owned(int(photo_id), changes, requester_id=int(requester_id))
        if photo is None:
            raise NotAuthorizedOrNotFound("Photo not found or not authorized")
        return photo

    def delete_photo(self, photo_id: int, *, requester_id: int) -> None:
        photo = self.get_photo(photo_id)
        if photo is None or photo.uploaded_by != int(requester_id):
            raise NotAuthorizedOrNotFound("Photo not found or not authorized")

        if not self._photos.delete_owned(int(photo_id), requester_id=int(requester_id)):
            raise NotAuthorizedOrNotFound("Photo not found or not authorized")

        self._store.remove(photo.filename)
        logger.info("Photo %s deleted by user %s", photo_id, requester_id)
