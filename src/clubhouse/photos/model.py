from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import to_iso
from ..users.model import User, to_public_dict


@dataclass(frozen=True)
class Photo:
    """Domain entity: an uploaded photo, mutable only by its uploader."""

    photo_id: int
    title: str
    filename: str
    original_name: str
    mime_type: str
    size: int
    uploaded_by: int
    description: Optional[str] = None
    date_taken: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class PhotoWithUploader:
    photo: Photo
    uploader: User


@dataclass(frozen=True)
class PhotoMetadata:
    """What the upload handling hands to the store; the store does no file I/O."""

    title: str
    filename: str
    original_name: str
    mime_type: str
    size: int
    description: Optional[str] = None
    date_taken: Optional[datetime] = None


def photo_to_dict(photo: Photo) -> dict:
    return {
        "id": photo.photo_id,
        "title": photo.title,
        "description": photo.description,
        "filename": photo.filename,
        "originalName": photo.original_name,
        "mimeType": photo.mime_type,
        "size": photo.size,
        "url": f"/uploads/{photo.filename}",
        "uploadedBy": photo.uploaded_by,
        "dateTaken": to_iso(photo.date_taken),
        "createdAt": to_iso(photo.created_at),
        "updatedAt": to_iso(photo.updated_at),
    }


def photo_with_uploader_to_dict(item: PhotoWithUploader) -> dict:
    out = photo_to_dict(item.photo)
    out["uploadedBy"] = to_public_dict(item.uploader)
    return out
