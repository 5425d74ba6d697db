from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence

from .model import Photo, PhotoMetadata, PhotoWithUploader


class PhotoRepository(Protocol):
    def list_with_uploader(self) -> Sequence[PhotoWithUploader]:
        """Newest upload first."""

        raise NotImplementedError

    def list_for_uploader(self, user_id: int) -> Sequence[Photo]:
        raise NotImplementedError

    def get(self, photo_id: int) -> Optional[Photo]:
        raise NotImplementedError

    def create(self, metadata: PhotoMetadata, *, uploaded_by: int) -> Photo:
        raise NotImplementedError

    def update_owned(self, photo_id: int, changes: Mapping[str, Any], *, requester_id: int) -> Optional[Photo]:
        """Same ownership rule as events: None when no row matched."""

        raise NotImplementedError

    def delete_owned(self, photo_id: int, *, requester_id: int) -> bool:
        raise NotImplementedError
