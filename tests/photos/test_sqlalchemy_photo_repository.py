from __future__ import annotations

from datetime import datetime

import pytest

from clubhouse.photos import sqlalchemy_photo_repository
from clubhouse.photos.model import PhotoMetadata
from clubhouse.photos.sqlalchemy_photo_repository import SqlAlchemyPhotoRepository
from clubhouse.users.sqlalchemy_user_repository import SqlAlchemyUserRepository


def _metadata(name: str) -> PhotoMetadata:
    return PhotoMetadata(
        title=name,
        filename=f"{name}.png",
        original_name=f"{name}.png",
        mime_type="image/png",
        size=10,
    )


@pytest.fixture
def created_at(monkeypatch):
    """Pin the insert timestamp so rows can be created out of time order."""
    clock = {"now": datetime(2025, 1, 1)}
    monkeypatch.setattr(sqlalchemy_photo_repository, "utcnow", lambda: clock["now"])
    return clock


def test_gallery_lists_newest_upload_first_with_uploader(app, created_at):
    with app.app_context():
        users = SqlAlchemyUserRepository()
        alice = users.create(email="alice@example.com", display_name="Alice", password_hash="x")
        bob = users.create(email="bob@example.com", display_name="Bob", password_hash="x")
        repo = SqlAlchemyPhotoRepository()

        created_at["now"] = datetime(2025, 3, 1)
        repo.create(_metadata("middle"), uploaded_by=alice.user_id)
        created_at["now"] = datetime(2025, 1, 1)
        repo.create(_metadata("oldest"), uploaded_by=bob.user_id)
        created_at["now"] = datetime(2025, 6, 1)
        repo.create(_metadata("newest"), uploaded_by=alice.user_id)

        listed = repo.list_with_uploader()

        assert [p.photo.title for p in listed] == ["newest", "middle", "oldest"]
        assert [p.uploader.display_name for p in listed] == ["Alice", "Alice", "Bob"]


def test_own_photos_newest_first(app, created_at):
    with app.app_context():
        users = SqlAlchemyUserRepository()
        alice = users.create(email="alice@example.com", display_name="Alice", password_hash="x")
        bob = users.create(email="bob@example.com", display_name="Bob", password_hash="x")
        repo = SqlAlchemyPhotoRepository()

        created_at["now"] = datetime(2025, 2, 1)
        repo.create(_metadata("feb"), uploaded_by=alice.user_id)
        created_at["now"] = datetime(2025, 5, 1)
        repo.create(_metadata("bob-may"), uploaded_by=bob.user_id)
        created_at["now"] = datetime(2025, 4, 1)
        repo.create(_metadata("apr"), uploaded_by=alice.user_id)

        assert [p.title for p in repo.list_for_uploader(alice.user_id)] == ["apr", "feb"]
