from __future__ import annotations

import io

import pytest
from PIL import Image

from clubhouse.extensions import db
from clubhouse.main import create_app


@pytest.fixture
def upload_dir(tmp_path):
    return tmp_path / "uploads"


@pytest.fixture
def app(upload_dir):
    app = create_app("clubhouse.config.testing", UPLOAD_FOLDER=str(upload_dir))
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def make_client(app):
    """Each client has its own cookie jar, i.e. its own session."""
    return app.test_client


@pytest.fixture
def signed_up(make_client):
    def _signed_up(email: str, display_name: str, password: str = "secret1"):
        client = make_client()
        resp = client.post(
            "/api/auth/register",
            json={"email": email, "password": password, "displayName": display_name},
        )
        assert resp.status_code == 201, resp.get_json()
        return client, resp.get_json()

    return _signed_up


@pytest.fixture
def image_bytes():
    def _image_bytes(fmt: str = "PNG", *, exif_datetime: str | None = None) -> bytes:
        img = Image.new("RGB", (8, 8), "red")
        buf = io.BytesIO()
        if exif_datetime:
            exif = Image.Exif()
            exif[306] = exif_datetime
            img.save(buf, format=fmt, exif=exif)
        else:
            img.save(buf, format=fmt)
        return buf.getvalue()

    return _image_bytes
