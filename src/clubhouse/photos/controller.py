from __future__ import annotations

import logging

from flask import Flask, jsonify, request, send_from_directory

from ..auth.gate import build_login_required, current_user_id
from ..common.http import json_error, read_json_body
from ..container import Container
from ..core.exceptions import NotAuthorizedOrNotFound, UpstreamIOError, ValidationError
from .model import photo_to_dict, photo_with_uploader_to_dict

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    login_required = build_login_required(container.identity_provider)

    @app.route("/uploads/<path:filename>", methods=["GET"], endpoint="uploaded_file")
    def uploaded_file(filename: str):
        # send_from_directory refuses paths that escape the upload folder
        return send_from_directory(container.upload_store.root, filename)

    @app.route("/api/photos", methods=["GET"], endpoint="list_photos")
    @login_required
    def list_photos():
        try:
            photos = container.photo_service.list_photos()
            return jsonify([photo_with_uploader_to_dict(p) for p in photos])
        except Exception:
            logger.exception("Error fetching photos")
            return json_error("Failed to fetch photos", 500)

    @app.route("/api/photos/mine", methods=["GET"], endpoint="list_my_photos")
    @login_required
    def list_my_photos():
        try:
            photos = container.photo_service.list_user_photos(current_user_id())
            return jsonify([photo_to_dict(p) for p in photos])
        except Exception:
            logger.exception("Error fetching own photos")
            return json_error("Failed to fetch photos", 500)

    @app.route("/api/photos", methods=["POST"], endpoint="upload_photo")
    @login_required
    def upload_photo():
        try:
            photo = container.photo_service.upload(
                request.files.get("photo"),
                uploader_id=current_user_id(),
                title=request.form.get("title"),
                description=request.form.get("description"),
            )
            return jsonify(photo_to_dict(photo)), 201
        except ValidationError as e:
            # messages are the fixed strings raised by PhotoService.validate_upload
            return json_error(str(e), 400)
        except UpstreamIOError:
            logger.exception("Could not store upload")
            return json_error("Failed to upload photo", 400)
        except Exception:
            logger.exception("Error uploading photo")
            return json_error("Failed to upload photo", 400)

    @app.route("/api/photos/<int:photo_id>", methods=["PUT"], endpoint="update_photo")
    @login_required
    def update_photo(photo_id: int):
        body = read_json_body()
        try:
            photo = container.photo_service.update_photo(
                photo_id,
                requester_id=current_user_id(),
                title=body.get("title"),
                description=body.get("description"),
            )
            return jsonify(photo_to_dict(photo))
        except (ValidationError, NotAuthorizedOrNotFound):
            return json_error("Failed to update photo", 400)
        except Exception:
            logger.exception("Error updating photo %s", photo_id)
            return json_error("Failed to update photo", 400)

    @app.route("/api/photos/<int:photo_id>", methods=["DELETE"], endpoint="delete_photo")
    @login_required
    def delete_photo(photo_id: int):
        try:
            container.photo_service.delete_photo(photo_id, requester_id=current_user_id())
            return "", 204
        except NotAuthorizedOrNotFound:
            return json_error("Failed to delete photo", 400)
        except Exception:
            logger.exception("Error deleting photo %s", photo_id)
            return json_error("Failed to delete photo", 400)
