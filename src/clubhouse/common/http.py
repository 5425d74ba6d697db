from __future__ import annotations

import logging

from flask import Flask, jsonify, request
from werkzeug.exceptions import MethodNotAllowed, NotFound, RequestEntityTooLarge

from ..core.exceptions import Unauthenticated

logger = logging.getLogger(__name__)


def json_error(message: str, status: int):
    """Every failure crosses the API boundary as a static message only."""
    return jsonify({"message": message}), status


def read_json_body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(Unauthenticated)
    def handle_unauthenticated(_e: Unauthenticated):
        return json_error("Unauthorized", 401)

    @app.errorhandler(RequestEntityTooLarge)
    def handle_too_large(_e: RequestEntityTooLarge):
        return json_error("File too large", 400)

    @app.errorhandler(NotFound)
    def handle_not_found(e: NotFound):
        if request.path.startswith("/api/"):
            return json_error("Not found", 404)
        return e.get_response()

    @app.errorhandler(MethodNotAllowed)
    def handle_method_not_allowed(e: MethodNotAllowed):
        if request.path.startswith("/api/"):
            return json_error("Method not allowed", 405)
        return e.get_response()
