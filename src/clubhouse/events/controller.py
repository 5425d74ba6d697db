from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..auth.gate import build_login_required, current_user_id
from ..common.http import json_error, read_json_body
from ..container import Container
from ..core.exceptions import NotAuthorizedOrNotFound, ValidationError
from .model import event_to_dict

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    login_required = build_login_required(container.identity_provider)

    @app.route("/api/events", methods=["GET"], endpoint="list_events")
    @login_required
    def list_events():
        try:
            events = container.event_service.list_events()
            return jsonify([event_to_dict(e) for e in events])
        except Exception:
            logger.exception("Error fetching events")
            return json_error("Failed to fetch events", 500)

    @app.route("/api/events/<int:event_id>", methods=["GET"], endpoint="get_event")
    @login_required
    def get_event(event_id: int):
        try:
            event = container.event_service.get_event(event_id)
        except Exception:
            logger.exception("Error fetching event %s", event_id)
            return json_error("Failed to fetch event", 500)
        if not event:
            return json_error("Event not found", 404)
        return jsonify(event_to_dict(event))

    @app.route("/api/events", methods=["POST"], endpoint="create_event")
    @login_required
    def create_event():
        try:
            event = container.event_service.create_event(read_json_body(), creator_id=current_user_id())
            return jsonify(event_to_dict(event)), 201
        except ValidationError:
            return json_error("Failed to create event", 400)
        except Exception:
            logger.exception("Error creating event")
            return json_error("Failed to create event", 400)

    @app.route("/api/events/<int:event_id>", methods=["PUT"], endpoint="update_event")
    @login_required
    def update_event(event_id: int):
        try:
            event = container.event_service.update_event(
                event_id,
                read_json_body(),
                requester_id=current_user_id(),
            )
            return jsonify(event_to_dict(event))
        except (ValidationError, NotAuthorizedOrNotFound):
            return json_error("Failed to update event", 400)
        except Exception:
            logger.exception("Error updating event %s", event_id)
            return json_error("Failed to update event", 400)

    @app.route("/api/events/<int:event_id>", methods=["DELETE"], endpoint="delete_event")
    @login_required
    def delete_event(event_id: int):
        try:
            container.event_service.delete_event(event_id, requester_id=current_user_id())
            return "", 204
        except NotAuthorizedOrNotFound:
            return json_error("Failed to delete event", 400)
        except Exception:
            logger.exception("Error deleting event %s", event_id)
            return json_error("Failed to delete event", 400)
