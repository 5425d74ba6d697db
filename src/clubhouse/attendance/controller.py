from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..auth.gate import build_login_required, current_user_id
from ..common.http import json_error
from ..container import Container
from ..core.exceptions import ConflictError, NotAuthorizedOrNotFound
from .model import attendee_to_dict, attendee_with_user_to_dict

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    login_required = build_login_required(container.identity_provider)

    @app.route("/api/events/<int:event_id>/attendees", methods=["GET"], endpoint="list_attendees")
    @login_required
    def list_attendees(event_id: int):
        try:
            attendees = container.attendance_service.list_attendees(event_id)
            return jsonify([attendee_with_user_to_dict(a) for a in attendees])
        except Exception:
            logger.exception("Error fetching attendees for event %s", event_id)
            return json_error("Failed to fetch attendees", 500)

    @app.route("/api/events/<int:event_id>/attend", methods=["POST"], endpoint="attend_event")
    @login_required
    def attend_event(event_id: int):
        try:
            attendee = container.attendance_service.attend(event_id, user_id=current_user_id())
            return jsonify(attendee_to_dict(attendee)), 201
        except ConflictError:
            return json_error("Already attending this event", 400)
        except NotAuthorizedOrNotFound:
            return json_error("Failed to attend event", 400)
        except Exception:
            logger.exception("Error adding attendee to event %s", event_id)
            return json_error("Failed to attend event", 400)

    @app.route("/api/events/<int:event_id>/attend", methods=["DELETE"], endpoint="unattend_event")
    @login_required
    def unattend_event(event_id: int):
        try:
            container.attendance_service.unattend(event_id, user_id=current_user_id())
            return "", 204
        except Exception:
            logger.exception("Error removing attendee from event %s", event_id)
            return json_error("Failed to unattend event", 400)

    @app.route("/api/events/<int:event_id>/attending", methods=["GET"], endpoint="is_attending")
    @login_required
    def is_attending(event_id: int):
        try:
            attending = container.attendance_service.is_attending(event_id, current_user_id())
            return jsonify({"attending": attending})
        except Exception:
            logger.exception("Error checking attendance for event %s", event_id)
            return json_error("Failed to check attendance", 500)
