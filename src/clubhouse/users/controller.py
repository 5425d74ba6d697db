from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..auth.gate import build_login_required, current_user_id
from ..common.http import json_error, read_json_body
from ..container import Container
from ..core.exceptions import AuthenticationError, ConflictError, ValidationError
from .model import Registration, to_public_dict

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    provider = container.identity_provider
    login_required = build_login_required(provider)

    @app.route("/api/auth/user", methods=["GET"], endpoint="auth_user")
    @login_required
    def auth_user():
        try:
            user = container.user_service.get_user(current_user_id())
            if not user:
                return json_error("User not found", 404)
            return jsonify(to_public_dict(user))
        except Exception:
            logger.exception("Error fetching user")
            return json_error("Failed to fetch user", 500)

    if not provider.issues_sessions:
        # Credentials live with the external identity provider.
        return

    @app.route("/api/auth/login", methods=["POST"], endpoint="auth_login")
    def auth_login():
        body = read_json_body()
        email = body.get("email")
        password = body.get("password")
        if not isinstance(email, str) or not email.strip() or not isinstance(password, str) or not password:
            return json_error("Invalid login data", 400)

        try:
            user = container.auth_service.authenticate(email, password)
            provider.remember(user.user_id)
            return jsonify(to_public_dict(user))
        except AuthenticationError:
            return json_error("Invalid credentials", 401)
        except Exception:
            logger.exception("Login error")
            return json_error("Invalid login data", 400)

    @app.route("/api/auth/register", methods=["POST"], endpoint="auth_register")
    def auth_register():
        body = read_json_body()
        try:
            registration = Registration(
                email=body.get("email"),
                password=body.get("password"),
                display_name=body.get("displayName"),
                first_name=body.get("firstName"),
                last_name=body.get("lastName"),
            )
            user = container.auth_service.register(registration)
            provider.remember(user.user_id)
            return jsonify(to_public_dict(user)), 201
        except ConflictError:
            return json_error("User already exists", 400)
        except ValidationError:
            return json_error("Invalid registration data", 400)
        except Exception:
            logger.exception("Register error")
            return json_error("Invalid registration data", 400)

    @app.route("/api/auth/logout", methods=["POST"], endpoint="auth_logout")
    def auth_logout():
        try:
            provider.forget()
        except Exception:
            logger.exception("Logout error")
            return json_error("Could not log out", 500)
        return jsonify({"message": "Logged out successfully"})
