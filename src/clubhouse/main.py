from __future__ import annotations

import importlib
import logging
from typing import Optional

from cachelib import FileSystemCache, SimpleCache
from dotenv import load_dotenv
from flask import Flask

from .attendance.controller import register as register_attendance
from .common.http import register_error_handlers
from .common.log import configure_logging
from .config import get_settings_module
from .container import build_container
from .database.bootstrap import ensure_demo_users, init_schema, list_tables
from .events.controller import register as register_events
from .extensions import db, jwt, server_session
from .photos.controller import register as register_photos
from .users.controller import register as register_users

logger = logging.getLogger(__name__)


def _configure_session_backend(app: Flask) -> None:
    if app.config.get("SESSION_TYPE") != "cachelib" or app.config.get("SESSION_CACHELIB") is not None:
        return

    if app.config.get("SESSION_BACKEND") == "memory":
        app.config["SESSION_CACHELIB"] = SimpleCache()
    else:
        app.config["SESSION_CACHELIB"] = FileSystemCache(
            app.config["SESSION_FILE_DIR"],
            threshold=int(app.config.get("SESSION_FILE_THRESHOLD", 500)),
        )


def create_app(settings_module: Optional[str] = None, **overrides) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    app.config.from_object(importlib.import_module(settings_module))
    app.config.update(overrides)

    configure_logging(app)
    _configure_session_backend(app)

    db.init_app(app)
    jwt.init_app(app)
    server_session.init_app(app)

    container = build_container(config=app.config)
    app.extensions["clubhouse.container"] = container

    register_error_handlers(app)
    register_users(app, container)
    register_events(app, container)
    register_attendance(app, container)
    register_photos(app, container)

    logger.info(
        "settings=%s identity_mode=%s uploads=%s",
        settings_module,
        app.config.get("IDENTITY_MODE"),
        container.upload_store.root,
    )

    with app.app_context():
        if app.config.get("AUTO_INIT_DB"):
            init_schema()
            logger.info("schema ready (tables=%s)", len(list_tables()))
        if app.config.get("AUTO_SEED_DB"):
            ensure_demo_users(container.auth_service, container.users_repo)

    return app
