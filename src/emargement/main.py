from __future__ import annotations

import importlib
import logging
import os
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from .attendance.controller import register as register_attendance
from .config import get_settings_module, validate_runtime_config
from .container import Container, build_container
from .database.bootstrap import apply_schema, list_tables
from .sessions.controller import register as register_sessions
from .users.controller import register as register_users

logger = logging.getLogger(__name__)


def create_app(settings_module: Optional[str] = None, container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    validate_runtime_config(settings)

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app.secret_key = settings.SECRET_KEY
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["EXPOSE_STORE_ERRORS"] = bool(getattr(settings, "EXPOSE_STORE_ERRORS", False))

    if container is None:
        if getattr(settings, "AUTO_INIT_DB", False):
            apply_schema(settings.DB_CONFIG)
            logger.info("Schema ready (tables=%d)", len(list_tables(settings.DB_CONFIG)))
        container = build_container(settings)
        logger.info("settings=%s db=%s", settings_module, container.conn.config.describe())

    @app.route("/", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "Emargement API running"})

    register_users(app, container)
    register_sessions(app, container)
    register_attendance(app, container)

    return app


def run() -> None:
    app = create_app()
    app.run(host=os.getenv("HOST", "0.0.0.0"), port=int(os.getenv("PORT", "3000")))


if __name__ == "__main__":
    run()
