from __future__ import annotations

import logging
from typing import Any, Optional

from dotenv import load_dotenv
from flask import Flask
from flask_cors import CORS

from config import load_settings

from .attendance.controller import register as register_attendance
from .container import Container, build_container

LOG_FORMAT = "%(asctime)s %(levelname)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=getattr(logging, str(level).upper(), logging.INFO), format=LOG_FORMAT)


def create_app(settings: Optional[Any] = None, *, container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, template_folder="../../../templates")

    if settings is None:
        settings = load_settings()
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["PORT"] = int(getattr(settings, "PORT", 5000))
    app.config["HOST"] = getattr(settings, "HOST", "127.0.0.1")
    app.config["EXPORT_FILENAME"] = getattr(settings, "EXPORT_FILENAME", "Attendance.xlsx")
    app.config["PORTAL_TITLE"] = getattr(settings, "PORTAL_TITLE", "Attendance Portal")

    CORS(app)

    if container is None:
        container = build_container(settings)

    register_attendance(app, container)

    logging.getLogger(__name__).info(
        "Attendance portal ready (%d participants, log policy %s)",
        len(container.store),
        type(container.log_strategy).__name__,
    )
    return app
