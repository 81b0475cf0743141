from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from .config import get_settings_module
from .container import build_container
from .core.exceptions import DomainError
from .storage.key_value import KeyValueStore

from .attendance.controller import register as register_attendance
from .classes.controller import register as register_classes
from .imports.controller import register as register_imports
from .reports.controller import register as register_reports
from .roster.controller import register as register_roster
from .students.controller import register as register_students

logger = logging.getLogger(__name__)


def create_app(settings_module: Optional[str] = None, *, store: Optional[KeyValueStore] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["MAX_CONTENT_LENGTH"] = int(getattr(settings, "MAX_UPLOAD_BYTES", 5 * 1024 * 1024))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    backend = getattr(settings, "STORAGE_BACKEND", "memory")
    storage_path = getattr(settings, "STORAGE_PATH", None)
    logger.info("settings=%s storage=%s path=%s", settings_module, backend, storage_path)

    container = build_container(storage_backend=backend, storage_path=storage_path, store=store)
    app.extensions["roster_container"] = container

    @app.errorhandler(DomainError)
    def domain_error(e: DomainError):
        return jsonify({"success": False, "message": str(e)}), 400

    register_roster(app, container)
    register_classes(app, container)
    register_students(app, container)
    register_attendance(app, container)
    register_imports(app, container)
    register_reports(app, container)

    return app
