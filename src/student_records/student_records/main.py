from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from .attendance.controller import register as register_attendance
from .common.logging_utils import configure_logging
from .common.web import register_error_handlers
from .config import get_settings_module
from .container import build_container, build_storage
from .dashboard.controller import register as register_dashboard
from .grades.controller import register as register_grades
from .storage.base import KeyValueStorage
from .students.controller import register as register_students
from .users.controller import register as register_users

logger = logging.getLogger(__name__)


def create_app(*, storage: Optional[KeyValueStorage] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    logger.info(
        "settings=%s storage=%s",
        settings_module,
        "injected" if storage is not None else getattr(settings, "STORAGE_BACKEND", "memory"),
    )

    if storage is None:
        storage = build_storage(settings)
    container = build_container(storage=storage)

    if bool(getattr(settings, "SEED_ON_START", False)):
        container.store.generate_fake_data(int(getattr(settings, "FAKE_DATA_COUNT", 20)))

    app.extensions["student_records"] = container

    register_error_handlers(app)
    register_users(app, container)
    register_students(app, container)
    register_grades(app, container)
    register_attendance(app, container)
    register_dashboard(app, container)

    return app
