from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .container import build_container, build_store
from .database.store import KeyValueStore
from .users.controller import register as register_users

logger = logging.getLogger(__name__)


def create_app(*, settings_module: Optional[str] = None, store: Optional[KeyValueStore] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    backend = getattr(settings, "STORAGE_BACKEND", "json")
    if store is None:
        store = build_store(
            backend,
            storage_path=getattr(settings, "STORAGE_PATH", None),
            db_config=getattr(settings, "DB_CONFIG", None),
            auto_init_db=bool(getattr(settings, "AUTO_INIT_DB", False)),
        )
    container = build_container(store=store, late_cutoff=getattr(settings, "LATE_CUTOFF", None))
    app.extensions["attendease"] = container

    # Runs on every start; only seeds an empty directory.
    container.auth_service.ensure_default_admin()
    logger.info("AttendEase ready (settings=%s, storage=%s)", settings_module, backend)

    register_users(app, container)
    register_attendance(app, container)

    return app
