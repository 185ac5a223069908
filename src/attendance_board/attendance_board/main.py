from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .database.bootstrap import ensure_storage_table
from .database.connection import connection_from_settings

from .container import Container, build_container
from .activity.controller import register as register_activity
from .attendance.controller import register as register_attendance
from .mapping.controller import register as register_mapping

logger = logging.getLogger(__name__)


def register_routes(app: Flask, container: Container) -> None:
    register_attendance(app, container)
    register_mapping(app, container)
    register_activity(app, container)


def create_app() -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    db_config = getattr(settings, "DB_CONFIG")
    monday_config = getattr(settings, "MONDAY_CONFIG")
    engine_config = getattr(settings, "ENGINE_CONFIG", {})

    if app.config["DEBUG"]:
        logger.info(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )

    if bool(getattr(settings, "AUTO_INIT_DB", False)):
        ensure_storage_table(connection_from_settings(db_config))

    container = build_container(db_config=db_config, monday_config=monday_config, engine_config=engine_config)
    # Column mapping is read once per session.
    container.mapping_service.load()

    register_routes(app, container)
    return app
