from __future__ import annotations

import importlib
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .api.controller import register as register_api
from .container import Container, build_container
from .core.enums import SettingsBackend
from .core.logging import get_logger, setup_logging
from .database.bootstrap import apply_schema, ensure_database_exists, seed_default_settings

logger = get_logger(__name__)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    setup_logging(debug=app.config["DEBUG"], level=getattr(settings, "LOG_LEVEL", "INFO"))

    if container is None:
        backend = getattr(settings, "SETTINGS_BACKEND", SettingsBackend.MEMORY.value)
        db_config = getattr(settings, "DB_CONFIG", {})
        container = build_container(
            settings_backend=backend,
            db_config=db_config,
            default_timezone=getattr(settings, "DEFAULT_TIMEZONE", None),
            slot_interval_minutes=int(getattr(settings, "SLOT_INTERVAL_MINUTES", 60)),
        )

        if container.conn is not None and bool(getattr(settings, "AUTO_INIT_DB", False)):
            ensure_database_exists(container.conn, str(db_config.get("database")))
            apply_schema(container.conn)
        if bool(getattr(settings, "AUTO_SEED_SETTINGS", False)):
            seed_default_settings(container.settings_store)

    logger.info(
        "app_started",
        settings=settings_module,
        timezone=container.clock.timezone_name(),
        store=type(container.settings_store).__name__,
    )

    register_api(app, container)
    return app
