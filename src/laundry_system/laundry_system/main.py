from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .catalog.controller import register as register_catalog
from .common.logging_utils import setup_logging
from .container import MYSQL_BACKEND, build_container
from .core.constants import DEFAULT_BRAND_NAME
from .database.bootstrap import apply_schema, apply_seed_sql, ensure_demo_users, list_tables
from .notifications.controller import register as register_notifications
from .transactions.controller import register as register_transactions
from .users.controller import register as register_users

logger = logging.getLogger(__name__)

DATABASE_DIR = Path(__file__).resolve().parents[3] / "database"


def create_app(settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    db_config = getattr(settings, "DB_CONFIG", {})
    backend = getattr(settings, "STORE_BACKEND", MYSQL_BACKEND)

    logger.info("Starting with settings=%s backend=%s", settings_module, backend)

    if backend == MYSQL_BACKEND:
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=DATABASE_DIR / "schema.sql")
            logger.info("Schema ready (tables=%s)", len(list_tables(db_config)))
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            apply_seed_sql(db_config, seed_path=DATABASE_DIR / "seed.sql")
            ensure_demo_users(db_config)
            logger.info("Demo seed ready")

    container = build_container(
        db_config=db_config,
        backend=backend,
        brand=getattr(settings, "BRAND_NAME", DEFAULT_BRAND_NAME),
    )
    app.extensions["laundry_container"] = container

    register_users(app, container)
    register_catalog(app, container)
    register_transactions(app, container)
    register_notifications(app, container)

    return app
