from __future__ import annotations

import importlib
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .common.datetime_utils import parse_hhmm
from .container import Container, build_container
from .core.constants import DAY_CUTOFF, DEFAULT_GRACE_MINUTES, DEFAULT_TIMEZONE_OFFSET, LEAVES_PER_QUARTER
from .core.logging import configure_logging, get_logger
from .database.bootstrap import apply_schema, list_tables
from .leaves.controller import register as register_leaves

logger = get_logger(__name__)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.json.sort_keys = False

    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            schema_path = Path(__file__).resolve().parents[3] / "database" / "schema.sql"
            apply_schema(db_config, schema_path=schema_path)
            logger.info("schema ready (tables=%d)", len(list_tables(db_config)))

        raw_cutoff = getattr(settings, "DAY_CUTOFF", None)
        container = build_container(
            db_config=db_config,
            timezone_offset=getattr(settings, "TIMEZONE_OFFSET", DEFAULT_TIMEZONE_OFFSET),
            day_cutoff=parse_hhmm(raw_cutoff) if raw_cutoff else DAY_CUTOFF,
            leaves_per_quarter=int(getattr(settings, "LEAVES_PER_QUARTER", LEAVES_PER_QUARTER)),
            default_grace_minutes=int(getattr(settings, "DEFAULT_GRACE_MINUTES", DEFAULT_GRACE_MINUTES)),
        )

    register_attendance(app, container)
    register_leaves(app, container)

    return app
