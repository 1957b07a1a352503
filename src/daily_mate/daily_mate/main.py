from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module, load_settings

from .calendar_grid.controller import register as register_calendar
from .container import Container, build_container
from .database.bootstrap import apply_schema, list_tables
from .stats.controller import register as register_stats
from .users.controller import register as register_users
from .workdays.controller import register as register_workdays
from .workplaces.controller import register as register_workplaces


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings = load_settings()
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.json.ensure_ascii = False
    app.logger.setLevel(getattr(settings, "LOG_LEVEL", logging.INFO))

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        app.logger.info(
            "settings=%s db=%s@%s:%s/%s",
            get_settings_module(),
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            schema_path = Path(__file__).resolve().parents[3] / "database" / "schema.sql"
            apply_schema(db_config, schema_path=schema_path)
            app.logger.info("schema ready (tables=%s)", len(list_tables(db_config)))

        container = build_container(db_config=db_config)

    register_users(app, container)
    register_workplaces(app, container)
    register_workdays(app, container)
    register_stats(app, container)
    register_calendar(app, container)

    @app.route("/health", endpoint="health")
    def health():
        return jsonify({"status": "ok"})

    return app
