from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .books.api_controller import register as register_books_api
from .books.controller import register as register_books
from .borrowing.api_controller import register as register_borrowing_api
from .borrowing.controller import register as register_borrowing
from .common.web import register_error_handlers, register_template_helpers
from .container import Container, build_container
from .database.bootstrap import apply_schema, apply_seed_sql, list_tables
from .employee_shifts.api_controller import register as register_employee_shifts_api
from .employees.api_controller import register as register_employees_api
from .employees.controller import register as register_employees
from .home.controller import register as register_home
from .members.api_controller import register as register_members_api
from .members.controller import register as register_members
from .shifts.api_controller import register as register_shifts_api
from .shifts.controller import register as register_shifts
from .users.controller import register as register_users

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parents[3]


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(container: Optional[Container] = None) -> Flask:
    """Application factory.

    Passing a ready ``container`` skips every database step (tests wire
    in-memory repositories this way).
    """

    load_dotenv(override=False)
    app = Flask(__name__, template_folder="../../../templates", static_folder="../../../static")

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["MAX_CONTENT_LENGTH"] = int(getattr(settings, "MAX_UPLOAD_BYTES", 10 * 1024 * 1024))

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
            apply_schema(db_config, schema_path=PROJECT_ROOT / "database" / "schema.sql")
            logger.info("Schema ready (tables=%d)", len(list_tables(db_config)))
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            apply_seed_sql(db_config, seed_path=PROJECT_ROOT / "database" / "seed.sql")
            logger.info("Demo seed ready")

        upload_root = getattr(settings, "UPLOAD_ROOT", None) or app.static_folder
        container = build_container(db_config=db_config, upload_root=upload_root)

    admin_email = getattr(settings, "ADMIN_EMAIL", "")
    if admin_email:
        container.admin_service.ensure_admin_user(admin_email, getattr(settings, "ADMIN_PASSWORD", ""))

    app.extensions["container"] = container

    register_error_handlers(app)
    register_template_helpers(app)
    register_home(app, container)
    register_users(app, container)
    register_books(app, container)
    register_members(app, container)
    register_employees(app, container)
    register_shifts(app, container)
    register_borrowing(app, container)
    register_books_api(app, container)
    register_members_api(app, container)
    register_employees_api(app, container)
    register_shifts_api(app, container)
    register_employee_shifts_api(app, container)
    register_borrowing_api(app, container)

    return app
