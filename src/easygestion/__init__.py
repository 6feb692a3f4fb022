"""EasyGestion: salon management API."""
from __future__ import annotations

import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask
from flask_cors import CORS
from flask_jwt_extended import JWTManager
from flask_wtf.csrf import CSRFProtect
from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError

from .settings import get_settings_module

csrf = CSRFProtect()


def _masked_db_target(uri: str) -> str:
    try:
        return make_url(uri).render_as_string(hide_password=True)
    except ArgumentError:
        return "<unparseable database uri>"


def create_app(settings_module: Optional[str] = None, overrides: Optional[dict] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, static_folder=None)

    settings_module = settings_module or get_settings_module()
    app.config.from_object(settings_module)
    if overrides:
        app.config.update(overrides)

    level = getattr(logging, str(app.config.get("LOG_LEVEL", "INFO")).upper(), logging.INFO)
    # app.logger is the "easygestion" logger, parent of every module logger
    app.logger.setLevel(level)
    app.logger.info("settings=%s db=%s", settings_module, _masked_db_target(app.config["SQLALCHEMY_DATABASE_URI"]))

    from .database.extensions import db

    db.init_app(app)
    jwt = JWTManager(app)
    csrf.init_app(app)
    CORS(
        app,
        resources={r"/api/*": {"origins": app.config.get("CORS_ORIGINS") or []}},
        supports_credentials=True,
    )

    from .container import build_container
    from .database.bootstrap import ensure_superadmin, init_schema, list_tables, seed_default_packages
    from .web.errors import register_error_handlers, register_jwt_handlers

    container = build_container(config=app.config)
    app.extensions["easygestion.container"] = container

    with app.app_context():
        if app.config.get("AUTO_INIT_DB"):
            init_schema()
            app.logger.info("schema ready (tables=%d)", len(list_tables()))
        if app.config.get("AUTO_SEED_DB"):
            created = seed_default_packages()
            password = app.config.get("SUPERADMIN_PASSWORD")
            ensure_superadmin(
                username=app.config["SUPERADMIN_USERNAME"],
                email=app.config["SUPERADMIN_EMAIL"],
                password_hash=container.password_hasher.hash(password) if password else None,
            )
            app.logger.info("seed ready (new packages=%d)", created)

    register_error_handlers(app)
    register_jwt_handlers(jwt, container.users_repo)

    from .admin_charges.controller import register as register_admin_charges
    from .alerts.controller import register as register_alerts
    from .analytics.controller import register as register_analytics
    from .expenses.controller import register as register_expenses
    from .goals.controller import register as register_goals
    from .packages.controller import register as register_packages
    from .payroll.controller import register as register_salaries
    from .receipts.controller import register as register_receipts
    from .sales.controller import register as register_sales
    from .users.controller import register as register_users
    from .web.frontend import register as register_frontend

    register_users(app, container)
    register_packages(app, container)
    register_sales(app, container)
    register_receipts(app, container)
    register_expenses(app, container)
    register_salaries(app, container)
    register_admin_charges(app, container)
    register_analytics(app, container)
    register_goals(app, container)
    register_alerts(app, container)
    register_frontend(app, container)

    return app
