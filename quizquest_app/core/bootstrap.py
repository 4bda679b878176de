"""Bootstrap helpers for configuring the Flask application."""

from __future__ import annotations

from flask import Flask

from .error_handlers import error_response, register_error_handlers
from .extensions import db, login_manager
from .logging_config import setup_logging
from .module_registry import register_default_modules


def configure_logging(app: Flask) -> None:
    """Configure the package logger, which is also ``app.logger``."""

    setup_logging(
        app,
        log_level=app.config.get("LOG_LEVEL", "INFO"),
        log_dir=app.config.get("LOG_DIR"),
        json_format=app.config.get("LOG_JSON", False),
        to_file=app.config.get("LOG_TO_FILE", True),
    )


def register_extensions(app: Flask) -> None:
    """Initialize shared extensions with the Flask app instance."""

    db.init_app(app)
    login_manager.init_app(app)

    @login_manager.user_loader
    def load_user(user_id: str):
        from ..models import User

        return db.session.get(User, int(user_id))

    @login_manager.unauthorized_handler
    def unauthorized():
        return error_response("Authentication required", "UNAUTHENTICATED", 401)


def register_blueprints(app: Flask) -> None:
    """Register error handlers and all default blueprints with the app."""

    register_error_handlers(app)
    register_default_modules(app)


def initialize_database(app: Flask) -> None:
    """Create database tables and ensure the achievement catalog exists."""

    from . import gamification_seeds

    db.create_all()

    if app.config.get("SEED_ACHIEVEMENTS", True):
        created = gamification_seeds.seed_achievements()
        if created:
            app.logger.info("Seeded %d achievements.", created)
        else:
            app.logger.info("Achievement catalog already present, skipping seed.")
