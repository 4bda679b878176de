"""Notification module: in-app notification records."""


def setup_module(app):
    from .events import register_events

    register_events()
    app.logger.info("Notification Module Initialized.")
