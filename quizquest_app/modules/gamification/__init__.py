"""Gamification module: XP, levels, streaks and achievements."""


def setup_module(app):
    """Connect the completion listener."""
    from .events import register_events

    register_events()
    app.logger.info("Gamification Module Initialized.")
