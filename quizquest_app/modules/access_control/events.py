from flask import current_app
from .signals import access_denied, plan_changed


def on_access_denied(sender, user_id=None, key=None, **kwargs):
    current_app.logger.info(f"[AccessControl] Access denied for user {user_id}: {key}")


def on_plan_changed(sender, user_id=None, old_plan=None, new_plan=None, **kwargs):
    """Drop the user's cached quiz sessions so plan-dependent data reloads."""
    from quizquest_app.modules.quiz_session.interface import QuizSessionInterface

    try:
        QuizSessionInterface.evict_store(user_id)
    except Exception as e:
        current_app.logger.error(f"Failed to evict session cache for user {user_id}: {e}")


def register_events():
    """Connect signals."""
    access_denied.connect(on_access_denied)
    plan_changed.connect(on_plan_changed)
