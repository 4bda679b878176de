"""
Event Handlers for Notification Module.

Listens to signals from other modules and creates notifications accordingly.
No other module needs to import NotificationService directly.
"""
from flask import current_app

from quizquest_app.core.extensions import db
from quizquest_app.core.signals import achievement_unlocked, stats_updated, user_registered


def on_achievement_unlocked(sender, **kwargs):
    """
    Expected kwargs:
        - user_id: int
        - achievement: Achievement
    """
    from .models import Notification
    from .services import NotificationService

    user_id = kwargs.get('user_id')
    achievement = kwargs.get('achievement')
    if not user_id or achievement is None:
        return

    try:
        NotificationService.create_notification(
            user_id=user_id,
            title=f"Achievement unlocked: {achievement.name}",
            message=achievement.description,
            type=Notification.TYPE_ACHIEVEMENT,
            meta_data={
                'achievement_id': achievement.id,
                'badge_icon_url': achievement.badge_icon_url,
            }
        )
        current_app.logger.debug(f"[Notification] Achievement notification for user {user_id}")
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"[Notification] Error creating achievement notification: {e}", exc_info=True)


def on_stats_updated(sender, **kwargs):
    """Notify only when the user reaches a new level."""
    from .models import Notification
    from .services import NotificationService

    user_id = kwargs.get('user_id')
    if not user_id or not kwargs.get('leveled_up'):
        return

    level = kwargs.get('current_level')
    try:
        NotificationService.create_notification(
            user_id=user_id,
            title=f"Level {level} reached!",
            message=f"You now have {kwargs.get('total_xp', 0)} XP. Keep going!",
            type=Notification.TYPE_LEVEL_UP,
            meta_data={'level': level}
        )
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"[Notification] Error in level-up notification: {e}", exc_info=True)


def on_user_registered(sender, user, **kwargs):
    """
    Send welcome notification to new users.
    """
    from .services import NotificationService

    try:
        NotificationService.create_notification(
            user_id=user.user_id,
            title="Welcome to QuizQuest!",
            message="Start your first quiz to begin your streak.",
        )
        current_app.logger.info(f"[Notification] Sent welcome notification to user {user.user_id}")
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"[Notification] Error sending welcome notification: {e}", exc_info=True)


def register_events():
    achievement_unlocked.connect(on_achievement_unlocked)
    stats_updated.connect(on_stats_updated)
    user_registered.connect(on_user_registered)
