"""
Reward Manager Service.

This service acts as the Event Listener for Gamification.
It subscribes to quiz_session_completed and orchestrates the stats and
achievement services. Failures are logged and rolled back, never raised:
a gamification fault must not fail the session update that triggered it.
"""

from flask import current_app

from quizquest_app.core.extensions import db
from quizquest_app.core.signals import quiz_session_completed
from .achievement_service import AchievementService
from .stats_service import StatsService
from ..schemas import GamificationResultDTO


class RewardManager:
    """Handles event-driven rewards."""

    @staticmethod
    def init_listeners():
        """Connect signal handlers."""
        quiz_session_completed.connect(RewardManager.on_quiz_session_completed)

    @staticmethod
    def on_quiz_session_completed(sender, **kwargs):
        """
        Handle quiz completion reward.
        Payload expected: user_id, session
        """
        user_id = kwargs.get('user_id')
        session = kwargs.get('session')
        if not user_id or session is None:
            return None
        return RewardManager.process_completed_session(user_id, session)

    @staticmethod
    def process_completed_session(user_id: int, session) -> GamificationResultDTO:
        """Update stats, then check achievements against the fresh stats."""
        try:
            stats = StatsService.apply_completed_session(user_id, session)
            unlocked = AchievementService.check_and_unlock(user_id, session, stats)
            return GamificationResultDTO(
                user_id=user_id,
                success=True,
                stats=stats,
                unlocked_achievements=unlocked,
            )
        except Exception as e:
            db.session.rollback()
            current_app.logger.error(
                f"[Gamification] Error processing completed session for user {user_id}: {e}",
                exc_info=True
            )
            return GamificationResultDTO(user_id=user_id, success=False, error=str(e))
