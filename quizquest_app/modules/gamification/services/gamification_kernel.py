"""
Gamification Kernel Service.

Provides Low-Level CRUD operations for gamification elements.
This layer deals directly with the database models (UserStats, Achievement,
UserAchievement) plus the aggregate counts achievement checks need.
It should NOT contain high-level business logic (rules for when to award).
"""

from datetime import date
from typing import List, Optional, Set

from sqlalchemy import func
from sqlalchemy.orm import joinedload

from quizquest_app.core.extensions import db
from quizquest_app.models import (
    Achievement,
    QuizQuestionLog,
    QuizSession,
    UserAchievement,
    UserStats,
)


class GamificationKernel:
    """Core database service for gamification entities."""

    @staticmethod
    def get_stats(user_id: int) -> Optional[UserStats]:
        return db.session.get(UserStats, user_id)

    @staticmethod
    def upsert_stats(
        user_id: int,
        total_xp: int,
        current_level: int,
        longest_streak: int,
        last_quiz_date: date
    ) -> UserStats:
        """Insert or overwrite the user's stats row (keyed by user_id)."""
        stats = db.session.get(UserStats, user_id)
        if stats is None:
            stats = UserStats(user_id=user_id)
            db.session.add(stats)

        stats.total_xp = total_xp
        stats.current_level = current_level
        stats.longest_streak = longest_streak
        stats.last_quiz_date = last_quiz_date
        return stats

    @staticmethod
    def get_completion_records(user_id: int) -> List[QuizSession]:
        """Completed sessions of a user, newest completion first."""
        return (
            QuizSession.query
            .filter_by(user_id=user_id, status=QuizSession.STATUS_COMPLETED)
            .order_by(QuizSession.completed_at.desc())
            .all()
        )

    @staticmethod
    def count_completed_sessions(user_id: int) -> int:
        return QuizSession.query.filter_by(
            user_id=user_id, status=QuizSession.STATUS_COMPLETED
        ).count()

    @staticmethod
    def count_question_logs(user_id: int) -> int:
        return QuizQuestionLog.query.filter_by(user_id=user_id).count()

    @staticmethod
    def sum_completed_minutes(user_id: int) -> int:
        total = db.session.query(func.sum(QuizSession.estimated_minutes)).filter(
            QuizSession.user_id == user_id,
            QuizSession.status == QuizSession.STATUS_COMPLETED,
        ).scalar()
        return int(total or 0)

    @staticmethod
    def list_achievements() -> List[Achievement]:
        return Achievement.query.order_by(Achievement.id).all()

    @staticmethod
    def get_unlocked_achievement_ids(user_id: int) -> Set[int]:
        rows = db.session.query(UserAchievement.achievement_id).filter_by(user_id=user_id).all()
        return {achievement_id for (achievement_id,) in rows}

    @staticmethod
    def unlock_achievement(user_id: int, achievement_id: int) -> Optional[UserAchievement]:
        """Record the unlock unless the user already has it."""
        existing = UserAchievement.query.filter_by(
            user_id=user_id, achievement_id=achievement_id
        ).first()
        if existing:
            return None

        user_achievement = UserAchievement(user_id=user_id, achievement_id=achievement_id)
        db.session.add(user_achievement)
        return user_achievement

    @staticmethod
    def get_user_achievements(user_id: int) -> List[UserAchievement]:
        return (
            UserAchievement.query
            .filter_by(user_id=user_id)
            .options(joinedload(UserAchievement.achievement))
            .order_by(UserAchievement.unlocked_at)
            .all()
        )
