# File: quizquest_app/modules/gamification/services/stats_service.py
"""
Stats Service
=============
Recomputes XP, level and streak after a quiz session completes.
"""

from typing import Any

from flask import current_app

from quizquest_app.core.extensions import db
from quizquest_app.core.signals import stats_updated
from quizquest_app.utils.time_utils import utc_today
from .gamification_kernel import GamificationKernel
from ..config import GamificationConfig
from ..logics.leveling import calculate_level
from ..logics.streak_logic import calculate_study_streak
from ..schemas import StatsUpdateDTO


class StatsService:
    """Service for the per-user XP / level / streak record."""

    @staticmethod
    def apply_completed_session(user_id: int, session: Any) -> StatsUpdateDTO:
        """
        Add the session's points to the user's XP and refresh level and streak.

        XP only grows: the new total is the previous total plus the
        session's points. ``longest_streak`` keeps the running maximum.
        Commits the upsert; callers handle failures.
        """
        stats = GamificationKernel.get_stats(user_id)
        previous_total_xp = stats.total_xp if stats and stats.total_xp else 0
        previous_level = stats.current_level if stats and stats.current_level else 1
        previous_longest = stats.longest_streak if stats and stats.longest_streak else 0

        earned = max(0, getattr(session, 'total_points', 0) or 0)
        new_total_xp = previous_total_xp + earned
        new_level = calculate_level(new_total_xp, GamificationConfig.xp_per_level())

        today = utc_today()
        records = GamificationKernel.get_completion_records(user_id)
        current_streak = calculate_study_streak(records, today)
        new_longest = max(previous_longest, current_streak)

        GamificationKernel.upsert_stats(
            user_id=user_id,
            total_xp=new_total_xp,
            current_level=new_level,
            longest_streak=new_longest,
            last_quiz_date=today,
        )
        db.session.commit()

        result = StatsUpdateDTO(
            user_id=user_id,
            previous_total_xp=previous_total_xp,
            total_xp=new_total_xp,
            previous_level=previous_level,
            current_level=new_level,
            current_streak=current_streak,
            longest_streak=new_longest,
        )
        current_app.logger.info(
            f"[Gamification] Stats updated for user {user_id}: "
            f"xp={new_total_xp} level={new_level} streak={current_streak} longest={new_longest}"
        )

        stats_updated.send(
            current_app._get_current_object(),
            user_id=user_id,
            total_xp=new_total_xp,
            current_level=new_level,
            longest_streak=new_longest,
            leveled_up=result.leveled_up,
        )
        return result

    @staticmethod
    def get_stats_info(user_id: int) -> dict:
        """
        Get stats for UI display, with the live streak recomputed from
        completed sessions.
        """
        stats = GamificationKernel.get_stats(user_id)
        current_streak = calculate_study_streak(GamificationKernel.get_completion_records(user_id))

        if not stats:
            return {
                'total_xp': 0,
                'current_level': 1,
                'longest_streak': current_streak,
                'current_streak': current_streak,
                'last_quiz_date': None,
            }

        data = stats.to_dict()
        data['current_streak'] = current_streak
        return data
