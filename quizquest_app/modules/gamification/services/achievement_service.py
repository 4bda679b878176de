"""
Achievement Service
Evaluates the achievement catalog against a user's fresh stats.
"""
from functools import partial
from typing import Any, List

from flask import current_app

from quizquest_app.core.extensions import db
from quizquest_app.core.signals import achievement_unlocked
from .gamification_kernel import GamificationKernel
from ..logics.achievement_rules import AchievementContext, is_criteria_met
from ..schemas import AchievementDTO, StatsUpdateDTO


def to_dto(achievement, unlocked=False, unlocked_at=None) -> AchievementDTO:
    return AchievementDTO(
        id=achievement.id,
        name=achievement.name,
        description=achievement.description,
        criteria_type=achievement.criteria_type,
        criteria_value=achievement.criteria_value,
        badge_icon_url=achievement.badge_icon_url,
        unlocked=unlocked,
        unlocked_at=unlocked_at,
    )


class AchievementService:
    """Dịch vụ cấp phát thành tựu: unlocks achievements whose criteria are met."""

    @staticmethod
    def check_and_unlock(user_id: int, session: Any, stats: StatsUpdateDTO) -> List[AchievementDTO]:
        """
        Unlock every locked catalog entry whose criteria the user now meets.

        Already-unlocked achievements are skipped, so nothing is inserted or
        notified twice. Each unlock is committed before its notification
        signal fires. Database errors propagate to the caller.
        """
        catalog = GamificationKernel.list_achievements()
        if not catalog:
            return []

        unlocked_ids = GamificationKernel.get_unlocked_achievement_ids(user_id)
        context = AchievementContext(
            total_xp=stats.total_xp,
            longest_streak=stats.longest_streak,
            session=session,
            count_completed_quizzes=partial(GamificationKernel.count_completed_sessions, user_id),
            count_questions_answered=partial(GamificationKernel.count_question_logs, user_id),
        )

        newly_unlocked = []
        for achievement in catalog:
            if achievement.id in unlocked_ids:
                continue

            if not is_criteria_met(achievement.criteria_type, achievement.criteria_value, context):
                continue

            record = GamificationKernel.unlock_achievement(user_id, achievement.id)
            if record is None:
                continue
            db.session.commit()
            unlocked_ids.add(achievement.id)

            achievement_unlocked.send(
                current_app._get_current_object(),
                user_id=user_id,
                achievement=achievement,
            )
            current_app.logger.info(f"[Gamification] Achievement unlocked for user {user_id}: {achievement.name}")
            newly_unlocked.append(
                to_dto(achievement, unlocked=True,
                       unlocked_at=record.unlocked_at.isoformat() if record.unlocked_at else None)
            )

        return newly_unlocked

    @staticmethod
    def get_catalog_for_user(user_id: int) -> List[AchievementDTO]:
        """Whole catalog with the user's unlock state."""
        unlocked = {ua.achievement_id: ua for ua in GamificationKernel.get_user_achievements(user_id)}
        result = []
        for achievement in GamificationKernel.list_achievements():
            record = unlocked.get(achievement.id)
            result.append(to_dto(
                achievement,
                unlocked=record is not None,
                unlocked_at=record.unlocked_at.isoformat() if record and record.unlocked_at else None,
            ))
        return result
