from typing import Any, Dict, List

from quizquest_app.utils.formatters import format_streak, format_total_time
from .config import GamificationConfig
from .logics.leveling import level_progress
from .schemas import AchievementDTO
from .services.achievement_service import AchievementService
from .services.gamification_kernel import GamificationKernel
from .services.stats_service import StatsService


def get_user_achievements(user_id: int) -> List[AchievementDTO]:
    """Catalog with the user's unlock state."""
    return AchievementService.get_catalog_for_user(user_id)


def get_user_progress(user_id: int) -> Dict[str, Any]:
    """
    Get gamification progress for a user.

    Returns:
        dict with: total_xp, current_level, level progress, current_streak,
        longest_streak, and display strings for streak and total study time.
    """
    stats = StatsService.get_stats_info(user_id)
    progress = level_progress(stats['total_xp'], GamificationConfig.xp_per_level())
    total_minutes = GamificationKernel.sum_completed_minutes(user_id)

    return {
        'total_xp': stats['total_xp'],
        'current_level': progress['level'],
        'xp_into_level': progress['xp_into_level'],
        'xp_for_next_level': progress['xp_for_next_level'],
        'progress_percent': progress['progress_percent'],
        'current_streak': stats['current_streak'],
        'longest_streak': max(stats['longest_streak'], stats['current_streak']),
        'last_quiz_date': stats['last_quiz_date'],
        'streak_label': format_streak(stats['current_streak']),
        'total_study_minutes': total_minutes,
        'total_study_time': format_total_time(total_minutes),
    }
