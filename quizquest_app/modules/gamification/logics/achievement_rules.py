"""
Achievement Rules - threshold checks per criteria type.

Pure logic: aggregate counts that need the database are supplied as
callables so each one is queried at most once per evaluation.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

logger = logging.getLogger(__name__)

TOTAL_QUIZZES_COMPLETED = 'total_quizzes_completed'
TOTAL_POINTS_EARNED = 'total_points_earned'
LONGEST_STREAK = 'longest_streak'
TOTAL_QUESTIONS_ANSWERED = 'total_questions_answered'
PERFECT_QUIZ = 'perfect_quiz'
SPEED_DEMON = 'speed_demon'

# Catalog types with no evaluation yet; they never unlock
PLACEHOLDER_TYPES = frozenset({
    'accuracy_book_ruth',
    'accuracy_book_esther',
    'accuracy_book_daniel',
    'accuracy_chapter',
    'accuracy_tier_free',
    'accuracy_tier_pro',
    'accuracy_tier_enterprise',
})


@dataclass
class AchievementContext:
    """Everything an achievement check may compare against."""
    total_xp: int
    longest_streak: int
    session: Any
    count_completed_quizzes: Callable[[], int]
    count_questions_answered: Callable[[], int]
    _cache: Dict[str, int] = field(default_factory=dict, repr=False)

    def _cached(self, key: str, loader: Callable[[], int]) -> int:
        if key not in self._cache:
            self._cache[key] = loader() or 0
        return self._cache[key]

    @property
    def completed_quizzes(self) -> int:
        return self._cached(TOTAL_QUIZZES_COMPLETED, self.count_completed_quizzes)

    @property
    def questions_answered(self) -> int:
        return self._cached(TOTAL_QUESTIONS_ANSWERED, self.count_questions_answered)


def _session_value(session: Any, name: str) -> int:
    if isinstance(session, dict):
        return session.get(name) or 0
    return getattr(session, name, 0) or 0


def _is_perfect(session: Any) -> bool:
    max_points = _session_value(session, 'max_points')
    return max_points > 0 and _session_value(session, 'total_points') == max_points


def _is_fast(session: Any, threshold: int) -> bool:
    # criteria_value is in minutes
    return _session_value(session, 'estimated_minutes') <= threshold


CRITERIA_CHECKS: Dict[str, Callable[[AchievementContext, int], bool]] = {
    TOTAL_QUIZZES_COMPLETED: lambda ctx, value: ctx.completed_quizzes >= value,
    TOTAL_POINTS_EARNED: lambda ctx, value: ctx.total_xp >= value,
    LONGEST_STREAK: lambda ctx, value: ctx.longest_streak >= value,
    TOTAL_QUESTIONS_ANSWERED: lambda ctx, value: ctx.questions_answered >= value,
    PERFECT_QUIZ: lambda ctx, value: _is_perfect(ctx.session),
    SPEED_DEMON: lambda ctx, value: _is_fast(ctx.session, value),
}


def is_criteria_met(criteria_type: str, criteria_value: Optional[int], context: AchievementContext) -> bool:
    """Dispatch on criteria type; unknown and placeholder types are never met."""
    check = CRITERIA_CHECKS.get(criteria_type)
    if check is None:
        if criteria_type in PLACEHOLDER_TYPES:
            logger.warning("Achievement criteria_type '%s' is not implemented yet.", criteria_type)
        else:
            logger.warning("Unknown achievement criteria_type '%s'.", criteria_type)
        return False
    return bool(check(context, criteria_value or 0))
