"""
Question Filters - Pure functions for question selection.

This module contains ONLY pure Python logic.
NO database, NO Flask, NO model dependencies allowed.
Questions may be model rows, dicts or any object exposing
``book`` / ``chapter`` / ``verse`` / ``tier``.
"""
import logging
from typing import Any, Iterable, List, Sequence

from quizquest_app.modules.access_control.logics.policies import (
    PLAN_FREE,
    get_accessible_tiers,
    normalize_tier,
)
from ..schemas import StudyItem

logger = logging.getLogger(__name__)


def _attr(question: Any, name: str):
    if isinstance(question, dict):
        return question.get(name)
    return getattr(question, name, None)


def study_item_contains(item: StudyItem, question: Any) -> bool:
    """
    True when the locator covers the question.

    A book-only item covers the whole book, book + chapter covers the
    chapter, book + chapter + verse covers a single verse.
    """
    if _attr(question, 'book') != item.book:
        return False
    if item.chapter is None:
        return True
    if _attr(question, 'chapter') != item.chapter:
        return False
    if item.verse is None:
        return True
    return _attr(question, 'verse') == item.verse


def filter_questions_by_study_items(questions: Iterable[Any], study_items: Sequence[Any]) -> List[Any]:
    """Keep questions covered by at least one study item, preserving order."""
    items = [StudyItem.from_value(item) for item in (study_items or [])]
    if not items:
        return []
    return [q for q in questions if any(study_item_contains(item, q) for item in items)]


def get_accessible_questions(questions: Iterable[Any], user_plan: str = PLAN_FREE) -> List[Any]:
    """Keep questions whose tier is included in the plan's accessible tiers."""
    tiers = get_accessible_tiers(user_plan)
    return [q for q in questions if normalize_tier(_attr(q, 'tier')) in tiers]


def calculate_total_questions_for_study_items(
    study_items: Sequence[Any],
    questions: Sequence[Any],
    user_plan: str = PLAN_FREE,
) -> int:
    """
    Number of questions the plan can see for the given study items.

    Args:
        study_items: Locators selecting the question subset.
        questions: All available questions.
        user_plan: Subscription plan ('free', 'pro', 'enterprise').
    """
    logger.debug(
        "Counting questions: %d study items, %d questions available, plan=%s",
        len(study_items or []), len(questions), user_plan,
    )

    filtered = filter_questions_by_study_items(questions, study_items)
    accessible = get_accessible_questions(filtered, user_plan)

    logger.debug("Question count: %d matched, %d accessible", len(filtered), len(accessible))
    return len(accessible)
