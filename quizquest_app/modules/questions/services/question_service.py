from typing import List, Sequence

from quizquest_app.models import Question
from quizquest_app.modules.access_control.services.plan_service import PlanService
from ..logics.question_filters import (
    calculate_total_questions_for_study_items,
    filter_questions_by_study_items,
    get_accessible_questions,
)
from ..schemas import StudyItem


class QuestionService:
    """Loads questions for study items and applies the tier filter."""

    @staticmethod
    def load_candidates(study_items: Sequence[StudyItem]) -> List[Question]:
        """Fetch every question in the books the study items mention."""
        books = {item.book for item in study_items}
        if not books:
            return []
        return (
            Question.query
            .filter(Question.book.in_(books))
            .order_by(Question.book, Question.chapter, Question.verse, Question.id)
            .all()
        )

    @classmethod
    def get_accessible_questions_for_user(cls, user, study_items: Sequence[StudyItem]) -> List[Question]:
        candidates = cls.load_candidates(study_items)
        matched = filter_questions_by_study_items(candidates, study_items)
        return get_accessible_questions(matched, PlanService.get_plan(user))

    @classmethod
    def count_accessible_questions(cls, user, study_items: Sequence[StudyItem]) -> int:
        candidates = cls.load_candidates(study_items)
        return calculate_total_questions_for_study_items(
            study_items, candidates, PlanService.get_plan(user)
        )
