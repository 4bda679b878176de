from typing import Any, Sequence

from .schemas import QuestionCountDTO, StudyItem
from .services.question_service import QuestionService
from quizquest_app.modules.access_control.interface import AccessControlInterface
from quizquest_app.utils.formatters import format_study_items_for_assignment


def count_questions_for_user(user, study_items: Sequence[Any]) -> QuestionCountDTO:
    """Public API: how many questions a user's plan can see for some study items."""
    items = [StudyItem.from_value(item) for item in study_items or []]
    return QuestionCountDTO(
        plan=AccessControlInterface.get_plan(user),
        total_questions=QuestionService.count_accessible_questions(user, items),
        study_items_label=format_study_items_for_assignment(items),
    )
