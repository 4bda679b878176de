from typing import List

from flask import current_app

from quizquest_app.core.error_handlers import NotFoundError
from quizquest_app.core.extensions import db
from quizquest_app.models import Assignment
from quizquest_app.modules.gamification.logics.streak_logic import calculate_study_streak
from quizquest_app.modules.questions.schemas import StudyItem
from quizquest_app.utils.time_utils import utc_today, utcnow


class AssignmentService:
    """CRUD and completion tracking for dated study assignments."""

    @staticmethod
    def create_assignment(user_id: int, data) -> Assignment:
        assignment = Assignment(
            user_id=user_id,
            title=data['title'],
            study_items=[StudyItem.from_value(item).to_dict() for item in data.get('study_items') or []],
            date=data.get('date') or utc_today(),
        )
        db.session.add(assignment)
        db.session.commit()
        current_app.logger.info(f"[Assignments] Created assignment {assignment.id} for user {user_id}")
        return assignment

    @staticmethod
    def list_assignments(user_id: int) -> List[Assignment]:
        return (
            Assignment.query
            .filter_by(user_id=user_id)
            .order_by(Assignment.date.desc(), Assignment.id.desc())
            .all()
        )

    @staticmethod
    def get_assignment_for_user(assignment_id: int, user_id: int) -> Assignment:
        assignment = Assignment.query.filter_by(id=assignment_id, user_id=user_id).first()
        if assignment is None:
            raise NotFoundError('Assignment not found', resource='assignment')
        return assignment

    @staticmethod
    def check_and_mark_assignment_completed(assignment_id: int, user_id: int) -> bool:
        """
        Mark the assignment completed once.

        Returns True when this call completed it, False when it was already
        completed or does not belong to the user.
        """
        assignment = Assignment.query.filter_by(id=assignment_id, user_id=user_id).first()
        if assignment is None:
            current_app.logger.warning(
                f"[Assignments] Assignment {assignment_id} not found for user {user_id}"
            )
            return False
        if assignment.completed:
            return False

        assignment.completed = True
        assignment.completed_at = utcnow()
        db.session.commit()
        current_app.logger.info(f"[Assignments] Assignment {assignment_id} marked completed")
        return True

    @staticmethod
    def get_streak(user_id: int) -> int:
        """Consecutive days, ending today, with a completed assignment."""
        rows = Assignment.query.filter_by(user_id=user_id, completed=True).all()
        return calculate_study_streak(rows, date_fields=('date',))
