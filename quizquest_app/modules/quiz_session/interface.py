# File: quizquest_app/modules/quiz_session/interface.py
"""
Quiz Session Interface
======================
Public API for other modules to interact with quiz sessions.
"""
from typing import Optional

from .schemas import QuizSessionDTO
from .services.session_store import evict_store, get_store


class QuizSessionInterface:
    """Public interface for quiz session operations."""

    @staticmethod
    def get_session_for_assignment(assignment_id: int, user_id: int) -> Optional[QuizSessionDTO]:
        """Open session the user already started for an assignment, if any."""
        return get_store(user_id).get_session_for_assignment(assignment_id, user_id)

    @staticmethod
    def evict_store(user_id: int) -> bool:
        """Forget the user's cached sessions."""
        return evict_store(user_id)
