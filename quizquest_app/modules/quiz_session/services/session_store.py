# File: quizquest_app/modules/quiz_session/services/session_store.py
"""
Quiz Session Store
==================
Per-user cache of quiz sessions backed by the ``quiz_sessions`` table.

Writes go to the database first; the in-memory list is only changed after a
successful commit. Reads (``load_quiz_session`` and the active/assignment
lookups) never touch the database.
"""

import threading
from datetime import timezone
from typing import Any, Dict, List, Mapping, Optional

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from quizquest_app.core.error_handlers import NotFoundError, ValidationError
from quizquest_app.core.extensions import db
from quizquest_app.core.signals import quiz_session_completed
from quizquest_app.models import Question, QuizQuestionLog, QuizSession
from quizquest_app.modules.questions.schemas import StudyItem
from quizquest_app.utils.time_utils import utcnow
from ..config import QuizSessionConfig
from ..logics.session_filters import (
    filter_active_sessions,
    find_session,
    find_session_for_assignment,
)
from ..schemas import QuizSessionDTO, SessionUpdateResult

_registry_lock = threading.Lock()


def _study_items_to_json(items) -> List[Dict[str, Any]]:
    return [StudyItem.from_value(item).to_dict() for item in items or []]


def _as_utc(value):
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class QuizSessionStore:
    """Sessions of one user, newest first."""

    def __init__(self, user_id: int):
        self.user_id = user_id
        self._sessions: List[QuizSessionDTO] = []
        self._lock = threading.RLock()

    @property
    def sessions(self) -> List[QuizSessionDTO]:
        with self._lock:
            return list(self._sessions)

    def _commit(self, action: str):
        try:
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            current_app.logger.error(
                f"[QuizSession] Error {action} for user {self.user_id}: {e}", exc_info=True
            )
            raise

    def _get_row(self, session_id: int) -> QuizSession:
        row = QuizSession.query.filter_by(id=session_id, user_id=self.user_id).first()
        if row is None:
            raise NotFoundError('Quiz session not found', resource='quiz_session')
        return row

    def _replace(self, dto: QuizSessionDTO):
        with self._lock:
            for index, existing in enumerate(self._sessions):
                if existing.id == dto.id:
                    self._sessions[index] = dto
                    return
            self._sessions.insert(0, dto)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    def load_user_sessions(self) -> List[QuizSessionDTO]:
        """Replace the cached list with every session of the user, newest first."""
        rows = (
            QuizSession.query
            .filter_by(user_id=self.user_id)
            .order_by(QuizSession.created_at.desc(), QuizSession.id.desc())
            .all()
        )
        with self._lock:
            self._sessions = [QuizSessionDTO.from_model(row) for row in rows]
            return list(self._sessions)

    def create_quiz_session(self, data: Mapping[str, Any]) -> int:
        """Insert a session owned by this store's user and return its id."""
        row = QuizSession(
            user_id=self.user_id,
            assignment_id=data.get('assignment_id'),
            type=data.get('type') or QuizSessionConfig.DEFAULT_TYPE,
            title=data.get('title'),
            status=data.get('status') or QuizSession.STATUS_ACTIVE,
            study_items=_study_items_to_json(data.get('study_items')),
            current_question_index=data.get('current_question_index') or 0,
            total_points=data.get('total_points') or 0,
            max_points=data.get('max_points') or 0,
            estimated_minutes=data.get('estimated_minutes') or 0,
        )
        db.session.add(row)
        self._commit('creating quiz session')

        with self._lock:
            self._sessions.insert(0, QuizSessionDTO.from_model(row))
        current_app.logger.info(f"[QuizSession] Created session {row.id} for user {self.user_id}")
        return row.id

    def update_quiz_session(self, session_id: int, updates: Mapping[str, Any]) -> SessionUpdateResult:
        """
        Apply ``updates`` and commit. Unknown fields reject the whole update.

        When the update moves the session into ``completed`` (from any other
        status), ``completed_at`` is stamped unless given, the linked
        assignment is marked completed and ``quiz_session_completed`` is sent.
        Neither side effect can fail the update.
        """
        row = self._get_row(session_id)
        previous_status = row.status

        rejected = [key for key in updates if key not in QuizSessionConfig.UPDATABLE_FIELDS]
        if rejected:
            raise ValidationError(
                f"Field '{rejected[0]}' cannot be updated",
                errors={key: ['Not updatable.'] for key in rejected}
            )

        for key, value in updates.items():
            if key == 'study_items':
                value = _study_items_to_json(value)
            elif key == 'completed_at':
                value = _as_utc(value)
            setattr(row, key, value)

        if row.status not in QuizSession.STATUSES:
            db.session.rollback()
            raise ValidationError(f"Unknown status '{row.status}'", errors={'status': ['Invalid status.']})

        completing = (
            row.status == QuizSession.STATUS_COMPLETED
            and previous_status != QuizSession.STATUS_COMPLETED
        )
        if completing and updates.get('completed_at') is None:
            row.completed_at = utcnow()

        self._commit(f'updating quiz session {session_id}')

        rewards = None
        if completing:
            current_app.logger.info(f"[QuizSession] Session {session_id} completed by user {self.user_id}")
            self._complete_assignment(row)
            rewards = self._send_completed(row)

        dto = QuizSessionDTO.from_model(row)
        self._replace(dto)
        return SessionUpdateResult(session=dto, completed=completing, rewards=rewards)

    def delete_quiz_session(self, session_id: int) -> None:
        row = self._get_row(session_id)
        db.session.delete(row)
        self._commit(f'deleting quiz session {session_id}')

        with self._lock:
            self._sessions = [s for s in self._sessions if s.id != session_id]
        current_app.logger.info(f"[QuizSession] Deleted session {session_id} for user {self.user_id}")

    def record_answer(self, session_id: int, answer: Mapping[str, Any]) -> QuizQuestionLog:
        """
        Log one answered question and advance the session.

        When ``selected_answer`` is given for a known question, correctness
        and points are graded here; otherwise the posted values are kept.
        """
        row = self._get_row(session_id)
        if not row.is_open:
            raise ValidationError('Cannot answer a completed quiz session')

        is_correct = bool(answer.get('is_correct'))
        points = answer.get('points_earned') or 0

        question_id = answer.get('question_id')
        if question_id is not None:
            question = db.session.get(Question, question_id)
            if question is None:
                raise NotFoundError('Question not found', resource='question')
            if answer.get('selected_answer') is not None:
                is_correct = answer['selected_answer'] == question.correct_answer
                points = (question.points or 0) if is_correct else 0

        log = QuizQuestionLog(
            user_id=self.user_id,
            session_id=row.id,
            question_id=question_id,
            is_correct=is_correct,
            points_earned=points,
            time_spent_seconds=answer.get('time_spent_seconds') or 0,
        )
        db.session.add(log)
        row.total_points = (row.total_points or 0) + points
        row.current_question_index = (row.current_question_index or 0) + 1
        self._commit(f'recording answer for session {session_id}')

        self._replace(QuizSessionDTO.from_model(row))
        return log

    def get_question_logs(self, session_id: int) -> List[QuizQuestionLog]:
        row = self._get_row(session_id)
        return row.question_logs.order_by(QuizQuestionLog.id).all()

    # ------------------------------------------------------------------
    # Queries (in-memory only)
    # ------------------------------------------------------------------
    def load_quiz_session(self, session_id: int) -> Optional[QuizSessionDTO]:
        with self._lock:
            return find_session(self._sessions, session_id)

    def get_active_sessions_for_user(self, user_id: int) -> List[QuizSessionDTO]:
        with self._lock:
            return filter_active_sessions(self._sessions, user_id)

    def get_session_for_assignment(self, assignment_id: int, user_id: int) -> Optional[QuizSessionDTO]:
        with self._lock:
            return find_session_for_assignment(self._sessions, assignment_id, user_id)

    # ------------------------------------------------------------------
    # Completion side effects
    # ------------------------------------------------------------------
    def _complete_assignment(self, row: QuizSession):
        if not row.assignment_id:
            current_app.logger.debug(f"[QuizSession] No assignment linked to session {row.id}")
            return

        from quizquest_app.modules.assignments.interface import AssignmentsInterface

        try:
            AssignmentsInterface.check_and_mark_assignment_completed(row.assignment_id, self.user_id)
        except Exception as e:
            db.session.rollback()
            current_app.logger.error(
                f"[QuizSession] Failed to mark assignment {row.assignment_id} completed: {e}",
                exc_info=True
            )

    def _send_completed(self, row: QuizSession) -> Optional[Dict[str, Any]]:
        """Fire quiz_session_completed and return the first receiver result that carries rewards."""
        try:
            responses = quiz_session_completed.send(
                current_app._get_current_object(), user_id=self.user_id, session=row
            )
        except Exception as e:
            db.session.rollback()
            current_app.logger.error(f"[QuizSession] Completion listener failed: {e}", exc_info=True)
            return None

        for _receiver, result in responses:
            if result is not None and hasattr(result, 'to_dict'):
                return result.to_dict()
        return None


def get_store(user_id: int, app=None) -> QuizSessionStore:
    """Return the user's store, creating and loading it on first use."""
    app = app or current_app._get_current_object()
    with _registry_lock:
        stores = app.extensions.setdefault(QuizSessionConfig.STORE_EXTENSION_KEY, {})
        store = stores.get(user_id)
    if store is not None:
        return store

    # Load outside the registry lock; a concurrent loader for the same user may win.
    store = QuizSessionStore(user_id)
    store.load_user_sessions()
    with _registry_lock:
        return stores.setdefault(user_id, store)


def evict_store(user_id: int, app=None) -> bool:
    """Drop a user's cached store; the next get_store reloads from the database."""
    app = app or current_app._get_current_object()
    with _registry_lock:
        stores = app.extensions.get(QuizSessionConfig.STORE_EXTENSION_KEY, {})
        return stores.pop(user_id, None) is not None
