"""
Tests for the per-user quiz session store.
"""
from unittest.mock import patch

import pytest
from sqlalchemy.exc import SQLAlchemyError

from quizquest_app import db
from quizquest_app.core.error_handlers import NotFoundError, ValidationError
from quizquest_app.models import Assignment, QuizQuestionLog, QuizSession
from quizquest_app.modules.assignments.interface import AssignmentsInterface
from quizquest_app.modules.quiz_session.services import session_store
from quizquest_app.modules.quiz_session.services.session_store import (
    QuizSessionStore,
    evict_store,
    get_store,
)
from quizquest_app.utils.time_utils import utc_today


@pytest.fixture
def user_id(make_user):
    return make_user('alice')


@pytest.fixture
def ctx(app):
    with app.app_context():
        yield


def make_assignment(user_id, title='Ruth week'):
    assignment = Assignment(user_id=user_id, title=title, study_items=[{'book': 'Ruth'}], date=utc_today())
    db.session.add(assignment)
    db.session.commit()
    return assignment.id


class TestStoreRegistry:

    def test_get_store_is_cached_per_user(self, ctx, user_id, make_user):
        other_id = make_user('bob')
        store = get_store(user_id)
        assert get_store(user_id) is store
        assert get_store(other_id) is not store

    def test_evict_store(self, ctx, user_id):
        store = get_store(user_id)
        assert evict_store(user_id) is True
        assert evict_store(user_id) is False
        assert get_store(user_id) is not store

    def test_get_store_loads_outside_registry_lock(self, ctx, user_id):
        seen = []
        original = QuizSessionStore.load_user_sessions

        def load(store):
            seen.append(session_store._registry_lock.locked())
            return original(store)

        with patch.object(QuizSessionStore, 'load_user_sessions', load):
            store = get_store(user_id)

        assert seen == [False]
        assert get_store(user_id) is store


class TestCreateAndLoad:

    def test_create_returns_id_and_caches_newest_first(self, ctx, user_id):
        store = QuizSessionStore(user_id)
        first = store.create_quiz_session({'title': 'First', 'study_items': [{'book': 'Ruth'}]})
        second = store.create_quiz_session({'title': 'Second', 'type': 'challenge'})

        assert [s.id for s in store.sessions] == [second, first]
        loaded = store.load_quiz_session(first)
        assert loaded.title == 'First'
        assert loaded.status == 'active'
        assert loaded.type == 'practice'
        assert loaded.study_items == [{'book': 'Ruth', 'chapter': None, 'verse': None}]
        assert db.session.get(QuizSession, second).type == 'challenge'

    def test_load_user_sessions_reads_only_own_rows(self, ctx, user_id, make_user):
        other_id = make_user('bob')
        db.session.add_all([
            QuizSession(user_id=user_id, title='mine'),
            QuizSession(user_id=other_id, title='theirs'),
        ])
        db.session.commit()

        sessions = QuizSessionStore(user_id).load_user_sessions()
        assert [s.title for s in sessions] == ['mine']

    def test_queries_read_memory_only(self, ctx, user_id):
        store = QuizSessionStore(user_id)
        store.load_user_sessions()

        row = QuizSession(user_id=user_id, title='created elsewhere')
        db.session.add(row)
        db.session.commit()

        assert store.load_quiz_session(row.id) is None
        assert store.get_active_sessions_for_user(user_id) == []

        store.load_user_sessions()
        assert store.load_quiz_session(row.id).title == 'created elsewhere'

    def test_active_sessions_and_assignment_lookup(self, ctx, user_id):
        assignment_id = make_assignment(user_id)
        store = QuizSessionStore(user_id)
        practice = store.create_quiz_session({'title': 'p'})
        linked = store.create_quiz_session({'type': 'assignment', 'assignment_id': assignment_id})
        store.update_quiz_session(practice, {'status': 'paused'})

        assert {s.id for s in store.get_active_sessions_for_user(user_id)} == {practice, linked}
        assert store.get_active_sessions_for_user(user_id + 100) == []
        assert store.get_session_for_assignment(assignment_id, user_id).id == linked
        assert store.get_session_for_assignment(assignment_id + 1, user_id) is None


class TestUpdate:

    def test_plain_update(self, ctx, user_id):
        store = QuizSessionStore(user_id)
        session_id = store.create_quiz_session({'title': 'Quiz'})

        result = store.update_quiz_session(session_id, {'current_question_index': 3, 'total_points': 20})

        assert result.completed is False
        assert result.rewards is None
        assert result.session.current_question_index == 3
        assert store.load_quiz_session(session_id).total_points == 20
        assert db.session.get(QuizSession, session_id).total_points == 20

    def test_unknown_field_rejected(self, ctx, user_id):
        store = QuizSessionStore(user_id)
        session_id = store.create_quiz_session({})
        with pytest.raises(ValidationError):
            store.update_quiz_session(session_id, {'user_id': 999})

    def test_rejected_update_leaves_no_pending_changes(self, ctx, user_id):
        store = QuizSessionStore(user_id)
        session_id = store.create_quiz_session({'title': 'orig'})
        with pytest.raises(ValidationError):
            store.update_quiz_session(session_id, {'title': 'changed', 'user_id': 999})

        # an unrelated commit must not flush the rejected title
        store.create_quiz_session({'title': 'next'})
        db.session.expire_all()

        assert db.session.get(QuizSession, session_id).title == 'orig'
        assert store.load_quiz_session(session_id).title == 'orig'

    def test_missing_or_foreign_session(self, ctx, user_id, make_user):
        other_store = QuizSessionStore(make_user('bob'))
        foreign_id = other_store.create_quiz_session({})

        store = QuizSessionStore(user_id)
        with pytest.raises(NotFoundError):
            store.update_quiz_session(foreign_id, {'title': 'hijack'})
        with pytest.raises(NotFoundError):
            store.update_quiz_session(12345, {'title': 'x'})

    def test_database_failure_propagates_and_cache_is_untouched(self, ctx, user_id):
        store = QuizSessionStore(user_id)
        session_id = store.create_quiz_session({'title': 'Before'})

        with patch.object(db.session, 'commit', side_effect=SQLAlchemyError('disk full')):
            with pytest.raises(SQLAlchemyError):
                store.update_quiz_session(session_id, {'title': 'After'})

        assert store.load_quiz_session(session_id).title == 'Before'

    def test_completion_sets_completed_at(self, ctx, user_id):
        store = QuizSessionStore(user_id)
        session_id = store.create_quiz_session({'estimated_minutes': 10})

        result = store.update_quiz_session(session_id, {'status': 'completed'})

        assert result.completed is True
        assert result.session.completed_at is not None
        assert store.get_active_sessions_for_user(user_id) == []

    def test_completion_marks_assignment_completed(self, ctx, user_id):
        assignment_id = make_assignment(user_id)
        store = QuizSessionStore(user_id)
        session_id = store.create_quiz_session({'type': 'assignment', 'assignment_id': assignment_id})

        store.update_quiz_session(session_id, {'status': 'completed'})

        assignment = db.session.get(Assignment, assignment_id)
        assert assignment.completed is True
        assert assignment.completed_at is not None

    def test_assignment_failure_does_not_block_completion(self, ctx, user_id):
        assignment_id = make_assignment(user_id)
        store = QuizSessionStore(user_id)
        session_id = store.create_quiz_session({'type': 'assignment', 'assignment_id': assignment_id})

        with patch.object(AssignmentsInterface, 'check_and_mark_assignment_completed',
                          side_effect=RuntimeError('boom')):
            result = store.update_quiz_session(session_id, {'status': 'completed'})

        assert result.completed is True
        assert db.session.get(QuizSession, session_id).status == 'completed'
        assert db.session.get(Assignment, assignment_id).completed is False


class TestAnswersAndDelete:

    def test_record_answer_advances_session(self, ctx, user_id, seeded_questions):
        store = QuizSessionStore(user_id)
        session_id = store.create_quiz_session({'max_points': 20})

        right = store.record_answer(session_id, {'question_id': seeded_questions[0], 'selected_answer': 'A',
                                                 'time_spent_seconds': 12})
        wrong = store.record_answer(session_id, {'question_id': seeded_questions[1], 'selected_answer': 'A'})

        assert (right.is_correct, right.points_earned) == (True, 10)
        assert (wrong.is_correct, wrong.points_earned) == (False, 0)
        cached = store.load_quiz_session(session_id)
        assert cached.total_points == 10
        assert cached.current_question_index == 2

    def test_completed_session_rejects_answers(self, ctx, user_id):
        store = QuizSessionStore(user_id)
        session_id = store.create_quiz_session({'estimated_minutes': 10})
        store.update_quiz_session(session_id, {'status': 'completed'})

        with pytest.raises(ValidationError):
            store.record_answer(session_id, {'is_correct': True, 'points_earned': 5})

    def test_delete_removes_row_logs_and_cache(self, ctx, user_id):
        store = QuizSessionStore(user_id)
        session_id = store.create_quiz_session({})
        store.record_answer(session_id, {'is_correct': True, 'points_earned': 5})

        store.delete_quiz_session(session_id)

        assert store.load_quiz_session(session_id) is None
        assert db.session.get(QuizSession, session_id) is None
        assert QuizQuestionLog.query.filter_by(session_id=session_id).count() == 0

    def test_delete_missing_session(self, ctx, user_id):
        with pytest.raises(NotFoundError):
            QuizSessionStore(user_id).delete_quiz_session(999)
