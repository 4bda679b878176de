from flask import Blueprint, jsonify, request
from flask_login import login_required, current_user

from quizquest_app.core.error_handlers import NotFoundError
from quizquest_app.modules.access_control.interface import AccessControlInterface
from quizquest_app.core.extensions import db
from quizquest_app.models import Question
from quizquest_app.utils.formatters import format_seconds, format_total_time
from .logics.completion_stats import build_completion_stats
from .schemas import AnswerSchema, QuizSessionCreateSchema, QuizSessionUpdateSchema
from .services.session_store import get_store

quiz_session_bp = Blueprint('quiz_session', __name__, url_prefix='/api/quiz-sessions')


def _store():
    return get_store(current_user.user_id)


def _get_or_404(store, session_id):
    session = store.load_quiz_session(session_id)
    if session is None:
        raise NotFoundError('Quiz session not found', resource='quiz_session')
    return session


@quiz_session_bp.route('', methods=['GET'])
@login_required
def list_sessions():
    store = _store()
    if request.args.get('refresh', 'false').lower() in ('1', 'true', 'yes'):
        sessions = store.load_user_sessions()
    else:
        sessions = store.sessions
    return jsonify({
        'success': True,
        'sessions': [s.to_dict() for s in sessions],
        'total': len(sessions),
    })


@quiz_session_bp.route('', methods=['POST'])
@login_required
def create_session():
    data = QuizSessionCreateSchema().load(request.get_json(silent=True) or {})

    if data.get('assignment_id'):
        from quizquest_app.modules.assignments.interface import AssignmentsInterface
        AssignmentsInterface.get_assignment_for_user(data['assignment_id'], current_user.user_id)

    store = _store()
    session_id = store.create_quiz_session(data)
    return jsonify({
        'success': True,
        'session_id': session_id,
        'session': store.load_quiz_session(session_id).to_dict(),
    }), 201


@quiz_session_bp.route('/active', methods=['GET'])
@login_required
def list_active_sessions():
    sessions = _store().get_active_sessions_for_user(current_user.user_id)
    return jsonify({'success': True, 'sessions': [s.to_dict() for s in sessions]})


@quiz_session_bp.route('/assignment/<int:assignment_id>', methods=['GET'])
@login_required
def get_assignment_session(assignment_id):
    """Resume point for an assignment: the open session, or null."""
    session = _store().get_session_for_assignment(assignment_id, current_user.user_id)
    return jsonify({'success': True, 'session': session.to_dict() if session else None})


@quiz_session_bp.route('/<int:session_id>', methods=['GET'])
@login_required
def get_session(session_id):
    session = _get_or_404(_store(), session_id)
    return jsonify({'success': True, 'session': session.to_dict()})


@quiz_session_bp.route('/<int:session_id>', methods=['PATCH'])
@login_required
def update_session(session_id):
    updates = QuizSessionUpdateSchema().load(request.get_json(silent=True) or {})
    result = _store().update_quiz_session(session_id, updates)
    return jsonify({
        'success': True,
        'session': result.session.to_dict(),
        'completed': result.completed,
        'rewards': result.rewards,
    })


@quiz_session_bp.route('/<int:session_id>', methods=['DELETE'])
@login_required
def delete_session(session_id):
    _store().delete_quiz_session(session_id)
    return jsonify({'success': True, 'message': 'Quiz session deleted'})


@quiz_session_bp.route('/<int:session_id>/answers', methods=['POST'])
@login_required
def submit_answer(session_id):
    answer = AnswerSchema().load(request.get_json(silent=True) or {})

    if answer.get('question_id') is not None:
        question = db.session.get(Question, answer['question_id'])
        if question is not None:
            AccessControlInterface.enforce_tier(current_user, question.tier)

    store = _store()
    log = store.record_answer(session_id, answer)
    return jsonify({
        'success': True,
        'log': log.to_dict(),
        'session': store.load_quiz_session(session_id).to_dict(),
    }), 201


@quiz_session_bp.route('/<int:session_id>/summary', methods=['GET'])
@login_required
def get_summary(session_id):
    """Completion screen numbers for a session."""
    store = _store()
    session = _get_or_404(store, session_id)
    stats = build_completion_stats(session, store.get_question_logs(session_id))
    stats['average_time_label'] = format_seconds(stats['average_time'])
    stats['estimated_time_label'] = format_total_time(session.estimated_minutes)
    return jsonify({'success': True, 'title': session.title, 'stats': stats})
