from flask import Blueprint, jsonify, request
from flask_login import login_required, current_user

from quizquest_app.modules.access_control.interface import AccessControlInterface
from quizquest_app.modules.access_control.logics.policies import CAN_VIEW_ANSWERS
from quizquest_app.utils.formatters import format_study_items_for_assignment
from .schemas import QuestionQuerySchema
from .services.question_service import QuestionService

questions_bp = Blueprint('questions', __name__, url_prefix='/api/questions')


@questions_bp.route('/accessible', methods=['POST'])
@login_required
def list_accessible_questions():
    """Questions covered by the posted study items that the user's plan can see."""
    payload = QuestionQuerySchema().load(request.get_json(silent=True) or {})
    study_items = payload['study_items']

    questions = QuestionService.get_accessible_questions_for_user(current_user, study_items)
    include_answer = AccessControlInterface.check(current_user, CAN_VIEW_ANSWERS)

    return jsonify({
        'success': True,
        'questions': [q.to_dict(include_answer=include_answer) for q in questions],
        'total': len(questions),
    })


@questions_bp.route('/count', methods=['POST'])
@login_required
def count_questions():
    payload = QuestionQuerySchema().load(request.get_json(silent=True) or {})
    study_items = payload['study_items']

    return jsonify({
        'success': True,
        'plan': AccessControlInterface.get_plan(current_user),
        'total_questions': QuestionService.count_accessible_questions(current_user, study_items),
        'study_items_label': format_study_items_for_assignment(study_items),
    })
