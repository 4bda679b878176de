from flask import Blueprint, jsonify, request
from flask_login import login_required, current_user

from quizquest_app.modules.access_control.decorators import require_permission
from quizquest_app.modules.access_control.logics.policies import CAN_CREATE_ASSIGNMENT
from quizquest_app.modules.questions.interface import count_questions_for_user
from quizquest_app.modules.quiz_session.interface import QuizSessionInterface
from quizquest_app.utils.formatters import format_streak
from .schemas import AssignmentCreateSchema, AssignmentDTO
from .services import AssignmentService

assignments_bp = Blueprint('assignments', __name__, url_prefix='/api/assignments')


def _to_dto(assignment) -> AssignmentDTO:
    counts = count_questions_for_user(current_user, assignment.study_items)
    session = QuizSessionInterface.get_session_for_assignment(assignment.id, current_user.user_id)
    return AssignmentDTO.from_model(
        assignment,
        study_items_label=counts.study_items_label,
        total_questions=counts.total_questions,
        open_session_id=session.id if session else None,
    )


@assignments_bp.route('', methods=['GET'])
@login_required
def list_assignments():
    assignments = AssignmentService.list_assignments(current_user.user_id)
    return jsonify({
        'success': True,
        'assignments': [_to_dto(a).to_dict() for a in assignments],
    })


@assignments_bp.route('', methods=['POST'])
@login_required
@require_permission(CAN_CREATE_ASSIGNMENT)
def create_assignment():
    data = AssignmentCreateSchema().load(request.get_json(silent=True) or {})
    assignment = AssignmentService.create_assignment(current_user.user_id, data)
    return jsonify({'success': True, 'assignment': _to_dto(assignment).to_dict()}), 201


@assignments_bp.route('/streak', methods=['GET'])
@login_required
def get_streak():
    streak = AssignmentService.get_streak(current_user.user_id)
    return jsonify({'success': True, 'streak': streak, 'label': format_streak(streak)})


@assignments_bp.route('/<int:assignment_id>', methods=['GET'])
@login_required
def get_assignment(assignment_id):
    assignment = AssignmentService.get_assignment_for_user(assignment_id, current_user.user_id)
    return jsonify({'success': True, 'assignment': _to_dto(assignment).to_dict()})
