from dataclasses import asdict

from flask import Blueprint, jsonify, request
from flask_login import login_required, login_user, logout_user, current_user

from quizquest_app.core.error_handlers import error_response
from .schemas import LoginSchema, RegisterSchema, UserDTO
from .services import AuthService

auth_bp = Blueprint('auth', __name__, url_prefix='/api/auth')


@auth_bp.route('/register', methods=['POST'])
def register():
    data = RegisterSchema().load(request.get_json(silent=True) or {})
    user = AuthService.register_user(data['username'], data['email'], data['password'])
    login_user(user)
    return jsonify({'success': True, 'user': asdict(UserDTO.from_model(user))}), 201


@auth_bp.route('/login', methods=['POST'])
def login():
    data = LoginSchema().load(request.get_json(silent=True) or {})
    user = AuthService.authenticate_user(data['username'], data['password'])
    if user is None:
        return error_response('Invalid username or password', 'INVALID_CREDENTIALS', 401)

    login_user(user, remember=data['remember'])
    return jsonify({'success': True, 'user': asdict(UserDTO.from_model(user))})


@auth_bp.route('/logout', methods=['POST'])
@login_required
def logout():
    user_id = current_user.user_id
    logout_user()
    from quizquest_app.modules.quiz_session.interface import QuizSessionInterface
    QuizSessionInterface.evict_store(user_id)
    return jsonify({'success': True})


@auth_bp.route('/me', methods=['GET'])
@login_required
def me():
    return jsonify({'success': True, 'user': asdict(UserDTO.from_model(current_user))})
