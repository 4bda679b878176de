from flask import Blueprint, jsonify
from flask_login import login_required, current_user

from quizquest_app.models import User
from .logics.policies import ALL_TIERS, get_plan_policy
from .schemas import PlanPermissionsSchema
from .services.plan_service import PlanService

access_control_bp = Blueprint(
    'access_control',
    __name__,
    url_prefix='/api/access-control'
)


@access_control_bp.route('/plan/me', methods=['GET'])
@login_required
def get_my_plan():
    """
    Get current user's plan, visible question tiers and permissions.
    """
    plan = PlanService.get_plan(current_user)
    policy = get_plan_policy(plan)

    data = {
        'plan': plan,
        'plan_label': User.PLAN_LABELS.get(plan, plan),
        # Keep tiers in ladder order for display
        'accessible_tiers': [tier for tier in ALL_TIERS if tier in policy['tiers']],
        'permissions': policy.get('permissions', {}),
    }

    schema = PlanPermissionsSchema()
    return jsonify({'success': True, **schema.dump(data)})
