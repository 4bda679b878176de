from dataclasses import asdict

from flask import Blueprint, jsonify
from flask_login import login_required, current_user

from . import interface

gamification_bp = Blueprint(
    'gamification',
    __name__,
    url_prefix='/api/gamification'
)


@gamification_bp.route('/stats', methods=['GET'])
@login_required
def get_stats_api():
    """API lấy XP, cấp độ và chuỗi ngày học."""
    return jsonify({
        'success': True,
        'stats': interface.get_user_progress(current_user.user_id),
    })


@gamification_bp.route('/achievements', methods=['GET'])
@login_required
def get_achievements_api():
    achievements = interface.get_user_achievements(current_user.user_id)
    return jsonify({
        'success': True,
        'achievements': [asdict(a) for a in achievements],
        'unlocked_count': sum(1 for a in achievements if a.unlocked),
        'total': len(achievements),
    })
