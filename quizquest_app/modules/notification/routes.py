from flask import Blueprint, current_app, jsonify, request
from flask_login import login_required, current_user

from quizquest_app.core.error_handlers import NotFoundError
from quizquest_app.utils.time_utils import format_date_for_display
from .services import NotificationService

notification_bp = Blueprint('notification', __name__, url_prefix='/api/notifications')


def _serialize(notification):
    data = notification.to_dict()
    data['created_at_display'] = format_date_for_display(
        notification.created_at, current_app.config.get('DISPLAY_TIMEZONE'), '%d/%m/%Y %H:%M'
    )
    return data


@notification_bp.route('', methods=['GET'])
@login_required
def api_get_notifications():
    limit = request.args.get('limit', 20, type=int)
    offset = request.args.get('offset', 0, type=int)
    unread_only = request.args.get('unread', 'false').lower() in ('1', 'true', 'yes')

    notifs = NotificationService.get_user_notifications(current_user.user_id, limit, offset, unread_only)
    unread_count = NotificationService.get_unread_count(current_user.user_id)

    return jsonify({
        'success': True,
        'notifications': [_serialize(n) for n in notifs],
        'unread_count': unread_count
    })


@notification_bp.route('/<int:notif_id>/read', methods=['POST'])
@login_required
def api_mark_read(notif_id):
    if not NotificationService.mark_as_read(notif_id, current_user.user_id):
        raise NotFoundError('Notification not found', resource='notification')
    return jsonify({'success': True})


@notification_bp.route('/read-all', methods=['POST'])
@login_required
def api_mark_all_read():
    updated = NotificationService.mark_all_as_read(current_user.user_id)
    return jsonify({'success': True, 'updated': updated})
