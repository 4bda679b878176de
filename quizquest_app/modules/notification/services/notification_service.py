from quizquest_app.core.extensions import db
from ..models import Notification


class NotificationService:
    @staticmethod
    def create_notification(user_id, title, message, type=Notification.TYPE_SYSTEM, meta_data=None):
        """Creates and commits a new in-app notification."""
        notif = Notification(
            user_id=user_id,
            title=title,
            message=message,
            type=type,
            meta_data=meta_data
        )
        db.session.add(notif)
        db.session.commit()
        return notif

    @staticmethod
    def get_unread_count(user_id):
        return Notification.query.filter_by(user_id=user_id, is_read=False).count()

    @staticmethod
    def get_user_notifications(user_id, limit=20, offset=0, unread_only=False):
        query = Notification.query.filter_by(user_id=user_id)
        if unread_only:
            query = query.filter_by(is_read=False)
        return query.order_by(Notification.created_at.desc(), Notification.id.desc())\
            .limit(limit).offset(offset).all()

    @staticmethod
    def mark_as_read(notification_id, user_id):
        notif = Notification.query.filter_by(id=notification_id, user_id=user_id).first()
        if notif:
            notif.is_read = True
            db.session.commit()
            return True
        return False

    @staticmethod
    def mark_all_as_read(user_id):
        updated = Notification.query.filter_by(user_id=user_id, is_read=False)\
            .update({'is_read': True})
        db.session.commit()
        return updated
