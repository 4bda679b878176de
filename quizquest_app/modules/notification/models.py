from quizquest_app.core.extensions import db
from quizquest_app.utils.time_utils import utcnow


class Notification(db.Model):
    __tablename__ = 'notifications'

    TYPE_SYSTEM = 'SYSTEM'
    TYPE_ACHIEVEMENT = 'ACHIEVEMENT'
    TYPE_LEVEL_UP = 'LEVEL_UP'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.user_id'), nullable=False, index=True)

    # Types: SYSTEM, ACHIEVEMENT, LEVEL_UP
    type = db.Column(db.String(50), default=TYPE_SYSTEM)
    title = db.Column(db.String(255), nullable=False)
    message = db.Column(db.Text)

    is_read = db.Column(db.Boolean, default=False, nullable=False)
    created_at = db.Column(db.DateTime(timezone=True), default=utcnow)

    # Stores JSON data like {'achievement_id': 3, 'badge_icon_url': '...'}
    meta_data = db.Column(db.JSON, nullable=True)

    def to_dict(self):
        return {
            'id': self.id,
            'type': self.type,
            'title': self.title,
            'message': self.message,
            'is_read': self.is_read,
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'meta_data': self.meta_data
        }
