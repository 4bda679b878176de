from quizquest_app.core.extensions import db
from quizquest_app.utils.time_utils import utcnow


class UserStats(db.Model):
    """Per-user XP, level and streak record, upserted after every completed session."""
    __tablename__ = 'user_stats'

    user_id = db.Column(db.Integer, db.ForeignKey('users.user_id'), primary_key=True)
    total_xp = db.Column(db.Integer, default=0, nullable=False)
    current_level = db.Column(db.Integer, default=1, nullable=False)
    longest_streak = db.Column(db.Integer, default=0, nullable=False)
    last_quiz_date = db.Column(db.Date)
    updated_at = db.Column(db.DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    def to_dict(self):
        return {
            'user_id': self.user_id,
            'total_xp': self.total_xp or 0,
            'current_level': self.current_level or 1,
            'longest_streak': self.longest_streak or 0,
            'last_quiz_date': self.last_quiz_date.isoformat() if self.last_quiz_date else None,
        }


class Achievement(db.Model):
    """Static catalog entry: an unlock criterion (type + threshold)."""
    __tablename__ = 'achievements'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False, unique=True)
    description = db.Column(db.String(255))
    criteria_type = db.Column(db.String(50), nullable=False)
    criteria_value = db.Column(db.Integer, nullable=False)
    badge_icon_url = db.Column(db.String(255))
    created_at = db.Column(db.DateTime(timezone=True), default=utcnow)

    # Criteria types
    TYPE_TOTAL_QUIZZES_COMPLETED = 'total_quizzes_completed'
    TYPE_TOTAL_POINTS_EARNED = 'total_points_earned'
    TYPE_LONGEST_STREAK = 'longest_streak'
    TYPE_TOTAL_QUESTIONS_ANSWERED = 'total_questions_answered'
    TYPE_PERFECT_QUIZ = 'perfect_quiz'
    TYPE_SPEED_DEMON = 'speed_demon'

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'description': self.description,
            'criteria_type': self.criteria_type,
            'criteria_value': self.criteria_value,
            'badge_icon_url': self.badge_icon_url,
        }

    def __repr__(self):
        return f'<Achievement {self.name}>'


class UserAchievement(db.Model):
    """An achievement a user has unlocked. Never removed once written."""
    __tablename__ = 'user_achievements'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.user_id'), nullable=False, index=True)
    achievement_id = db.Column(db.Integer, db.ForeignKey('achievements.id'), nullable=False)
    unlocked_at = db.Column(db.DateTime(timezone=True), default=utcnow)

    achievement = db.relationship('Achievement')

    __table_args__ = (db.UniqueConstraint('user_id', 'achievement_id', name='_user_achievement_uc'),)

    def to_dict(self):
        return {
            'achievement_id': self.achievement_id,
            'name': self.achievement.name if self.achievement else None,
            'badge_icon_url': self.achievement.badge_icon_url if self.achievement else None,
            'unlocked_at': self.unlocked_at.isoformat() if self.unlocked_at else None,
        }
