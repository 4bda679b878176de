"""User database model."""

from __future__ import annotations

from flask_login import UserMixin
from werkzeug.security import check_password_hash, generate_password_hash

from ..core.extensions import db
from ..utils.time_utils import utcnow


class User(UserMixin, db.Model):
    """Application user model."""

    __tablename__ = 'users'

    PLAN_FREE = 'free'
    PLAN_PRO = 'pro'
    PLAN_ENTERPRISE = 'enterprise'
    PLAN_LABELS = {
        PLAN_FREE: 'Free',
        PLAN_PRO: 'Pro',
        PLAN_ENTERPRISE: 'Enterprise',
    }

    user_id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(80), unique=True, nullable=False)
    email = db.Column(db.String(120), unique=True, nullable=False)
    password_hash = db.Column(db.String(256), nullable=False)
    subscription_plan = db.Column(db.String(20), default=PLAN_FREE, nullable=False)
    created_at = db.Column(db.DateTime(timezone=True), default=utcnow)

    quiz_sessions = db.relationship(
        'QuizSession', backref='user', lazy='dynamic', cascade='all, delete-orphan'
    )

    def set_password(self, password: str) -> None:
        self.password_hash = generate_password_hash(password)

    def check_password(self, password: str) -> bool:
        return check_password_hash(self.password_hash, password)

    def get_id(self) -> str:
        return str(self.user_id)

    def to_dict(self):
        return {
            'user_id': self.user_id,
            'username': self.username,
            'email': self.email,
            'subscription_plan': self.subscription_plan,
        }

    def __repr__(self):
        return f'<User {self.username}>'
