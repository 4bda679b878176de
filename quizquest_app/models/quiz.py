from sqlalchemy.types import JSON

from ..core.extensions import db
from ..utils.time_utils import utcnow


class QuizSession(db.Model):
    """
    A single run through a quiz by one user.

    Created when the quiz starts, mutated on each answer, pause and on
    completion. Rows are only deleted by an explicit user action.
    """
    __tablename__ = 'quiz_sessions'

    STATUS_ACTIVE = 'active'
    STATUS_PAUSED = 'paused'
    STATUS_COMPLETED = 'completed'
    STATUSES = (STATUS_ACTIVE, STATUS_PAUSED, STATUS_COMPLETED)
    OPEN_STATUSES = (STATUS_ACTIVE, STATUS_PAUSED)

    TYPE_PRACTICE = 'practice'
    TYPE_ASSIGNMENT = 'assignment'
    TYPE_CHALLENGE = 'challenge'
    TYPES = (TYPE_PRACTICE, TYPE_ASSIGNMENT, TYPE_CHALLENGE)

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.user_id'), nullable=False, index=True)
    assignment_id = db.Column(db.Integer, db.ForeignKey('assignments.id'), nullable=True, index=True)

    type = db.Column(db.String(20), default=TYPE_PRACTICE, nullable=False)
    title = db.Column(db.String(200))
    status = db.Column(db.String(20), default=STATUS_ACTIVE, nullable=False, index=True)
    study_items = db.Column(JSON, default=list)
    current_question_index = db.Column(db.Integer, default=0)

    total_points = db.Column(db.Integer, default=0, nullable=False)
    max_points = db.Column(db.Integer, default=0, nullable=False)
    estimated_minutes = db.Column(db.Integer, default=0, nullable=False)

    created_at = db.Column(db.DateTime(timezone=True), default=utcnow, index=True)
    updated_at = db.Column(db.DateTime(timezone=True), default=utcnow, onupdate=utcnow)
    completed_at = db.Column(db.DateTime(timezone=True), nullable=True)

    __table_args__ = (
        db.Index('ix_quiz_sessions_user_status', 'user_id', 'status'),
    )

    @property
    def is_open(self):
        return self.status in self.OPEN_STATUSES

    def __repr__(self):
        return f'<QuizSession {self.id} user={self.user_id} status={self.status}>'


class QuizQuestionLog(db.Model):
    """One answered question inside a quiz session."""
    __tablename__ = 'quiz_question_logs'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.user_id'), nullable=False, index=True)
    session_id = db.Column(
        db.Integer, db.ForeignKey('quiz_sessions.id'), nullable=False, index=True
    )
    question_id = db.Column(db.Integer, db.ForeignKey('questions.id'), nullable=True)
    is_correct = db.Column(db.Boolean, default=False, nullable=False)
    points_earned = db.Column(db.Integer, default=0, nullable=False)
    time_spent_seconds = db.Column(db.Integer, default=0, nullable=False)
    created_at = db.Column(db.DateTime(timezone=True), default=utcnow)

    session = db.relationship(
        'QuizSession',
        backref=db.backref('question_logs', lazy='dynamic', cascade='all, delete-orphan'),
    )

    def to_dict(self):
        return {
            'id': self.id,
            'session_id': self.session_id,
            'question_id': self.question_id,
            'is_correct': self.is_correct,
            'points_earned': self.points_earned,
            'time_spent_seconds': self.time_spent_seconds,
            'created_at': self.created_at.isoformat() if self.created_at else None,
        }
