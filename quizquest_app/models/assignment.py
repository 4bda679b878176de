from sqlalchemy.types import JSON

from ..core.extensions import db
from ..utils.time_utils import utcnow


class Assignment(db.Model):
    """A dated study assignment covering a set of study items."""
    __tablename__ = 'assignments'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.user_id'), nullable=False, index=True)
    title = db.Column(db.String(200), nullable=False)
    study_items = db.Column(JSON, default=list)
    date = db.Column(db.Date, nullable=False)
    completed = db.Column(db.Boolean, default=False, nullable=False)
    completed_at = db.Column(db.DateTime(timezone=True), nullable=True)
    created_at = db.Column(db.DateTime(timezone=True), default=utcnow)

    def __repr__(self):
        return f'<Assignment {self.id} {self.title}>'
