from dataclasses import dataclass, field, asdict
from datetime import datetime
from typing import Any, Dict, List, Optional

from marshmallow import Schema, fields, validate, validates_schema, ValidationError

from quizquest_app.modules.questions.schemas import StudyItemSchema

SESSION_TYPES = ('practice', 'assignment', 'challenge')
SESSION_STATUSES = ('active', 'paused', 'completed')


def _iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


@dataclass
class QuizSessionDTO:
    """Snapshot of a quiz_sessions row kept in a user's session store."""
    id: int
    user_id: int
    type: str
    status: str
    title: Optional[str] = None
    assignment_id: Optional[int] = None
    study_items: List[Dict[str, Any]] = field(default_factory=list)
    current_question_index: int = 0
    total_points: int = 0
    max_points: int = 0
    estimated_minutes: int = 0
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    completed_at: Optional[str] = None

    @classmethod
    def from_model(cls, row) -> "QuizSessionDTO":
        return cls(
            id=row.id,
            user_id=row.user_id,
            type=row.type,
            status=row.status,
            title=row.title,
            assignment_id=row.assignment_id,
            study_items=list(row.study_items or []),
            current_question_index=row.current_question_index or 0,
            total_points=row.total_points or 0,
            max_points=row.max_points or 0,
            estimated_minutes=row.estimated_minutes or 0,
            created_at=_iso(row.created_at),
            updated_at=_iso(row.updated_at),
            completed_at=_iso(row.completed_at),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class SessionUpdateResult:
    session: QuizSessionDTO
    completed: bool = False
    rewards: Optional[Dict[str, Any]] = None


class QuizSessionCreateSchema(Schema):
    type = fields.String(load_default='practice', validate=validate.OneOf(SESSION_TYPES))
    title = fields.String(load_default=None, allow_none=True, validate=validate.Length(max=200))
    assignment_id = fields.Integer(load_default=None, allow_none=True)
    status = fields.String(load_default='active', validate=validate.OneOf(('active', 'paused')))
    study_items = fields.List(fields.Nested(StudyItemSchema), load_default=list)
    current_question_index = fields.Integer(load_default=0, validate=validate.Range(min=0))
    total_points = fields.Integer(load_default=0, validate=validate.Range(min=0))
    max_points = fields.Integer(load_default=0, validate=validate.Range(min=0))
    estimated_minutes = fields.Integer(load_default=0, validate=validate.Range(min=0))

    @validates_schema
    def validate_assignment(self, data, **kwargs):
        if data.get('type') == 'assignment' and not data.get('assignment_id'):
            raise ValidationError('assignment_id is required for assignment sessions.', 'assignment_id')


class QuizSessionUpdateSchema(Schema):
    title = fields.String(allow_none=True, validate=validate.Length(max=200))
    status = fields.String(validate=validate.OneOf(SESSION_STATUSES))
    study_items = fields.List(fields.Nested(StudyItemSchema))
    current_question_index = fields.Integer(validate=validate.Range(min=0))
    total_points = fields.Integer(validate=validate.Range(min=0))
    max_points = fields.Integer(validate=validate.Range(min=0))
    estimated_minutes = fields.Integer(validate=validate.Range(min=0))
    completed_at = fields.DateTime(allow_none=True)


class AnswerSchema(Schema):
    question_id = fields.Integer(load_default=None, allow_none=True)
    selected_answer = fields.String(load_default=None, allow_none=True)
    is_correct = fields.Boolean(load_default=False)
    points_earned = fields.Integer(load_default=0, validate=validate.Range(min=0))
    time_spent_seconds = fields.Integer(load_default=0, validate=validate.Range(min=0))
