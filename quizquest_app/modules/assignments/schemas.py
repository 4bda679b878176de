from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Optional

from marshmallow import Schema, fields, validate

from quizquest_app.modules.questions.schemas import StudyItemSchema


class AssignmentCreateSchema(Schema):
    title = fields.String(required=True, validate=validate.Length(min=1, max=200))
    study_items = fields.List(fields.Nested(StudyItemSchema), required=True,
                              validate=validate.Length(min=1))
    date = fields.Date(load_default=None, allow_none=True)


@dataclass
class AssignmentDTO:
    id: int
    title: str
    date: Optional[str]
    completed: bool
    completed_at: Optional[str]
    study_items: List[Dict[str, Any]] = field(default_factory=list)
    study_items_label: str = ''
    total_questions: int = 0
    open_session_id: Optional[int] = None

    @classmethod
    def from_model(cls, assignment, **extra) -> "AssignmentDTO":
        return cls(
            id=assignment.id,
            title=assignment.title,
            date=assignment.date.isoformat() if assignment.date else None,
            completed=bool(assignment.completed),
            completed_at=assignment.completed_at.isoformat() if assignment.completed_at else None,
            study_items=list(assignment.study_items or []),
            **extra
        )

    def to_dict(self):
        return asdict(self)
