from dataclasses import dataclass, asdict
from typing import Any, Mapping, Optional

from marshmallow import Schema, fields, post_load, validate


@dataclass(frozen=True)
class StudyItem:
    """Book / chapter / verse locator selecting a subset of questions."""
    book: str
    chapter: Optional[int] = None
    verse: Optional[int] = None

    @classmethod
    def from_value(cls, value: Any) -> "StudyItem":
        if isinstance(value, StudyItem):
            return value
        if isinstance(value, Mapping):
            return cls(
                book=value.get('book'),
                chapter=value.get('chapter'),
                verse=value.get('verse'),
            )
        return cls(
            book=getattr(value, 'book'),
            chapter=getattr(value, 'chapter', None),
            verse=getattr(value, 'verse', None),
        )

    def to_dict(self):
        return asdict(self)


class StudyItemSchema(Schema):
    book = fields.String(required=True, validate=validate.Length(min=1, max=50))
    chapter = fields.Integer(load_default=None, allow_none=True, validate=validate.Range(min=1))
    verse = fields.Integer(load_default=None, allow_none=True, validate=validate.Range(min=1))

    @post_load
    def make_study_item(self, data, **kwargs):
        return StudyItem(**data)


class QuestionQuerySchema(Schema):
    study_items = fields.List(fields.Nested(StudyItemSchema), required=True)


@dataclass
class QuestionCountDTO:
    plan: str
    total_questions: int
    study_items_label: str
