from sqlalchemy.types import JSON

from ..core.extensions import db


class Question(db.Model):
    """A quiz question located by book / chapter / verse and gated by tier."""
    __tablename__ = 'questions'

    TIER_FREE = 'free'
    TIER_PRO = 'pro'
    TIER_ENTERPRISE = 'enterprise'

    id = db.Column(db.Integer, primary_key=True)
    book = db.Column(db.String(50), nullable=False, index=True)
    chapter = db.Column(db.Integer, nullable=True)
    verse = db.Column(db.Integer, nullable=True)
    tier = db.Column(db.String(20), default=TIER_FREE, nullable=False)

    question_text = db.Column(db.Text, nullable=False)
    options = db.Column(JSON, default=list)
    correct_answer = db.Column(db.String(255))
    points = db.Column(db.Integer, default=1, nullable=False)

    __table_args__ = (
        db.Index('ix_questions_book_chapter', 'book', 'chapter'),
    )

    def to_dict(self, include_answer=False):
        data = {
            'id': self.id,
            'book': self.book,
            'chapter': self.chapter,
            'verse': self.verse,
            'tier': self.tier,
            'question_text': self.question_text,
            'options': self.options or [],
            'points': self.points,
        }
        if include_answer:
            data['correct_answer'] = self.correct_answer
        return data

    def __repr__(self):
        return f'<Question {self.id} {self.book} {self.chapter}:{self.verse}>'
