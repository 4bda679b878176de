"""Database models package for QuizQuest."""

from ..core.extensions import db

from .user import User
from .assignment import Assignment
from .question import Question
from .quiz import QuizSession, QuizQuestionLog
from .gamification import Achievement, UserAchievement, UserStats
from ..modules.notification.models import Notification

__all__ = [
    'db',
    'User',
    'Assignment',
    'Question',
    'QuizSession',
    'QuizQuestionLog',
    'Achievement',
    'UserAchievement',
    'UserStats',
    'Notification',
]
