# File: quizquest_app/config.py

import os
from dotenv import load_dotenv

load_dotenv()

# This file lives in quizquest_app/, so the project root is one level up.
BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))

DATABASE_PATH = os.path.join(BASE_DIR, "database", "quizquest.db")


def _env_flag(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    """QuizQuest application configuration."""

    SECRET_KEY = os.environ.get('SECRET_KEY')
    if not SECRET_KEY:
        # Development fallback, set SECRET_KEY in the environment for production
        SECRET_KEY = 'dev-secret-key-replace-in-production'

    SQLALCHEMY_DATABASE_URI = os.environ.get('SQLALCHEMY_DATABASE_URI') or f'sqlite:///{DATABASE_PATH}'
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_pre_ping': True,
        'connect_args': {'timeout': 30},
    }
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    LOG_DIR = os.environ.get('LOG_DIR') or os.path.join(BASE_DIR, 'logs')
    LOG_JSON = _env_flag('LOG_JSON')
    LOG_TO_FILE = _env_flag('LOG_TO_FILE', True)

    # Dates are stored in UTC and rendered in this zone
    DISPLAY_TIMEZONE = os.environ.get('DISPLAY_TIMEZONE', 'Europe/London')

    GAMIFICATION_XP_PER_LEVEL = int(os.environ.get('GAMIFICATION_XP_PER_LEVEL', 100))
    SEED_ACHIEVEMENTS = _env_flag('SEED_ACHIEVEMENTS', True)

    @classmethod
    def init_app(cls, app):
        """Create the directories the configuration points at."""
        if app.config['SQLALCHEMY_DATABASE_URI'] == f'sqlite:///{DATABASE_PATH}':
            os.makedirs(os.path.dirname(DATABASE_PATH), exist_ok=True)
        if app.config.get('LOG_TO_FILE'):
            os.makedirs(app.config['LOG_DIR'], exist_ok=True)
