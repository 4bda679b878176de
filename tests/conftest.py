import pytest

from quizquest_app import create_app, db
from quizquest_app.config import Config
from quizquest_app.models import Question, User


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_ENGINE_OPTIONS = {
        'connect_args': {'check_same_thread': False}
    }
    LOG_TO_FILE = False
    LOG_LEVEL = 'WARNING'
    SECRET_KEY = 'test-secret'


@pytest.fixture
def app():
    app = create_app(TestConfig)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_user(app):
    """Create a user row and return its id."""
    def _make_user(username='alice', plan=User.PLAN_FREE, password='password'):
        with app.app_context():
            user = User(username=username, email=f'{username}@example.com', subscription_plan=plan)
            user.set_password(password)
            db.session.add(user)
            db.session.commit()
            return user.user_id
    return _make_user


@pytest.fixture
def login(client):
    def _login(username='alice', password='password'):
        response = client.post('/api/auth/login', json={'username': username, 'password': password})
        assert response.status_code == 200, response.get_json()
        return response
    return _login


@pytest.fixture
def seeded_questions(app):
    """Ruth questions across all three tiers."""
    with app.app_context():
        questions = [
            Question(book='Ruth', chapter=1, verse=1, tier='free', question_text='Q1',
                     options=['A', 'B'], correct_answer='A', points=10),
            Question(book='Ruth', chapter=1, verse=2, tier='free', question_text='Q2',
                     options=['A', 'B'], correct_answer='B', points=10),
            Question(book='Ruth', chapter=2, verse=1, tier='pro', question_text='Q3',
                     options=['A', 'B'], correct_answer='A', points=20),
            Question(book='Ruth', chapter=3, verse=4, tier='enterprise', question_text='Q4',
                     options=['A', 'B'], correct_answer='A', points=30),
            Question(book='Esther', chapter=1, verse=1, tier='free', question_text='Q5',
                     options=['A', 'B'], correct_answer='A', points=10),
        ]
        db.session.add_all(questions)
        db.session.commit()
        return [q.id for q in questions]
