"""
End-to-end tests for the quiz session HTTP API.
"""
import pytest


@pytest.fixture
def registered(client):
    response = client.post('/api/auth/register', json={
        'username': 'alice', 'email': 'alice@example.com', 'password': 'password'
    })
    assert response.status_code == 201
    return response.get_json()['user']


def create_session(client, **payload):
    body = {'title': 'Ruth practice', 'study_items': [{'book': 'Ruth', 'chapter': 1}], 'max_points': 20}
    body.update(payload)
    response = client.post('/api/quiz-sessions', json=body)
    assert response.status_code == 201, response.get_json()
    return response.get_json()['session_id']


def test_requires_login(client):
    response = client.get('/api/quiz-sessions')
    assert response.status_code == 401
    assert response.get_json() == {
        'success': False, 'message': 'Authentication required', 'code': 'UNAUTHENTICATED'
    }


def test_create_list_get(client, registered):
    session_id = create_session(client)

    listed = client.get('/api/quiz-sessions').get_json()
    assert listed['total'] == 1
    assert listed['sessions'][0]['id'] == session_id

    single = client.get(f'/api/quiz-sessions/{session_id}').get_json()
    assert single['session']['title'] == 'Ruth practice'
    assert single['session']['status'] == 'active'

    active = client.get('/api/quiz-sessions/active').get_json()
    assert [s['id'] for s in active['sessions']] == [session_id]


def test_validation_errors(client, registered):
    response = client.post('/api/quiz-sessions', json={'type': 'speedrun'})
    assert response.status_code == 400
    assert response.get_json()['code'] == 'VALIDATION_ERROR'

    response = client.post('/api/quiz-sessions', json={'type': 'assignment'})
    assert response.status_code == 400

    session_id = create_session(client)
    response = client.patch(f'/api/quiz-sessions/{session_id}', json={'status': 'abandoned'})
    assert response.status_code == 400
    response = client.patch(f'/api/quiz-sessions/{session_id}', json={'total_points': -5})
    assert response.status_code == 400


def test_unknown_session_is_404(client, registered):
    response = client.get('/api/quiz-sessions/999')
    assert response.status_code == 404
    assert response.get_json()['code'] == 'NOT_FOUND'
    assert client.delete('/api/quiz-sessions/999').status_code == 404


def test_other_users_sessions_are_invisible(client, registered, make_user, login):
    session_id = create_session(client)
    client.post('/api/auth/logout')

    make_user('mallory')
    login('mallory')
    assert client.get(f'/api/quiz-sessions/{session_id}').status_code == 404
    assert client.patch(f'/api/quiz-sessions/{session_id}', json={'title': 'x'}).status_code == 404
    assert client.get('/api/quiz-sessions').get_json()['sessions'] == []


def test_full_quiz_flow(client, registered, seeded_questions):
    session_id = create_session(client)

    first = client.post(f'/api/quiz-sessions/{session_id}/answers', json={
        'question_id': seeded_questions[0], 'selected_answer': 'A', 'time_spent_seconds': 12
    })
    assert first.status_code == 201
    assert first.get_json()['log']['is_correct'] is True

    second = client.post(f'/api/quiz-sessions/{session_id}/answers', json={
        'question_id': seeded_questions[1], 'selected_answer': 'A', 'time_spent_seconds': 20
    })
    assert second.get_json()['session']['total_points'] == 10
    assert second.get_json()['session']['current_question_index'] == 2

    summary = client.get(f'/api/quiz-sessions/{session_id}/summary').get_json()
    assert summary['stats']['accuracy'] == 50
    assert summary['stats']['total_points_earned'] == 10
    assert summary['stats']['total_possible_points'] == 20
    assert summary['stats']['score_percent'] == 50
    assert summary['stats']['average_time'] == 16
    assert summary['stats']['average_time_label'] == '0:16'

    completed = client.patch(f'/api/quiz-sessions/{session_id}', json={'status': 'completed'}).get_json()
    assert completed['completed'] is True
    assert completed['session']['completed_at'] is not None
    assert completed['rewards']['total_xp'] == 10
    assert 'First Steps' in [a['name'] for a in completed['rewards']['unlocked_achievements']]

    stats = client.get('/api/gamification/stats').get_json()['stats']
    assert stats['total_xp'] == 10
    assert stats['current_level'] == 1
    assert stats['xp_for_next_level'] == 90
    assert stats['current_streak'] == 1
    assert stats['streak_label'] == '1 day'
    assert stats['total_study_time'] == '0m'

    achievements = client.get('/api/gamification/achievements').get_json()
    assert achievements['total'] == 11
    unlocked = [a['name'] for a in achievements['achievements'] if a['unlocked']]
    assert 'First Steps' in unlocked

    assert client.get('/api/quiz-sessions/active').get_json()['sessions'] == []


def test_answering_locked_tier_is_forbidden(client, registered, seeded_questions):
    session_id = create_session(client)
    response = client.post(f'/api/quiz-sessions/{session_id}/answers', json={
        'question_id': seeded_questions[2], 'selected_answer': 'A'
    })
    assert response.status_code == 403
    assert response.get_json()['code'] == 'TIER_ACCESS_DENIED'


def test_delete_session(client, registered):
    session_id = create_session(client)
    response = client.delete(f'/api/quiz-sessions/{session_id}')
    assert response.get_json()['success'] is True
    assert client.get(f'/api/quiz-sessions/{session_id}').status_code == 404
    assert client.get('/api/quiz-sessions?refresh=1').get_json()['total'] == 0
