def register(client, username='alice', email=None, password='password'):
    return client.post('/api/auth/register', json={
        'username': username,
        'email': email or f'{username}@example.com',
        'password': password,
    })


def test_register_logs_in_and_welcomes(client):
    response = register(client)
    assert response.status_code == 201
    assert response.get_json()['user']['subscription_plan'] == 'free'

    me = client.get('/api/auth/me').get_json()
    assert me['user']['username'] == 'alice'

    notifications = client.get('/api/notifications').get_json()
    assert notifications['unread_count'] == 1
    assert notifications['notifications'][0]['title'] == 'Welcome to QuizQuest!'


def test_duplicate_registration(client):
    register(client)
    response = register(client, email='other@example.com')
    assert response.status_code == 400
    assert response.get_json()['details'] == {'errors': {'username': ['Already in use.']}}


def test_register_validates_payload(client):
    response = register(client, email='not-an-email', password='123')
    assert response.status_code == 400
    errors = response.get_json()['details']['errors']
    assert set(errors) == {'email', 'password'}


def test_login_with_email_and_logout(client, make_user):
    make_user('bob')

    bad = client.post('/api/auth/login', json={'username': 'bob', 'password': 'wrong'})
    assert bad.status_code == 401
    assert bad.get_json()['code'] == 'INVALID_CREDENTIALS'

    good = client.post('/api/auth/login', json={'username': 'bob@example.com', 'password': 'password'})
    assert good.status_code == 200

    assert client.post('/api/auth/logout').get_json() == {'success': True}
    assert client.get('/api/auth/me').status_code == 401
