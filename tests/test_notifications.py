from quizquest_app import db
from quizquest_app.modules.notification.models import Notification


def test_mark_read(app, client, make_user, login):
    user_id = make_user('alice')
    with app.app_context():
        notif = Notification(user_id=user_id, title='Hello', message='World')
        db.session.add(notif)
        db.session.commit()
        notif_id = notif.id
    login('alice')

    assert client.get('/api/notifications').get_json()['unread_count'] == 1
    assert client.post(f'/api/notifications/{notif_id}/read').get_json() == {'success': True}
    assert client.get('/api/notifications').get_json()['unread_count'] == 0


def test_cannot_read_someone_elses_notification(app, client, make_user, login):
    owner_id = make_user('alice')
    make_user('bob')
    with app.app_context():
        notif = Notification(user_id=owner_id, title='Private')
        db.session.add(notif)
        db.session.commit()
        notif_id = notif.id
    login('bob')

    response = client.post(f'/api/notifications/{notif_id}/read')
    assert response.status_code == 404


def test_unread_filter_and_read_all(app, client, make_user, login):
    user_id = make_user('alice')
    with app.app_context():
        db.session.add_all([
            Notification(user_id=user_id, title='One'),
            Notification(user_id=user_id, title='Two', is_read=True),
        ])
        db.session.commit()
    login('alice')

    unread = client.get('/api/notifications?unread=1').get_json()['notifications']
    assert [n['title'] for n in unread] == ['One']

    assert client.post('/api/notifications/read-all').get_json()['updated'] == 1
    assert client.get('/api/notifications').get_json()['unread_count'] == 0
