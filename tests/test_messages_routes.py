"""Tests for the contact message endpoints"""

from unittest.mock import patch

from models import Message
from utils import security


MESSAGE = {'name': 'Ann', 'email': 'ann@example.com', 'subject': 'Hello', 'message': 'Nice site!'}


def message_rows(app):
    with app.app_context():
        return Message.query.count()


def send(client, **overrides):
    return client.post('/api/messages', json={**MESSAGE, **overrides})


def test_public_can_send_message(client, app):
    response = send(client)

    assert response.status_code == 201
    body = response.get_json()
    assert body['read'] is False
    assert body['createdAt'].endswith('+00:00')
    assert {k: body[k] for k in MESSAGE} == MESSAGE
    assert message_rows(app) == 1


def test_message_without_email_is_rejected(client, app):
    body = dict(MESSAGE)
    del body['email']
    response = client.post('/api/messages', json=body)

    assert response.status_code == 400
    assert response.get_json()['message'] == 'Invalid message data'
    assert [error['field'] for error in response.get_json()['errors']] == ['email']
    assert message_rows(app) == 0


def test_inbox_requires_auth(client, auth_headers):
    send(client)
    assert client.get('/api/messages').status_code == 401

    response = client.get('/api/messages', headers=auth_headers)
    assert response.status_code == 200
    assert len(response.get_json()) == 1
    assert response.headers['Cache-Control'] == 'no-cache, no-store, must-revalidate'
    assert response.headers['Pragma'] == 'no-cache'


def test_sender_history_is_public_and_exact(client):
    send(client)
    send(client, subject='Follow up')
    send(client, email='bob@example.com')

    response = client.get('/api/messages/sender/ann@example.com')
    assert response.status_code == 200
    assert [m['subject'] for m in response.get_json()] == ['Hello', 'Follow up']
    assert 'no-store' in response.headers['Cache-Control']

    assert client.get('/api/messages/sender/ANN@example.com').get_json() == []


def test_mark_read(client, auth_headers):
    message_id = send(client).get_json()['id']

    assert client.put(f'/api/messages/{message_id}/read').status_code == 401

    response = client.put(f'/api/messages/{message_id}/read', headers=auth_headers)
    assert response.status_code == 200
    assert response.get_json() == {'message': 'Message marked as read'}

    inbox = client.get('/api/messages', headers=auth_headers).get_json()
    assert inbox[0]['read'] is True

    missing = client.put('/api/messages/999/read', headers=auth_headers)
    assert missing.status_code == 404


def test_admin_delete(client, app, auth_headers):
    message_id = send(client).get_json()['id']

    assert client.delete(f'/api/messages/{message_id}').status_code == 401
    assert message_rows(app) == 1

    response = client.delete(f'/api/messages/{message_id}', headers=auth_headers)
    assert response.status_code == 200
    assert response.get_json() == {'message': 'Message deleted successfully'}
    assert client.delete(f'/api/messages/{message_id}', headers=auth_headers).status_code == 404


def test_sender_can_delete_own_message(client, app):
    message_id = send(client).get_json()['id']

    wrong = client.delete(f'/api/messages/{message_id}/sender', json={'email': 'eve@example.com'})
    assert wrong.status_code == 404
    assert wrong.get_json() == {'message': 'Message not found or unauthorized'}

    wrong_case = client.delete(f'/api/messages/{message_id}/sender', json={'email': 'Ann@example.com'})
    assert wrong_case.status_code == 404
    assert message_rows(app) == 1

    response = client.delete(f'/api/messages/{message_id}/sender', json={'email': 'ann@example.com'})
    assert response.status_code == 200
    assert message_rows(app) == 0


def test_sender_delete_requires_email(client, app):
    message_id = send(client).get_json()['id']

    for body in ({}, {'email': ''}):
        response = client.delete(f'/api/messages/{message_id}/sender', json=body)
        assert response.status_code == 400
        assert response.get_json()['message'] == 'Email is required'

    response = client.delete(f'/api/messages/{message_id}/sender')
    assert response.status_code == 400
    assert message_rows(app) == 1


def test_contact_form_rate_limit(client, app):
    app.config['RATE_LIMIT_ENABLED'] = True
    app.config['CONTACT_RATE_LIMIT'] = 2
    security.RATE_LIMIT_REQUESTS.clear()

    assert send(client).status_code == 201
    assert send(client).status_code == 201
    response = send(client)
    assert response.status_code == 429
    assert 'message' in response.get_json()
    assert message_rows(app) == 2


def test_new_message_triggers_notification(client):
    with patch('blueprints.messages.routes.notify_new_message') as notify:
        send(client)
    notify.assert_called_once()
    assert notify.call_args[0][0].email == 'ann@example.com'
