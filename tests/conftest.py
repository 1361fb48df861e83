"""
Shared pytest fixtures: a fresh in-memory application per test, its client,
and an admin bearer header.
"""

import pytest

from app import create_app
from extensions import db
from utils import security


@pytest.fixture
def app(tmp_path):
    app = create_app('testing')
    app.config['UPLOAD_FOLDER'] = str(tmp_path / 'uploads')
    security.RATE_LIMIT_REQUESTS.clear()
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def app_ctx(app):
    with app.app_context():
        yield app


@pytest.fixture
def login(client):
    """Log in as admin and return the session token"""
    def _login():
        response = client.post('/api/auth/login', json={'username': 'admin', 'password': 'admin123'})
        assert response.status_code == 200
        return response.get_json()['sessionId']
    return _login


@pytest.fixture
def auth_headers(login):
    return {'Authorization': f'Bearer {login()}'}
