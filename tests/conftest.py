import pytest

from app import create_app
from app.config import TestConfig
from app.models import User
from app.services import store
from app.services.credentials import credentials


@pytest.fixture()
def app():
    return create_app(TestConfig)


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def make_user(app):
    """Create a user directly in the store and return its username."""
    def _make_user(username='alice', password='secret1', is_member=False, is_admin=False):
        with app.app_context():
            user = User(first_name='Alice', last_name='Liddell', username=username,
                        password_hash=credentials.hash_password(password),
                        is_member=is_member, is_admin=is_admin)
            store.add_user(user)
        return username
    return _make_user


@pytest.fixture()
def get_user(app):
    """Fetch a user's flags as a plain dict (None if absent)."""
    def _get_user(username):
        with app.app_context():
            user = store.find_user(username)
            if user is None:
                return None
            return {'username': user.username, 'first_name': user.first_name,
                    'last_name': user.last_name, 'password_hash': user.password_hash,
                    'is_member': user.is_member, 'is_admin': user.is_admin}
    return _get_user


@pytest.fixture()
def all_messages(app):
    """Current messages as (title, text, username) tuples."""
    def _all_messages():
        with app.app_context():
            return [(m.title, m.text, m.username) for m in store.list_messages()]
    return _all_messages


@pytest.fixture()
def login(client):
    def _login(username='alice', password='secret1'):
        return client.post('/log-in', data={'username': username, 'password': password})
    return _login
