"""Credential service tests."""
import pytest

from app import create_app
from app.config import TestConfig
from app.errors import AuthError, AuthorizationError, BadPassword, UnknownUser
from app.services import store
from app.services.credentials import CredentialService, CredentialSettings, credentials


def test_hash_is_salted_and_verifies(app):
    with app.app_context():
        first = credentials.hash_password('secret1')
        second = credentials.hash_password('secret1')
    assert first != second
    assert 'secret1' not in first
    assert credentials.verify('secret1', first)
    assert not credentials.verify('secret2', first)


def test_hash_method_comes_from_config(app):
    with app.app_context():
        assert credentials.hash_method == app.config['PASSWORD_HASH_METHOD']
        assert credentials.hash_password('secret1').startswith('pbkdf2:sha256:1000$')


def test_authenticate(app, make_user):
    make_user('alice', 'secret1')
    with app.app_context():
        assert credentials.authenticate('alice', 'secret1').username == 'alice'

        with pytest.raises(UnknownUser):
            credentials.authenticate('bob', 'secret1')
        with pytest.raises(BadPassword):
            credentials.authenticate('alice', 'wrong')
        with pytest.raises(AuthError):
            credentials.authenticate('', '')


def test_check_passphrase(app):
    with app.app_context():
        credentials.check_passphrase('member', 'letmein')
        credentials.check_passphrase('admin', 'rootpass')
        with pytest.raises(AuthorizationError):
            credentials.check_passphrase('member', 'rootpass')
        with pytest.raises(AuthorizationError):
            credentials.check_passphrase('admin', 'ROOTPASS')


class OtherConfig(TestConfig):
    MEMBER_PASS = 'other-member'
    ADMIN_PASS = 'other-admin'


def test_each_app_keeps_its_own_passphrases():
    first = create_app(TestConfig)
    second = create_app(OtherConfig)

    with first.app_context():
        credentials.check_passphrase('member', 'letmein')
        with pytest.raises(AuthorizationError):
            credentials.check_passphrase('member', 'other-member')

    with second.app_context():
        credentials.check_passphrase('member', 'other-member')
        with pytest.raises(AuthorizationError):
            credentials.check_passphrase('member', 'letmein')


@pytest.mark.parametrize('submitted', ['', 'anything'])
def test_unset_passphrase_never_matches(submitted):
    service = CredentialService(CredentialSettings(member_pass=None, admin_pass='',
                                                   hash_method='pbkdf2:sha256'))
    with pytest.raises(AuthorizationError):
        service.check_passphrase('member', submitted)
    with pytest.raises(AuthorizationError):
        service.check_passphrase('admin', submitted)


def test_promote_sets_flag(app, make_user, get_user):
    make_user('alice')
    with app.app_context():
        assert credentials.promote('alice', 'member') is True
    assert get_user('alice')['is_member'] is True
    assert get_user('alice')['is_admin'] is False


def test_promote_is_idempotent(app, make_user, get_user):
    make_user('alice', is_admin=True)
    with app.app_context():
        assert credentials.promote('alice', 'admin') is False
    assert get_user('alice')['is_admin'] is True


def test_promote_missing_user(app):
    with app.app_context():
        with pytest.raises(AuthorizationError):
            credentials.promote('ghost', 'member')


def test_update_user_flag_reports_modified_rows(app, make_user):
    make_user('alice')
    with app.app_context():
        assert store.update_user_flag('alice', 'is_member') == 1
        assert store.update_user_flag('alice', 'is_member') == 0
        assert store.update_user_flag('ghost', 'is_member') == 0
        with pytest.raises(ValueError):
            store.update_user_flag('alice', 'password_hash')
