"""
Credential Service

Password hashing, login and the two passphrase gates (member / admin).

Passphrases and the hash method are read from the application config once,
in init_app(), and stored per application in ``app.extensions['credentials']``.
A service built with explicit settings uses those instead.
"""

import logging
from collections import namedtuple

from flask import current_app
from werkzeug.security import generate_password_hash, check_password_hash

from app.errors import AuthorizationError, BadPassword, UnknownUser
from app.services import store

logger = logging.getLogger(__name__)

ROLE_FLAGS = {
    'member': 'is_member',
    'admin': 'is_admin',
}

CredentialSettings = namedtuple('CredentialSettings', ['member_pass', 'admin_pass', 'hash_method'])


class CredentialService:
    """Hashes and verifies passwords and guards promotions."""

    def __init__(self, settings=None):
        self._settings = settings

    def init_app(self, app):
        settings = CredentialSettings(
            member_pass=app.config.get('MEMBER_PASS'),
            admin_pass=app.config.get('ADMIN_PASS'),
            hash_method=app.config.get('PASSWORD_HASH_METHOD', 'pbkdf2:sha256'),
        )
        if not settings.member_pass:
            logger.warning('MEMBER_PASS is not set; nobody can become a member')
        if not settings.admin_pass:
            logger.warning('ADMIN_PASS is not set; nobody can become an admin')
        app.extensions['credentials'] = settings

    @property
    def settings(self):
        if self._settings is not None:
            return self._settings
        return current_app.extensions['credentials']

    @property
    def hash_method(self):
        return self.settings.hash_method

    # ------------------------------------------------------------------
    # Passwords
    # ------------------------------------------------------------------

    def hash_password(self, plaintext):
        return generate_password_hash(plaintext, method=self.hash_method)

    def verify(self, plaintext, password_hash):
        return check_password_hash(password_hash, plaintext)

    def authenticate(self, username, plaintext):
        """Return the user for valid credentials.

        Raises:
            UnknownUser: no user with that username
            BadPassword: the password does not match
        """
        user = store.find_user(username)
        if user is None:
            raise UnknownUser()
        if not self.verify(plaintext, user.password_hash):
            raise BadPassword()
        return user

    # ------------------------------------------------------------------
    # Promotion
    # ------------------------------------------------------------------

    def check_passphrase(self, role, submitted):
        """Raise AuthorizationError unless ``submitted`` is the passphrase for ``role``."""
        expected = {'member': self.settings.member_pass,
                    'admin': self.settings.admin_pass}.get(role)
        if not expected or submitted != expected:
            raise AuthorizationError('Incorrect password.')

    def promote(self, username, role):
        """Set the flag for ``role`` on ``username``.

        Already holding the role is a successful no-op. Returns True when the
        flag was changed.
        """
        flag = ROLE_FLAGS[role]
        user = store.find_user(username)
        if user is None:
            raise AuthorizationError(f'There was a problem updating your {role}ship.')
        if getattr(user, flag):
            logger.info('%s is already %s; nothing to do', username, role)
            return False

        modified = store.update_user_flag(username, flag)
        if modified != 1:
            raise AuthorizationError(f'There was a problem updating your {role}ship.')
        logger.info('%s promoted to %s', username, role)
        return True


credentials = CredentialService()
