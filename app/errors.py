"""
Error Taxonomy

Every failure a request can end in derives from BoardError and carries the
HTTP status it is rendered with. Validation failures are not exceptions; they
are returned by the validation pipeline and re-rendered by the handler.
"""

import logging

from flask import render_template

logger = logging.getLogger(__name__)


class BoardError(Exception):
    """Base class for all application errors."""
    status_code = 500
    default_message = 'Something went wrong.'

    def __init__(self, message=None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class AuthError(BoardError):
    """Login failed. Recovered by the log-in route as a redirect."""
    status_code = 401
    default_message = 'Invalid username or password.'


class UnknownUser(AuthError):
    """No user with the submitted username."""


class BadPassword(AuthError):
    """The submitted password does not match the stored hash."""


class AuthorizationError(BoardError):
    """Wrong passphrase, failed promotion or missing capability."""
    status_code = 401
    default_message = 'You are not allowed to do that.'


class NotFoundError(BoardError):
    status_code = 404
    default_message = 'Messages not found.'


class StoreError(BoardError):
    """Any persistence failure."""
    status_code = 500
    default_message = 'There was a problem talking to the database.'


def register_error_handlers(app):
    """Render every BoardError as the error page with its status code."""

    @app.errorhandler(BoardError)
    def handle_board_error(error):
        if error.status_code >= 500:
            logger.error('%s: %s', type(error).__name__, error.message)
        else:
            logger.warning('%s: %s', type(error).__name__, error.message)
        return render_template('error.html',
                               title='Error',
                               message=error.message,
                               status=error.status_code), error.status_code
