"""
Access Decorators

Route guards built on Flask-Login's current_user.
"""

from functools import wraps
from flask import redirect, url_for
from flask_login import current_user

from app.errors import AuthorizationError


def anonymous_required(f):
    """Send already logged-in users back to the board."""
    @wraps(f)
    def wrapper(*args, **kwargs):
        if current_user.is_authenticated:
            return redirect(url_for('board.index'))
        return f(*args, **kwargs)
    return wrapper


def user_required(f):
    """Reject the request with 401 unless somebody is logged in.

    Used on POST handlers that act on behalf of the current user.
    """
    @wraps(f)
    def wrapper(*args, **kwargs):
        if not current_user.is_authenticated:
            raise AuthorizationError('You must be logged in to do that.')
        return f(*args, **kwargs)
    return wrapper


def admin_required(f):
    """Reject the request with 401 unless the current user is an admin."""
    @wraps(f)
    def wrapper(*args, **kwargs):
        if not current_user.is_authenticated or not current_user.is_admin:
            raise AuthorizationError('Only admins can do that.')
        return f(*args, **kwargs)
    return wrapper
