"""
Record Store

Thin persistence layer over Flask-SQLAlchemy for users and messages.
Every write is a single commit; any database failure is rolled back,
logged and re-raised as StoreError.
"""

import logging
from functools import wraps

from sqlalchemy.exc import SQLAlchemyError

from app.errors import StoreError
from app.extensions import db
from app.models import User, Message

logger = logging.getLogger(__name__)

USER_FLAGS = ('is_member', 'is_admin')


def _store_operation(f):
    """Translate SQLAlchemy failures into StoreError."""
    @wraps(f)
    def wrapper(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.exception('Store operation %s failed', f.__name__)
            raise StoreError() from e
    return wrapper


@_store_operation
def list_messages():
    """All messages in the order they were posted."""
    return Message.query.order_by(Message.id).all()


@_store_operation
def find_user(username):
    return User.query.filter_by(username=username).first()


@_store_operation
def get_user(user_id):
    return db.session.get(User, user_id)


@_store_operation
def add_user(user):
    db.session.add(user)
    db.session.commit()
    return user


@_store_operation
def add_message(message):
    db.session.add(message)
    db.session.commit()
    return message


@_store_operation
def update_user_flag(username, flag):
    """Set ``flag`` to True for ``username``.

    Returns the number of rows actually modified: 0 when the user does not
    exist or already has the flag set.
    """
    if flag not in USER_FLAGS:
        raise ValueError(f'Unknown user flag: {flag}')
    column = getattr(User, flag)
    unset = column == False  # noqa: E712
    modified = User.query.filter(User.username == username, unset)\
        .update({column: True}, synchronize_session='fetch')
    db.session.commit()
    return modified


@_store_operation
def delete_message(message_id):
    """Delete a message by id. Returns False when there was nothing to delete."""
    message = db.session.get(Message, message_id)
    if message is None:
        return False
    db.session.delete(message)
    db.session.commit()
    return True
