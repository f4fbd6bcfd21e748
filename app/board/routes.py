"""
Board Routes

Home page message list, admin deletion and the new-message form.
"""

import logging
from datetime import datetime, timezone

from flask import current_app, render_template, request, redirect, url_for, flash
from flask_login import current_user

from app.auth.decorators import admin_required, user_required
from app.board import board_bp
from app.errors import NotFoundError, StoreError
from app.models import Message
from app.services import store
from app.services.forms import NEW_MESSAGE_FORM
from app.services.validation import validate

logger = logging.getLogger(__name__)


@board_bp.route('/', methods=['GET'])
def index():
    """All messages, with delete controls for admins"""
    try:
        messages = store.list_messages()
    except StoreError as e:
        raise NotFoundError() from e

    return render_template('index.html',
                           title=current_app.config['BOARD_TITLE'],
                           messages=messages,
                           user=current_user)


@board_bp.route('/', methods=['POST'])
@admin_required
def delete_message():
    """Admin removal of a message by id."""
    message_id = request.form.get('messageId', type=int)
    if message_id is None:
        flash('No message selected.', 'warning')
        return redirect(url_for('board.index'))

    if store.delete_message(message_id):
        logger.info('%s deleted message %s', current_user.username, message_id)
        flash('Message deleted.', 'info')
    else:
        logger.warning('%s tried to delete missing message %s', current_user.username, message_id)
    return redirect(url_for('board.index'))


@board_bp.route('/new-message', methods=['GET'])
def new_message():
    return render_template('message_form.html', title='New Message', user=current_user)


@board_bp.route('/new-message', methods=['POST'])
@user_required
def new_message_submit():
    """Validate and post a message as the logged-in user.

    The author is always taken from the session, never from the form.
    """
    result = validate(NEW_MESSAGE_FORM, request.form)
    if not result.ok:
        return render_template('message_form.html',
                               title='New Message',
                               user=current_user,
                               draft=result.values,
                               errors=result.errors)

    message = Message(
        title=str(result.values['title']),
        text=str(result.values['message']),
        username=current_user.username,
        timestamp=datetime.now(timezone.utc),
    )
    store.add_message(message)
    logger.info('%s posted message %s', message.username, message.id)
    return redirect(url_for('board.index'))
