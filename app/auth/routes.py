"""
Auth Routes

User sign-up, log-in/out and passphrase promotion using Flask-Login.
"""

import logging

from flask import render_template, request, redirect, url_for, flash
from flask_login import login_user, logout_user, current_user

from app.auth import auth_bp
from app.auth.decorators import anonymous_required
from app.errors import AuthError, AuthorizationError
from app.models import User
from app.services import store
from app.services.credentials import ROLE_FLAGS, credentials
from app.services.forms import SIGN_UP_FORM
from app.services.validation import validate

logger = logging.getLogger(__name__)


@auth_bp.route('/sign-up', methods=['GET'])
@anonymous_required
def sign_up():
    """Empty sign-up form"""
    return render_template('sign_up.html', title='Sign Up')


@auth_bp.route('/sign-up', methods=['POST'])
def sign_up_submit():
    """Validate the sign-up form and create the account.

    On failure the form is re-rendered with the sanitized input and every
    field error; nothing is written.
    """
    result = validate(SIGN_UP_FORM, request.form)
    if not result.ok:
        echoed = {
            'first_name': result.values['first_name'],
            'last_name': result.values['last_name'],
            'username': result.values['username'],
        }
        return render_template('sign_up.html',
                               title='Sign Up',
                               user=echoed,
                               errors=result.errors)

    new_user = User(
        first_name=str(result.values['first_name']),
        last_name=str(result.values['last_name']),
        username=result.values['username'],
        password_hash=credentials.hash_password(result.values['password']),
        is_member=False,
        is_admin=False,
    )
    store.add_user(new_user)
    logger.info('Created account %s', new_user.username)
    flash('Registration successful! Please log in.', 'success')
    return redirect(url_for('auth.log_in'))


@auth_bp.route('/log-in', methods=['GET'])
@anonymous_required
def log_in():
    """Log-in form"""
    return render_template('log_in.html', title='Log In')


@auth_bp.route('/log-in', methods=['POST'])
def log_in_submit():
    username = request.form.get('username', '').strip()
    password = request.form.get('password', '')

    try:
        user = credentials.authenticate(username, password)
    except AuthError as e:
        logger.info('Failed login for %r (%s)', username, type(e).__name__)
        flash(AuthError.default_message, 'danger')
        return redirect(url_for('auth.log_in'))

    login_user(user)
    logger.info('%s logged in', user.username)
    return redirect(url_for('board.index'))


@auth_bp.route('/log-out')
def log_out():
    if current_user.is_authenticated:
        logger.info('%s logged out', current_user.username)
    logout_user()
    flash('You have been logged out.', 'info')
    return redirect(url_for('board.index'))


# -----------------------------------------------------------------------------
# Promotion (member / admin)
# -----------------------------------------------------------------------------

PROMOTION_PAGES = {
    'member': ('member_form.html', 'Join Us'),
    'admin': ('admin_form.html', 'Become an Admin'),
}


def _promotion_form(role):
    """Passphrase form, only for logged-in users who lack the role."""
    flag = ROLE_FLAGS[role]
    if not current_user.is_authenticated or getattr(current_user, flag):
        return redirect(url_for('board.index'))
    template, title = PROMOTION_PAGES[role]
    return render_template(template, title=title)


def _promotion_submit(role):
    credentials.check_passphrase(role, request.form.get('password', ''))
    if not current_user.is_authenticated:
        raise AuthorizationError('You must be logged in to do that.')

    if credentials.promote(current_user.username, role):
        flash(f'You are now {"an admin" if role == "admin" else "a member"}!', 'success')
    return redirect(url_for('board.index'))


@auth_bp.route('/join', methods=['GET'])
@auth_bp.route('/become-member', methods=['GET'])
def become_member():
    return _promotion_form('member')


@auth_bp.route('/join', methods=['POST'])
@auth_bp.route('/become-member', methods=['POST'])
def become_member_submit():
    return _promotion_submit('member')


@auth_bp.route('/become-admin', methods=['GET'])
def become_admin():
    return _promotion_form('admin')


@auth_bp.route('/become-admin', methods=['POST'])
def become_admin_submit():
    return _promotion_submit('admin')
