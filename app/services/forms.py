"""
Form Definitions

Static rule lists for the sign-up and new-message forms.
"""

from app.services.validation import (
    Field, alphanumeric, equals_field, escape, length, trim, username_available,
)

USERNAME_MAX = 12
PASSWORD_MIN = 5
TITLE_MAX = 20
MESSAGE_MAX = 250

SIGN_UP_FORM = (
    Field('first_name', [
        trim(),
        length(min_length=1, message='First name must be specified'),
        escape(),
        alphanumeric('First name has non-alphanumeric characters'),
    ]),
    Field('last_name', [
        trim(),
        length(min_length=1, message='Last name must be specified'),
        escape(),
        alphanumeric('Last name has non-alphanumeric characters'),
    ]),
    Field('password', [
        length(min_length=PASSWORD_MIN,
               message=f'Passwords must be at least {PASSWORD_MIN} characters'),
    ]),
    Field('confirm_password', [
        equals_field('password', 'Passwords do not match'),
    ]),
    Field('username', [
        trim(),
        length(min_length=1, max_length=USERNAME_MAX,
               message=f'Usernames must be specified and at most {USERNAME_MAX} characters'),
        username_available('Username is taken'),
    ]),
)

NEW_MESSAGE_FORM = (
    Field('title', [
        trim(),
        length(min_length=1, max_length=TITLE_MAX,
               message=f'Title is required and must be at most {TITLE_MAX} characters'),
        escape(),
    ]),
    Field('message', [
        trim(),
        length(min_length=1, max_length=MESSAGE_MAX,
               message=f'Message body is required and must be at most {MESSAGE_MAX} characters'),
        escape(),
    ]),
)
