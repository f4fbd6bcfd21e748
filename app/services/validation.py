"""
Form Validation

A form is an ordered tuple of Field descriptors. Each field has an ordered
list of rules; a rule is a plain function ``(value, context) -> value`` that
either returns the (possibly sanitized) value or raises RuleViolation.

validate() runs every field in order. Within a field the first violation
stops that field; violations are collected across fields.
"""

from collections import namedtuple

from markupsafe import escape as html_escape

from app.services import store

Field = namedtuple('Field', ['name', 'rules'])
FieldError = namedtuple('FieldError', ['field', 'message'])


class RuleViolation(Exception):
    def __init__(self, message):
        super().__init__(message)
        self.message = message


class ValidationResult:
    """Sanitized values plus the ordered list of field errors."""

    def __init__(self, values, errors):
        self.values = values
        self.errors = errors

    @property
    def ok(self):
        return not self.errors

    def error_for(self, field):
        """First message recorded for ``field``, or None."""
        for error in self.errors:
            if error.field == field:
                return error.message
        return None

    def __repr__(self):
        return f'<ValidationResult ok={self.ok} errors={self.errors!r}>'


def validate(form, data, context=None):
    """Run ``form`` over the submitted ``data`` mapping.

    ``context`` is handed to every rule; ``context['form']`` always holds the
    raw submitted data so cross-field rules can see it.
    """
    context = dict(context or {})
    context.setdefault('form', data)
    values = {}
    errors = []

    for field in form:
        value = data.get(field.name, '')
        if value is None:
            value = ''
        for rule in field.rules:
            try:
                value = rule(value, context)
            except RuleViolation as violation:
                errors.append(FieldError(field.name, violation.message))
                break
        values[field.name] = value

    return ValidationResult(values, errors)


# ----------------------------------------------------------------------
# Rule builders
# ----------------------------------------------------------------------

def trim():
    def rule(value, context):
        return value.strip()
    return rule


def length(min_length=0, max_length=None, message='Invalid length'):
    def rule(value, context):
        if len(value) < min_length or (max_length is not None and len(value) > max_length):
            raise RuleViolation(message)
        return value
    return rule


def alphanumeric(message='Must contain only letters and numbers'):
    def rule(value, context):
        if not value.isalnum() or not value.isascii():
            raise RuleViolation(message)
        return value
    return rule


def escape():
    """Replace ``& < > " '`` with HTML entities.

    The result is a Markup string, so templates echoing it back do not
    escape it a second time.
    """
    def rule(value, context):
        return html_escape(value)
    return rule


def equals_field(other, message='Values do not match'):
    def rule(value, context):
        if value != context['form'].get(other, ''):
            raise RuleViolation(message)
        return value
    return rule


def username_available(message='Username is taken'):
    def rule(value, context):
        find_user = context.get('find_user', store.find_user)
        if find_user(value) is not None:
            raise RuleViolation(message)
        return value
    return rule
