"""
Configuration settings for the Members Only message board
"""
import os


class Config:
    """Flask application configuration"""

    # Flask secret key for sessions
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production-12345'

    # Database configuration
    basedir = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        'sqlite:///' + os.path.join(basedir, 'instance', 'members_only.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Passphrases for promotion to member / admin. Left unset, the
    # corresponding gate can never be passed.
    MEMBER_PASS = os.environ.get('MEMBER_PASS')
    ADMIN_PASS = os.environ.get('ADMIN_PASS')

    # werkzeug hash method (algorithm and cost factor)
    PASSWORD_HASH_METHOD = os.environ.get('PASSWORD_HASH_METHOD') or 'pbkdf2:sha256'

    BOARD_TITLE = 'Members Only Chat'


class TestConfig(Config):
    """Testing configuration"""
    TESTING = True
    SECRET_KEY = 'test-secret-key'
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    MEMBER_PASS = 'letmein'
    ADMIN_PASS = 'rootpass'
    PASSWORD_HASH_METHOD = 'pbkdf2:sha256:1000'
