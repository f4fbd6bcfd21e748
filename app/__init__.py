"""
Members Only Board - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

import os

from flask import Flask
from app.extensions import db, login_manager
from app.config import Config


def create_app(config_class=Config):
    """Create and configure the Flask application.

    Args:
        config_class: Configuration class to use (default: Config)

    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Initialize extensions
    from app.services.credentials import credentials

    db.init_app(app)
    login_manager.init_app(app)
    login_manager.login_view = 'auth.log_in'
    credentials.init_app(app)

    # Register blueprints
    from app.auth import auth_bp
    from app.board import board_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(board_bp)

    from app.errors import register_error_handlers
    register_error_handlers(app)

    # User loader for Flask-Login
    @login_manager.user_loader
    def load_user(user_id):
        from app.services import store
        return store.get_user(int(user_id))

    # Timestamps are stored in UTC
    @app.template_filter('timestamp')
    def format_timestamp(value):
        return value.strftime('%Y-%m-%d %H:%M') if value else ''

    # Create database tables
    with app.app_context():
        if app.config['SQLALCHEMY_DATABASE_URI'].startswith('sqlite:///') and not app.testing:
            os.makedirs(os.path.join(config_class.basedir, 'instance'), exist_ok=True)
        db.create_all()

    return app
