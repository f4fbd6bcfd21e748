"""
Flask Extensions

Shared extension instances, bound to the application in create_app().
"""

from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager

# Database instance
db = SQLAlchemy()

# Session-based login for board users
login_manager = LoginManager()
