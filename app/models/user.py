"""
User Model
"""

from flask_login import UserMixin

from app.extensions import db


class User(UserMixin, db.Model):
    """Board account. Flags only ever go from False to True."""
    __tablename__ = 'users'

    id = db.Column(db.Integer, primary_key=True)
    first_name = db.Column(db.String(100), nullable=False)
    last_name = db.Column(db.String(100), nullable=False)
    username = db.Column(db.String(12), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(255), nullable=False)
    is_member = db.Column(db.Boolean, default=False, nullable=False)
    is_admin = db.Column(db.Boolean, default=False, nullable=False)

    def __repr__(self):
        return f'<User {self.username}>'
