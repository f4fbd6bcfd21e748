"""
Board Blueprint

Message list, message posting and admin deletion.
"""

from flask import Blueprint

board_bp = Blueprint('board', __name__)

from app.board import routes  # noqa: E402, F401
