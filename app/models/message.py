"""
Message Model
"""

from datetime import datetime, timezone

from app.extensions import db


def _utcnow():
    return datetime.now(timezone.utc)


class Message(db.Model):
    """A post on the board.

    ``title`` and ``text`` are stored HTML-escaped, so their column sizes
    leave room for entity expansion. ``username`` is the author's username
    copied at creation time; there is no foreign key to ``users``.
    """
    __tablename__ = 'messages'

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(120), nullable=False)
    text = db.Column(db.Text, nullable=False)
    username = db.Column(db.String(12), nullable=False, index=True)
    timestamp = db.Column(db.DateTime, default=_utcnow, nullable=False)

    def __repr__(self):
        return f'<Message {self.id} by {self.username}>'
