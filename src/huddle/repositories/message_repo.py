"""Data access helpers for chat messages."""
from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from huddle.models.message import Message

__all__ = ["MessageRepository"]


class MessageRepository:
    """Thin wrapper around database access for message entities."""

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def create(self, *, user_id: int, username: str, text: str) -> Message:
        """Insert a message, commit, and return it with its generated fields."""
        message = Message(user_id=user_id, username=username, message=text)
        self.session.add(message)
        try:
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        self.session.refresh(message)
        return message

    def list_recent(self, limit: int) -> list[Message]:
        """Return the newest ``limit`` messages, oldest first.

        Equal timestamps keep insertion (primary key) order.
        """
        result = self.session.execute(
            select(Message)
            .order_by(Message.created_at.desc(), Message.id.desc())
            .limit(limit)
        )
        return list(reversed(result.scalars().all()))
