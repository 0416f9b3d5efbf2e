"""Service-level helpers for the shared message feed."""
from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from huddle.core.errors import UnexpectedError, ValidationError
from huddle.core.settings import settings
from huddle.repositories.message_repo import MessageRepository
from huddle.schemas.message import MessageRecord
from huddle.schemas.user import Claims

logger = logging.getLogger(__name__)


class FeedService:
    """Appends messages and serves the most recent window.

    Clients poll :meth:`list_recent`; there is no push channel and no
    server-side de-duplication against optimistic client appends.
    """

    def __init__(self, *, window_size: int = 50, max_length: int = 500) -> None:
        self.window_size = window_size
        self.max_length = max_length

    def post_message(self, db: Session, author: Claims, text: str | None) -> MessageRecord:
        """Store ``text`` attributed to the verified ``author``.

        Args:
            db: Active database session.
            author: Claims from a verified token. The author id and username
                are taken from here and nowhere else.
            text: Raw message text; surrounding whitespace is trimmed.

        Returns:
            The stored message with its server-assigned id and timestamp.

        Raises:
            ValidationError: The text is empty after trimming or too long.
            UnexpectedError: The insert failed.
        """
        body = (text or "").strip()
        if not body:
            raise ValidationError("Message cannot be empty")
        if len(body) > self.max_length:
            raise ValidationError(f"Message must be at most {self.max_length} characters")

        try:
            message = MessageRepository(db).create(
                user_id=author.id,
                username=author.username,
                text=body,
            )
        except SQLAlchemyError as err:
            logger.exception("Failed to store message for user id=%s", author.id)
            raise UnexpectedError("Failed to send message") from err

        logger.debug("Stored message id=%s from user id=%s", message.id, author.id)
        return MessageRecord.model_validate(message)

    def list_recent(self, db: Session) -> list[MessageRecord]:
        """Return up to ``window_size`` newest messages in ascending order."""
        try:
            messages = MessageRepository(db).list_recent(self.window_size)
        except SQLAlchemyError as err:
            logger.exception("Failed to fetch messages")
            raise UnexpectedError("Failed to fetch messages") from err
        return [MessageRecord.model_validate(message) for message in messages]


def get_feed_service() -> FeedService:
    """Return a feed service using the configured window and length limits."""
    return FeedService(
        window_size=settings.feed_window_size,
        max_length=settings.message_max_length,
    )
