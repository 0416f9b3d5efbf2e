"""Data access helpers for registered users."""
from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from huddle.models.user import User

__all__ = ["UserRepository"]


class UserRepository:
    """Thin wrapper around database access for user records."""

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def get_by_email(self, email: str) -> User | None:
        """Return the user registered with ``email``."""
        return self.session.execute(
            select(User).where(User.email == email)
        ).scalars().first()

    def create(self, *, username: str, email: str, password_hash: str) -> User:
        """Insert a user and commit.

        Raises:
            sqlalchemy.exc.IntegrityError: If the username or email is taken.
                The session is rolled back before the error propagates.
        """
        user = User(username=username, email=email, password_hash=password_hash)
        self.session.add(user)
        try:
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        self.session.refresh(user)
        return user
