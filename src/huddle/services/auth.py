"""Account registration, login and session token verification."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from jose import JWTError
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from huddle.core import security
from huddle.core.errors import AuthError, ConflictError, UnexpectedError, ValidationError
from huddle.core.settings import TokenSettings, settings
from huddle.models.user import User
from huddle.repositories.user_repo import UserRepository
from huddle.schemas.user import Claims, PublicUser

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"
INVALID_TOKEN = "Invalid token"
NO_TOKEN = "No token provided"


@dataclass(frozen=True)
class AuthResult:
    """A sanitized user together with a freshly issued token."""

    user: PublicUser
    token: str


class AuthService:
    """Issues and checks stateless session tokens.

    Tokens are trusted on signature and expiry alone; the claims are not
    re-read from the database, so an issued token stays valid until it expires.
    """

    def __init__(self, token_settings: TokenSettings, *, password_min_length: int = 6) -> None:
        self._token_settings = token_settings
        self._password_min_length = password_min_length

    def register(
        self,
        db: Session,
        username: str | None,
        email: str | None,
        password: str | None,
    ) -> AuthResult:
        """Create an account and return it with a session token.

        Raises:
            ValidationError: A field is missing or the password is too short.
            ConflictError: The username or email is already registered.
            UnexpectedError: The database write failed for another reason.
        """
        username = (username or "").strip()
        email = (email or "").strip()
        if not username or not email or not password:
            raise ValidationError("All fields are required")
        if len(password) < self._password_min_length:
            raise ValidationError(
                f"Password must be at least {self._password_min_length} characters"
            )

        password_hash = security.hash_password(password)
        repo = UserRepository(db)
        try:
            user = repo.create(username=username, email=email, password_hash=password_hash)
        except IntegrityError as err:
            raise ConflictError("Username or email already exists") from err
        except SQLAlchemyError as err:
            logger.exception("Registration failed")
            raise UnexpectedError("Registration failed") from err

        logger.info("Registered user id=%s", user.id)
        return self._result_for(user)

    def login(self, db: Session, email: str | None, password: str | None) -> AuthResult:
        """Check credentials and return the user with a fresh token.

        Unknown emails and wrong passwords fail with the same message.

        Raises:
            ValidationError: Email or password is missing.
            AuthError: The credentials do not match an account.
            UnexpectedError: The lookup failed.
        """
        email = (email or "").strip()
        if not email or not password:
            raise ValidationError("Email and password are required")

        try:
            user = UserRepository(db).get_by_email(email)
        except SQLAlchemyError as err:
            logger.exception("Login lookup failed")
            raise UnexpectedError("Login failed") from err

        if user is None or not security.verify_password(password, user.password_hash):
            logger.info("Rejected login attempt")
            raise AuthError(INVALID_CREDENTIALS)

        logger.info("User id=%s logged in", user.id)
        return self._result_for(user)

    def verify(self, token: str | None) -> Claims:
        """Return the claims of a valid token.

        Raises:
            AuthError: The token is absent, malformed, tampered with or expired.
        """
        if not token:
            raise AuthError(NO_TOKEN)
        try:
            payload = security.decode_token(token, self._token_settings)
            return Claims.model_validate(payload)
        except (JWTError, PydanticValidationError) as err:
            raise AuthError(INVALID_TOKEN) from err

    def issue_token(self, user: User | PublicUser) -> str:
        """Sign a 24-hour token carrying the user's id, username and email."""
        claims = {"id": user.id, "username": user.username, "email": user.email}
        return security.encode_token(claims, self._token_settings)

    def _result_for(self, user: User) -> AuthResult:
        public = PublicUser.model_validate(user)
        return AuthResult(user=public, token=self.issue_token(public))


def get_auth_service() -> AuthService:
    """Return an auth service bound to the configured signing key."""
    return AuthService(
        settings.token_settings(),
        password_min_length=settings.password_min_length,
    )
