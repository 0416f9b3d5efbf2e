"""Shared API dependencies for authentication and common functionality."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from huddle.db.session import get_db
from huddle.schemas.user import Claims
from huddle.services.auth import AuthService, get_auth_service
from huddle.services.feed import FeedService, get_feed_service

# Missing or non-bearer headers are reported by the auth service, not FastAPI.
bearer_scheme = HTTPBearer(auto_error=False)

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]


def get_auth_service_dep() -> AuthService:
    return get_auth_service()


def get_feed_service_dep() -> FeedService:
    return get_feed_service()


AuthServiceDep = Annotated[AuthService, Depends(get_auth_service_dep)]
FeedServiceDep = Annotated[FeedService, Depends(get_feed_service_dep)]


def get_current_claims(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
    auth_service: AuthServiceDep,
) -> Claims:
    """Return the identity carried by the request's bearer token.

    Args:
        credentials: Parsed ``Authorization: Bearer`` header, if any
        auth_service: Service holding the signing configuration

    Returns:
        Claims embedded in the verified token

    Raises:
        AuthError: If no token was sent or the token is invalid or expired
    """
    token = credentials.credentials if credentials is not None else None
    return auth_service.verify(token)


# Type alias for current identity dependency
CurrentClaimsDep = Annotated[Claims, Depends(get_current_claims)]
