"""Domain errors raised by the service layer.

Each error carries a message that is safe to show to the caller and the HTTP
status the API boundary answers with.
"""

from __future__ import annotations

from fastapi import status

__all__ = [
    "HuddleError",
    "ValidationError",
    "ConflictError",
    "AuthError",
    "UnexpectedError",
]


class HuddleError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(HuddleError):
    """Missing, malformed or too-short input."""

    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(HuddleError):
    """A uniqueness constraint rejected the write."""

    status_code = status.HTTP_400_BAD_REQUEST


class AuthError(HuddleError):
    """Missing, malformed, expired or mismatched credentials."""

    status_code = status.HTTP_401_UNAUTHORIZED


class UnexpectedError(HuddleError):
    """Storage or infrastructure failure."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
