# src/huddle/services/__init__.py
"""Business logic services for the Huddle application."""

from .auth import AuthResult, AuthService
from .feed import FeedService

__all__ = [
    "AuthResult",
    "AuthService",
    "FeedService",
]
