# src/huddle/models/__init__.py
"""SQLAlchemy models for the Huddle application."""

from .message import Message
from .user import User

__all__ = ["Message", "User"]
