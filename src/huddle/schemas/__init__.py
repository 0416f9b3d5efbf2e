# src/huddle/schemas/__init__.py
"""
Pydantic schemas for API request/response models.

These schemas define the structure of API data for serialization and validation.
"""

from .message import MessageCreate, MessageRecord, MessageSentResponse
from .user import AuthResponse, Claims, LoginRequest, PublicUser, RegisterRequest, VerifyResponse

__all__ = [
    "MessageCreate", "MessageRecord", "MessageSentResponse",
    "AuthResponse", "Claims", "LoginRequest", "PublicUser", "RegisterRequest", "VerifyResponse",
]
