# src/huddle/schemas/message.py
"""Message-related Pydantic schemas."""

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class MessageCreate(BaseModel):
    """Schema for posting a message.

    Unknown fields (for example a client supplied ``username``) are ignored;
    authorship always comes from the verified token.
    """

    message: str | None = Field(None, description="Message text, trimmed server-side")

    model_config = ConfigDict(extra="ignore")


class MessageRecord(BaseModel):
    """A persisted message as returned by the feed."""

    id: int
    username: str
    message: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @field_validator("created_at")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        """Attach UTC to naive timestamps read back from SQLite."""
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value


class MessageSentResponse(BaseModel):
    """Response returned after a message was stored."""

    message: str = Field(..., description="Human readable outcome")
    data: MessageRecord
