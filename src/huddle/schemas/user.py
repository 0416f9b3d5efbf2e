"""User-related Pydantic schemas."""

from pydantic import BaseModel, ConfigDict, Field


class RegisterRequest(BaseModel):
    """Schema for account registration.

    Fields are optional at the schema level so that missing values are
    reported by the auth service with a 400 rather than a 422.
    """

    username: str | None = Field(None, description="Unique display name")
    email: str | None = Field(None, description="Unique email address used to log in")
    password: str | None = Field(None, description="Plaintext password (at least 6 characters)")


class LoginRequest(BaseModel):
    """Schema for login submissions."""

    email: str | None = Field(None, description="Registered email address")
    password: str | None = Field(None, description="Account password")


class PublicUser(BaseModel):
    """User fields that are safe to return to clients."""

    id: int
    username: str
    email: str

    model_config = ConfigDict(from_attributes=True)


class Claims(BaseModel):
    """Identity embedded in a verified session token."""

    id: int
    username: str
    email: str

    model_config = ConfigDict(frozen=True)


class AuthResponse(BaseModel):
    """Response returned after successful registration or login."""

    message: str = Field(..., description="Human readable outcome")
    token: str = Field(..., description="JWT bearer token valid for 24 hours")
    user: PublicUser


class VerifyResponse(BaseModel):
    """Response for a successful token check."""

    valid: bool = True
    user: Claims
