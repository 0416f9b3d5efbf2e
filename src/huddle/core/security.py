"""Password hashing and token signing primitives."""
from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Any

from jose import JWTError, jwt
from jose.utils import base64url_decode, base64url_encode
from passlib.context import CryptContext

from huddle.core.settings import TokenSettings, settings

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.bcrypt_rounds,
)


def hash_password(password: str) -> str:
    """Return a salted bcrypt hash of ``password``."""
    return pwd_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    """Check ``password`` against a stored hash.

    Unrecognised or corrupt hashes count as a mismatch.
    """
    try:
        return pwd_context.verify(password, password_hash)
    except (ValueError, TypeError):
        return False


def encode_token(
    claims: dict[str, Any],
    config: TokenSettings,
    *,
    now: datetime | None = None,
) -> str:
    """Sign ``claims`` with standard ``iat``/``exp`` fields added."""
    issued_at = now or datetime.now(UTC)
    to_encode: dict[str, Any] = dict(claims)
    to_encode["iat"] = issued_at
    to_encode["exp"] = issued_at + timedelta(minutes=config.expire_minutes)
    encoded_jwt: str = jwt.encode(
        to_encode,
        config.secret_key,
        algorithm=config.algorithm,
    )
    return encoded_jwt


def decode_token(token: str, config: TokenSettings) -> dict[str, Any]:
    """Validate signature and expiry and return the raw payload.

    Raises:
        jose.JWTError: If the token is malformed, tampered with or expired.
    """
    payload: dict[str, Any] = jwt.decode(
        token,
        config.secret_key,
        algorithms=[config.algorithm],
    )
    # The last base64url character of a signature carries unused bits that the
    # decoder drops; only the canonical encoding is accepted.
    signature = token.rsplit(".", 1)[-1]
    canonical = base64url_encode(base64url_decode(signature.encode("utf-8")))
    if canonical.decode("ascii") != signature:
        raise JWTError("Signature is not canonically encoded")
    return payload
