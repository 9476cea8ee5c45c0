"""Password hashing and bearer token helpers."""

import uuid
from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
from jose import JWTError, jwt

from trainlikepros.core.config import get_settings

settings = get_settings()


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a password against its bcrypt hash."""
    try:
        return bcrypt.checkpw(plain_password.encode(), hashed_password.encode())
    except (ValueError, TypeError):  # malformed hash
        return False


def get_password_hash(password: str) -> str:
    return bcrypt.hashpw(password.encode(), bcrypt.gensalt()).decode()


def create_access_token(
    subject: str,
    *,
    role: str,
    expires_delta: timedelta | None = None,
) -> str:
    """Issue a signed JWT carrying the user id and role."""
    lifetime = expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    claims: dict[str, Any] = {
        "sub": subject,
        "role": role,
        "exp": datetime.now(UTC) + lifetime,
    }
    return jwt.encode(claims, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> dict[str, Any]:
    """Decode a JWT token, raising JWTError on failure."""
    return jwt.decode(
        token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm]
    )


def subject_from_token(token: str) -> uuid.UUID:
    """Return the user id encoded in ``token``.

    Raises ``JWTError`` when the token is invalid or carries no usable subject.
    """
    payload = decode_access_token(token)
    subject = payload.get("sub")
    if subject is None:
        raise JWTError("Token has no subject")
    try:
        return uuid.UUID(str(subject))
    except ValueError as exc:
        raise JWTError("Token subject is not a user id") from exc
