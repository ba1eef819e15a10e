"""Password hashing and bearer-token helpers."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt
from passlib.context import CryptContext
from pydantic import BaseModel, ValidationError

from models.user import User

ALGORITHM = "HS256"

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=10)


class InvalidTokenError(Exception):
    """The token is malformed, forged, expired or missing claims."""


class TokenClaims(BaseModel):
    """Identity carried inside an access token."""

    id: str
    email: str
    username: str


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, hashed: str) -> bool:
    try:
        return pwd_context.verify(password, hashed)
    except ValueError:
        # Unrecognised or corrupt hash.
        return False


def create_access_token(
    user: User,
    secret: str,
    expires_delta: timedelta,
    now: Optional[datetime] = None,
) -> str:
    issued_at = now or datetime.now(timezone.utc)
    payload = {
        "id": user.id,
        "email": user.email,
        "username": user.username,
        "iat": issued_at,
        "exp": issued_at + expires_delta,
    }
    return jwt.encode(payload, secret, algorithm=ALGORITHM)


def decode_access_token(token: str, secret: str) -> TokenClaims:
    """Verify signature and expiry and return the embedded identity."""

    try:
        payload = jwt.decode(token, secret, algorithms=[ALGORITHM])
        return TokenClaims.model_validate(payload)
    except (JWTError, ValidationError) as exc:
        raise InvalidTokenError(str(exc)) from exc


def bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Extract the token from an ``Authorization: Bearer <token>`` header."""

    if not authorization:
        return None
    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        return None
    return parts[1]


__all__ = [
    "InvalidTokenError",
    "TokenClaims",
    "hash_password",
    "verify_password",
    "create_access_token",
    "decode_access_token",
    "bearer_token",
]
