"""
Security utilities for LeadFlow API.
Consolidated JWT and password handling.
"""
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
import bcrypt

from leadflow.config import settings
from leadflow.core.exceptions import TokenExpiredError, TokenInvalidError, ValidationError


# bcrypt only accepts this many bytes of input
BCRYPT_MAX_BYTES = 72


def password_too_long(password: str) -> bool:
    return len(password.encode('utf-8')) > BCRYPT_MAX_BYTES


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash. Over-long input never matches."""
    if password_too_long(plain_password):
        return False
    return bcrypt.checkpw(
        plain_password.encode('utf-8'),
        hashed_password.encode('utf-8')
    )


def get_password_hash(password: str) -> str:
    """Hash a password."""
    if password_too_long(password):
        raise ValidationError(f"cannot be longer than {BCRYPT_MAX_BYTES} bytes", "password")
    salt = bcrypt.gensalt()
    return bcrypt.hashpw(password.encode('utf-8'), salt).decode('utf-8')


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """
    Create a signed access token.

    Args:
        data: Principal claims (sub, email, name, role)
        expires_delta: Custom expiration time, defaults to ACCESS_TOKEN_EXPIRE_HOURS

    Returns:
        Encoded JWT string
    """
    to_encode = data.copy()

    if expires_delta is None:
        expires_delta = timedelta(hours=settings.ACCESS_TOKEN_EXPIRE_HOURS)
    now = datetime.now(timezone.utc)

    to_encode.update({
        "exp": now + expires_delta,
        "iat": now,
        "type": "access",
    })

    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_token(token: str) -> dict:
    """
    Decode and validate an access token.

    Raises:
        TokenExpiredError: the token is past its expiry
        TokenInvalidError: bad signature, malformed token or wrong token type
    """
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except jwt.ExpiredSignatureError:
        raise TokenExpiredError("Access token")
    except jwt.InvalidTokenError:
        raise TokenInvalidError("Access token")

    if payload.get("type") != "access":
        raise TokenInvalidError("Access token")
    return payload
