"""
Security utilities for authentication.

Provides password hashing (bcrypt) and signing of session tokens (JWT).
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from jwt.exceptions import InvalidTokenError
from passlib.context import CryptContext

from workconnect.core.config import settings

# Password hashing context using bcrypt
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a hashed password.

    Args:
        plain_password: The plain text password to verify
        hashed_password: The hashed password to compare against

    Returns:
        True if password matches, False otherwise
    """
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password using bcrypt."""
    return pwd_context.hash(password)


def create_session_token(
    session_id: str,
    secret_key: str,
    algorithm: str,
    expires_delta: timedelta,
) -> str:
    """
    Wrap a server-side session id in a signed, expiring token.

    The token carries no user data; it only proves the session id was
    issued by this server.
    """
    now = datetime.now(timezone.utc)
    to_encode = {"sid": session_id, "iat": now, "exp": now + expires_delta}
    return jwt.encode(to_encode, secret_key, algorithm=algorithm)


def decode_session_token(
    token: str,
    secret_key: str,
    algorithm: str,
    verify_exp: bool = True,
) -> Optional[str]:
    """
    Return the session id inside a token, or None if the token is invalid,
    expired or was signed with another key.
    """
    try:
        payload = jwt.decode(
            token,
            secret_key,
            algorithms=[algorithm],
            options={"verify_exp": verify_exp},
        )
    except InvalidTokenError:
        return None
    session_id = payload.get("sid")
    if not isinstance(session_id, str):
        return None
    return session_id
