"""
Bearer token handling.

Tokens are issued by the upstream auth service with ``sub`` set to the
integer user id; this service only verifies them. ``create_access_token``
mirrors the issuer's format and is used by the test suite and local tooling.
"""
from datetime import datetime, timedelta, timezone
from typing import Optional, Any
from jose import JWTError, jwt

from app.core.config import settings

ACCESS_TOKEN_TYPE = "access"


def create_access_token(
    data: dict[str, Any],
    expires_delta: Optional[timedelta] = None,
) -> str:
    """
    Create a JWT access token.

    Args:
        data: Payload data to encode in the token
        expires_delta: Custom expiration time

    Returns:
        Encoded JWT token string
    """
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    )
    to_encode.update({"exp": expire, "type": ACCESS_TOKEN_TYPE})
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def decode_token(token: str) -> Optional[dict[str, Any]]:
    """Decode and validate a JWT; None if the signature or expiry is bad."""
    try:
        return jwt.decode(
            token,
            settings.secret_key,
            algorithms=[settings.algorithm],
        )
    except JWTError:
        return None


def verify_token_type(payload: dict[str, Any], expected_type: str) -> bool:
    """Verify that a token is of the expected type."""
    return payload.get("type") == expected_type


def user_id_from_token(token: str) -> Optional[int]:
    """
    The user id carried by a valid access token.

    Returns None for a bad signature, an expired token, a non-access token or
    a ``sub`` that isn't an integer.
    """
    payload = decode_token(token)
    if not payload or not verify_token_type(payload, ACCESS_TOKEN_TYPE):
        return None
    try:
        return int(payload.get("sub"))
    except (TypeError, ValueError):
        return None
