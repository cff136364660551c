"""Session token encoding.

Tokens are HS256 JWTs carrying the user's id and display name. They
expire after ``AuthSettings.jwt_expiry_days``.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel, ConfigDict

from knowspace.config import AuthSettings

REQUIRED_CLAIMS = ["user_id", "username", "exp", "iat"]


class TokenPayload(BaseModel):
    """Claims of a verified session token."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    user_id: str
    username: str
    iat: datetime
    exp: datetime


class JWTError(Exception):
    """Token is malformed, forged or expired."""


def create_token(user_id: str, username: str, settings: AuthSettings) -> str:
    """Sign a session token for a user.

    Args:
        user_id: User ID
        username: Display name
        settings: Signing secret, algorithm and expiry

    Returns:
        Encoded token
    """
    issued_at = datetime.now(timezone.utc)
    claims = {
        "user_id": user_id,
        "username": username,
        "iat": issued_at,
        "exp": issued_at + timedelta(days=settings.jwt_expiry_days),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Check a token's signature and expiry and return its claims.

    Raises:
        JWTError: If the token is expired, forged, malformed or lacks a claim
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": REQUIRED_CLAIMS},
        )
    except jwt.ExpiredSignatureError as e:
        raise JWTError("Token has expired") from e
    except jwt.InvalidTokenError as e:
        raise JWTError("Invalid token") from e

    try:
        return TokenPayload(**claims)
    except ValueError as e:
        raise JWTError("Invalid token") from e
