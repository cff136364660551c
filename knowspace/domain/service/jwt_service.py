"""JWT token domain service."""

from uuid import UUID

import logfire

from knowspace.config import AuthSettings
from knowspace.domain.value import UserId
from knowspace.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Issues and checks session tokens with the configured secret."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def create_token(self, user_id: str, username: str) -> str:
        """Sign a session token for a user.

        Args:
            user_id: User ID
            username: Display name carried for the client

        Returns:
            Encoded token, valid for ``jwt_expiry_days``
        """
        with logfire.span("jwt_service.create_token", user_id=user_id):
            return create_token(user_id, username, self.auth_settings)

    def verify_token(self, token: str) -> TokenPayload:
        """Check a token and return its claims.

        Raises:
            JWTError: If the token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                return verify_token(token, self.auth_settings)
            except JWTError as e:
                logfire.warn("Session token rejected", reason=str(e))
                raise

    def resolve_user_id(self, token: str) -> UserId:
        """Verify a token and return the user it was issued to.

        Raises:
            JWTError: If the token is invalid, expired or names no valid user ID
        """
        payload = self.verify_token(token)
        try:
            return UserId(UUID(payload.user_id))
        except ValueError as e:
            logfire.warn("Session token carries a malformed user ID")
            raise JWTError("Invalid token") from e
