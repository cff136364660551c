"""Get current user use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from knowspace.domain.error import NotFoundError, UnauthorizedError
from knowspace.domain.service import JWTService, UserService
from knowspace.util.jwt import JWTError


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str | None = None  # JWT token from header or cookie


class GetCurrentUserResponse(BaseModel):
    """Get current user response."""

    user_id: str
    username: str
    email: str
    is_admin: bool
    created_at: datetime


class GetCurrentUserUseCase:
    """Use case for resolving the authenticated user of a request.

    Every authenticated route runs this first and passes the resulting user
    ID on explicitly.
    """

    def __init__(self, jwt_service: JWTService, user_service: UserService) -> None:
        """Initialize get current user use case.

        Args:
            jwt_service: JWT token domain service
            user_service: User domain service
        """
        self.jwt_service = jwt_service
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Execute get current user flow.

        Steps:
        1. Verify JWT token via JWT service
        2. Load the user named by the token
        3. Return user info

        Args:
            request: Request with JWT token

        Returns:
            User information if token is valid and user exists

        Raises:
            UnauthorizedError: If the token is missing, invalid or expired,
                or the user no longer exists
        """
        if not request.token:
            raise UnauthorizedError()

        try:
            user_id = self.jwt_service.resolve_user_id(request.token)
        except JWTError as e:
            raise UnauthorizedError(str(e))

        try:
            user = await self.user_service.get_by_id(user_id)
        except NotFoundError:
            logfire.warn("Token names a missing user", user_id=str(user_id))
            raise UnauthorizedError("User no longer exists")

        return GetCurrentUserResponse(
            user_id=str(user.id),
            username=user.username.root,
            email=user.email,
            is_admin=user.is_admin,
            created_at=user.created_at,
        )
