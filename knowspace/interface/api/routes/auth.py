"""Authentication routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header

from knowspace.application.usecase.auth import (
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
)
from knowspace.interface.api.auth import authenticate

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


@router.get("/me", response_model=GetCurrentUserResponse)
async def get_me(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> GetCurrentUserResponse:
    """Get the current authenticated user.

    The token is read from the ``Authorization: Bearer`` header, falling
    back to the ``auth_token`` cookie.

    Raises:
        UnauthorizedError: If the request has no valid credential (401)
    """
    return await authenticate(get_current_user_use_case, authorization, auth_token)
