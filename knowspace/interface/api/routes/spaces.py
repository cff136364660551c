"""Space routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header
from pydantic import BaseModel

from knowspace.application.usecase.auth import GetCurrentUserUseCase
from knowspace.application.usecase.space import (
    GetAllSpacesRequest,
    GetAllSpacesUseCase,
    GetSpaceRequest,
    GetSpaceTitlesUseCase,
    GetSpaceUseCase,
    GetSubscribedHierarchyRequest,
    GetSubscribedHierarchyUseCase,
    GetSubscribedSpacesRequest,
    GetSubscribedSpacesUseCase,
    SpaceDetail,
    SpaceListResponse,
    SpaceTreeResponse,
    ToggleSubscriptionRequest,
    ToggleSubscriptionResponse,
    ToggleSubscriptionUseCase,
)
from knowspace.interface.api.auth import authenticate

router = APIRouter(prefix="/spaces", tags=["spaces"], route_class=DishkaRoute)


class SubscribeAPIRequest(BaseModel):
    """API request for toggling a subscription."""

    space_id: str


@router.get("/all", response_model=SpaceListResponse)
async def get_all_spaces(
    get_all_spaces_use_case: FromDishka[GetAllSpacesUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> SpaceListResponse:
    """List every space with members, content, threads and the caller's unread alerts."""
    user = await authenticate(get_current_user_use_case, authorization, auth_token)
    return await get_all_spaces_use_case.execute(
        GetAllSpacesRequest(user_id=user.user_id)
    )


@router.get("/subscribed", response_model=SpaceListResponse)
async def get_subscribed_spaces(
    get_subscribed_spaces_use_case: FromDishka[GetSubscribedSpacesUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> SpaceListResponse:
    """List the spaces the caller subscribes to, with detail."""
    user = await authenticate(get_current_user_use_case, authorization, auth_token)
    return await get_subscribed_spaces_use_case.execute(
        GetSubscribedSpacesRequest(user_id=user.user_id)
    )


@router.get("/subscribed-hierarchy", response_model=SpaceTreeResponse)
async def get_subscribed_hierarchy(
    get_subscribed_hierarchy_use_case: FromDishka[GetSubscribedHierarchyUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> SpaceTreeResponse:
    """Get the navigation tree pruned to the caller's subscriptions.

    Parents of subscribed spaces are kept so every subscribed space stays
    reachable from a root.
    """
    user = await authenticate(get_current_user_use_case, authorization, auth_token)
    return await get_subscribed_hierarchy_use_case.execute(
        GetSubscribedHierarchyRequest(user_id=user.user_id)
    )


@router.get("/titles", response_model=SpaceTreeResponse)
async def get_space_titles(
    get_space_titles_use_case: FromDishka[GetSpaceTitlesUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> SpaceTreeResponse:
    """Get the full navigation tree of space names."""
    await authenticate(get_current_user_use_case, authorization, auth_token)
    return await get_space_titles_use_case.execute()


@router.post("/subscribe", response_model=ToggleSubscriptionResponse)
async def toggle_subscription(
    request: SubscribeAPIRequest,
    toggle_subscription_use_case: FromDishka[ToggleSubscriptionUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> ToggleSubscriptionResponse:
    """Subscribe to a space, or unsubscribe if already subscribed."""
    user = await authenticate(get_current_user_use_case, authorization, auth_token)
    return await toggle_subscription_use_case.execute(
        ToggleSubscriptionRequest(user_id=user.user_id, space_id=request.space_id)
    )


@router.get("/{space_id}", response_model=SpaceDetail)
async def get_space(
    space_id: str,
    get_space_use_case: FromDishka[GetSpaceUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> SpaceDetail:
    """Get a single space with all of its alerts."""
    await authenticate(get_current_user_use_case, authorization, auth_token)
    return await get_space_use_case.execute(GetSpaceRequest(space_id=space_id))
