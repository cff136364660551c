"""Toggle subscription use case."""

from pydantic import BaseModel

from knowspace.application.usecase.base import parse_uuid
from knowspace.domain.service import SubscriptionService
from knowspace.domain.value import SpaceId, UserId


class ToggleSubscriptionRequest(BaseModel):
    """Toggle subscription request."""

    user_id: str  # User ID from authenticated user
    space_id: str


class ToggleSubscriptionResponse(BaseModel):
    """Toggle subscription response."""

    space_id: str
    subscribed: bool


class ToggleSubscriptionUseCase:
    """Use case for subscribing to or unsubscribing from a space."""

    def __init__(self, subscription_service: SubscriptionService) -> None:
        """Initialize toggle subscription use case.

        Args:
            subscription_service: Subscription domain service
        """
        self.subscription_service = subscription_service

    async def execute(
        self, request: ToggleSubscriptionRequest
    ) -> ToggleSubscriptionResponse:
        """Execute toggle subscription flow.

        Args:
            request: Request with the caller and the space

        Returns:
            Whether the caller is now subscribed

        Raises:
            InvalidInputError: If an ID is malformed
            NotFoundError: If the space does not exist
        """
        space_id = SpaceId(parse_uuid(request.space_id, "space_id"))
        subscribed = await self.subscription_service.toggle_subscription(
            user_id=UserId(parse_uuid(request.user_id, "user_id")),
            space_id=space_id,
        )
        return ToggleSubscriptionResponse(space_id=str(space_id), subscribed=subscribed)
