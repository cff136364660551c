"""Get subscribed spaces use case."""

from pydantic import BaseModel

from knowspace.application.usecase.base import parse_uuid
from knowspace.application.usecase.space.detail import SpaceDetailBuilder
from knowspace.application.usecase.space.get_all_spaces import SpaceListResponse
from knowspace.domain.service import AlertService, SpaceService
from knowspace.domain.value import UserId


class GetSubscribedSpacesRequest(BaseModel):
    """Get subscribed spaces request."""

    user_id: str  # User ID from authenticated user


class GetSubscribedSpacesUseCase:
    """Use case for listing the spaces a user subscribes to directly."""

    def __init__(
        self,
        space_service: SpaceService,
        alert_service: AlertService,
        detail_builder: SpaceDetailBuilder,
    ) -> None:
        """Initialize get subscribed spaces use case.

        Args:
            space_service: Space domain service
            alert_service: Alert domain service
            detail_builder: Space detail builder
        """
        self.space_service = space_service
        self.alert_service = alert_service
        self.detail_builder = detail_builder

    async def execute(self, request: GetSubscribedSpacesRequest) -> SpaceListResponse:
        """Execute get subscribed spaces flow.

        Args:
            request: Request with the caller's ID

        Returns:
            Subscribed spaces with detail and the caller's unread alerts
        """
        user_id = UserId(parse_uuid(request.user_id, "user_id"))
        spaces = await self.space_service.list_subscribed(user_id)

        users = self.detail_builder.new_cache()
        details = [
            await self.detail_builder.build(
                space,
                await self.alert_service.list_for_space(
                    space.id, user_id=user_id, unread_only=True
                ),
                users,
            )
            for space in spaces
        ]
        return SpaceListResponse(spaces=details, total=len(details))
