"""Get all spaces use case."""

from pydantic import BaseModel

from knowspace.application.usecase.base import parse_uuid
from knowspace.application.usecase.space.detail import SpaceDetail, SpaceDetailBuilder
from knowspace.domain.service import AlertService, SpaceService
from knowspace.domain.value import UserId


class GetAllSpacesRequest(BaseModel):
    """Get all spaces request."""

    user_id: str  # User ID from authenticated user


class SpaceListResponse(BaseModel):
    """List of spaces with detail."""

    spaces: list[SpaceDetail]
    total: int


class GetAllSpacesUseCase:
    """Use case for listing every space with its detail.

    Alerts are limited to the caller's unread ones.
    """

    def __init__(
        self,
        space_service: SpaceService,
        alert_service: AlertService,
        detail_builder: SpaceDetailBuilder,
    ) -> None:
        """Initialize get all spaces use case.

        Args:
            space_service: Space domain service
            alert_service: Alert domain service
            detail_builder: Space detail builder
        """
        self.space_service = space_service
        self.alert_service = alert_service
        self.detail_builder = detail_builder

    async def execute(self, request: GetAllSpacesRequest) -> SpaceListResponse:
        """Execute get all spaces flow.

        Args:
            request: Request with the caller's ID

        Returns:
            Every space, oldest first
        """
        user_id = UserId(parse_uuid(request.user_id, "user_id"))
        spaces = await self.space_service.list_all()

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
