"""Get space use case."""

from pydantic import BaseModel

from knowspace.application.usecase.base import parse_uuid
from knowspace.application.usecase.space.detail import SpaceDetail, SpaceDetailBuilder
from knowspace.domain.service import AlertService, SpaceService
from knowspace.domain.value import SpaceId


class GetSpaceRequest(BaseModel):
    """Get space request."""

    space_id: str  # UUID string


class GetSpaceUseCase:
    """Use case for getting a single space with all of its alerts."""

    def __init__(
        self,
        space_service: SpaceService,
        alert_service: AlertService,
        detail_builder: SpaceDetailBuilder,
    ) -> None:
        """Initialize get space use case.

        Args:
            space_service: Space domain service
            alert_service: Alert domain service
            detail_builder: Space detail builder
        """
        self.space_service = space_service
        self.alert_service = alert_service
        self.detail_builder = detail_builder

    async def execute(self, request: GetSpaceRequest) -> SpaceDetail:
        """Execute get space flow.

        Args:
            request: Request with the space ID

        Returns:
            Space detail

        Raises:
            InvalidInputError: If the space ID is malformed
            NotFoundError: If the space does not exist
        """
        space = await self.space_service.get_by_id(
            SpaceId(parse_uuid(request.space_id, "space_id"))
        )
        alerts = await self.alert_service.list_for_space(space.id)
        return await self.detail_builder.build(
            space, alerts, self.detail_builder.new_cache()
        )
