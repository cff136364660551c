"""Space navigation tree use cases."""

from pydantic import BaseModel

from knowspace.application.usecase.base import parse_uuid
from knowspace.domain.model import SpaceNode
from knowspace.domain.service import SpaceService
from knowspace.domain.value import UserId


class SpaceNodeItem(BaseModel):
    """Space tree node for API response.

    Recursive structure mirroring the domain model.
    """

    id: str
    name: str
    level: int
    children: list["SpaceNodeItem"]

    @classmethod
    def from_domain(cls, node: SpaceNode) -> "SpaceNodeItem":
        """Convert domain SpaceNode to response model.

        Args:
            node: Domain space tree node

        Returns:
            API response model with children recursively converted
        """
        return cls(
            id=str(node.id),
            name=node.name,
            level=node.level,
            children=[cls.from_domain(child) for child in node.children],
        )


class SpaceTreeResponse(BaseModel):
    """Space navigation tree response."""

    roots: list[SpaceNodeItem]


class GetSpaceTitlesUseCase:
    """Use case for getting the full space navigation tree."""

    def __init__(self, space_service: SpaceService) -> None:
        """Initialize get space titles use case.

        Args:
            space_service: Space domain service
        """
        self.space_service = space_service

    async def execute(self) -> SpaceTreeResponse:
        """Execute get space titles flow.

        Returns:
            Level 1 spaces with their nested children
        """
        tree = await self.space_service.get_tree()
        return SpaceTreeResponse(roots=[SpaceNodeItem.from_domain(n) for n in tree])


class GetSubscribedHierarchyRequest(BaseModel):
    """Get subscribed hierarchy request."""

    user_id: str  # User ID from authenticated user


class GetSubscribedHierarchyUseCase:
    """Use case for getting the navigation tree pruned to a user's subscriptions.

    Ancestors of subscribed spaces are kept so the tree stays navigable.
    """

    def __init__(self, space_service: SpaceService) -> None:
        """Initialize get subscribed hierarchy use case.

        Args:
            space_service: Space domain service
        """
        self.space_service = space_service

    async def execute(self, request: GetSubscribedHierarchyRequest) -> SpaceTreeResponse:
        """Execute get subscribed hierarchy flow.

        Args:
            request: Request with the caller's ID

        Returns:
            Filtered navigation tree
        """
        tree = await self.space_service.get_subscribed_hierarchy(
            UserId(parse_uuid(request.user_id, "user_id"))
        )
        return SpaceTreeResponse(roots=[SpaceNodeItem.from_domain(n) for n in tree])
