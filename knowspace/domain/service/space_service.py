"""Space domain service and the subscribed-hierarchy filter."""

from typing import Iterable

import logfire

from knowspace.domain.error import NotFoundError
from knowspace.domain.model import Space, SpaceNode
from knowspace.domain.repository import SpaceRepository, SubscriptionRepository
from knowspace.domain.value import SpaceId, UserId

from .base import Service


def filter_subscribed(
    tree: Iterable[SpaceNode], subscribed_ids: set[SpaceId]
) -> list[SpaceNode]:
    """Prune a navigation tree down to what a user subscribes to.

    A node survives if it is subscribed or if any descendant survives, so
    ancestors of subscribed spaces stay visible for navigation. Sibling
    order is preserved. Returns new nodes and leaves the input untouched.

    Args:
        tree: Root nodes of the navigation tree
        subscribed_ids: IDs of the spaces the user subscribes to

    Returns:
        Filtered root nodes
    """
    if not subscribed_ids:
        return []

    kept: list[SpaceNode] = []
    for node in tree:
        children = filter_subscribed(node.children, subscribed_ids)
        if children or node.id in subscribed_ids:
            kept.append(
                SpaceNode(id=node.id, name=node.name, level=node.level, children=children)
            )
    return kept


class SpaceService(Service):
    """Domain service for space lookups and navigation trees."""

    def __init__(
        self,
        space_repository: SpaceRepository,
        subscription_repository: SubscriptionRepository,
    ) -> None:
        """Initialize space service.

        Args:
            space_repository: Space repository
            subscription_repository: Subscription repository
        """
        self.space_repository = space_repository
        self.subscription_repository = subscription_repository

    async def get_by_id(self, space_id: SpaceId) -> Space:
        """Get a space by ID.

        Args:
            space_id: Space ID

        Returns:
            Space entity

        Raises:
            NotFoundError: If the space does not exist
        """
        with logfire.span("space_service.get_by_id", space_id=str(space_id)):
            space = await self.space_repository.find_by_id(space_id)
            if not space:
                logfire.warn("Space not found", space_id=str(space_id))
                raise NotFoundError("Space", str(space_id))
            return space

    async def list_all(self) -> list[Space]:
        """List every space, oldest first."""
        with logfire.span("space_service.list_all"):
            spaces = await self.space_repository.find_all()
            logfire.info("Spaces listed", count=len(spaces))
            return spaces

    async def list_subscribed(self, user_id: UserId) -> list[Space]:
        """List the spaces a user subscribes to directly, oldest first."""
        with logfire.span("space_service.list_subscribed", user_id=str(user_id)):
            space_ids = await self.subscription_repository.find_space_ids_by_user(
                user_id
            )
            if not space_ids:
                return []
            return await self.space_repository.find_by_ids(space_ids)

    async def get_tree(self) -> list[SpaceNode]:
        """Get the full navigation tree rooted at level 1 spaces."""
        with logfire.span("space_service.get_tree"):
            return await self.space_repository.find_tree(root_level=1)

    async def get_subscribed_hierarchy(self, user_id: UserId) -> list[SpaceNode]:
        """Get the navigation tree pruned to a user's subscriptions.

        Args:
            user_id: User ID

        Returns:
            Root nodes of the filtered tree
        """
        with logfire.span(
            "space_service.get_subscribed_hierarchy", user_id=str(user_id)
        ):
            tree = await self.space_repository.find_tree(root_level=1)
            subscribed = await self.subscription_repository.find_space_ids_by_user(
                user_id
            )
            filtered = filter_subscribed(tree, subscribed)
            logfire.info(
                "Subscribed hierarchy built",
                user_id=str(user_id),
                subscribed_count=len(subscribed),
                root_count=len(filtered),
            )
            return filtered
