"""Space repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from knowspace.domain.model.space import Space, SpaceNode
from knowspace.domain.value import SpaceId


class SpaceRepository(ABC):
    """Repository for Space entity."""

    @abstractmethod
    async def find_by_id(self, space_id: SpaceId) -> Optional[Space]:
        """Find a space by ID.

        Args:
            space_id: The space's unique identifier

        Returns:
            The space if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> list[Space]:
        """Find every space, oldest first."""
        pass

    @abstractmethod
    async def find_by_ids(self, space_ids: set[SpaceId]) -> list[Space]:
        """Find the given spaces, oldest first.

        Args:
            space_ids: IDs to look up; unknown IDs are ignored

        Returns:
            Matching spaces
        """
        pass

    @abstractmethod
    async def find_tree(self, root_level: int = 1) -> list[SpaceNode]:
        """Load the navigation tree.

        Args:
            root_level: Level of the spaces returned at the top

        Returns:
            Ordered root nodes with children nested down to level 3
        """
        pass

    @abstractmethod
    async def save(self, space: Space) -> Space:
        """Save a space (create or update).

        Args:
            space: The space to save

        Returns:
            The saved space
        """
        pass
