"""In-memory space repository for testing."""

from typing import Optional

from knowspace.domain.model.space import Space, SpaceNode, assemble_space_tree
from knowspace.domain.repository.space import SpaceRepository
from knowspace.domain.value import SpaceId

from .store import InMemoryStore, oldest_first


class InMemorySpaceRepository(SpaceRepository):
    """In-memory implementation of SpaceRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_id(self, space_id: SpaceId) -> Optional[Space]:
        """Find a space by ID."""
        return self._store.spaces.get(space_id)

    async def find_all(self) -> list[Space]:
        """Find every space, oldest first."""
        return oldest_first(self._store.spaces.values())

    async def find_by_ids(self, space_ids: set[SpaceId]) -> list[Space]:
        """Find the given spaces, oldest first."""
        return oldest_first(
            space for space in self._store.spaces.values() if space.id in space_ids
        )

    async def find_tree(self, root_level: int = 1) -> list[SpaceNode]:
        """Load the navigation tree."""
        return assemble_space_tree(await self.find_all(), root_level=root_level)

    async def save(self, space: Space) -> Space:
        """Save a space.

        Raises:
            ValueError: If the parent is missing or not one level above
        """
        if space.parent_id is not None:
            space.check_parent(self._store.spaces.get(space.parent_id))

        self._store.spaces[space.id] = space
        return space
