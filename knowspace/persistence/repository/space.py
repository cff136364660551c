"""PostgreSQL implementation of Space repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from knowspace.domain.model import Space, SpaceNode, assemble_space_tree
from knowspace.domain.repository import SpaceRepository
from knowspace.domain.value import SpaceId
from knowspace.persistence.mappers import row_to_space, space_to_dict
from knowspace.persistence.tables import spaces_table


class PostgresSpaceRepository(SpaceRepository):
    """PostgreSQL implementation of SpaceRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, space_id: SpaceId) -> Optional[Space]:
        """Find a space by ID."""
        stmt = select(spaces_table).where(spaces_table.c.id == space_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_space(row._asdict()) if row else None

    async def find_all(self) -> list[Space]:
        """Find every space, oldest first."""
        stmt = select(spaces_table).order_by(
            spaces_table.c.created_at, spaces_table.c.id
        )
        result = await self.session.execute(stmt)
        return [row_to_space(row._asdict()) for row in result.fetchall()]

    async def find_by_ids(self, space_ids: set[SpaceId]) -> list[Space]:
        """Find the given spaces, oldest first."""
        if not space_ids:
            return []
        stmt = (
            select(spaces_table)
            .where(spaces_table.c.id.in_(list(space_ids)))
            .order_by(spaces_table.c.created_at, spaces_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_space(row._asdict()) for row in result.fetchall()]

    async def find_tree(self, root_level: int = 1) -> list[SpaceNode]:
        """Load the navigation tree.

        The whole hierarchy is at most three levels, so one query over all
        spaces is assembled in memory.
        """
        stmt = select(spaces_table).order_by(spaces_table.c.created_at, spaces_table.c.id)
        result = await self.session.execute(stmt)
        spaces = [row_to_space(row._asdict()) for row in result.fetchall()]
        return assemble_space_tree(spaces, root_level=root_level)

    async def save(self, space: Space) -> Space:
        """Save a space (create or update).

        Raises:
            ValueError: If the parent is missing or not one level above
        """
        if space.parent_id is not None:
            space.check_parent(await self.find_by_id(space.parent_id))

        existing = await self.find_by_id(space.id)
        space_dict = space_to_dict(space)

        if existing:
            stmt = (
                spaces_table.update()
                .where(spaces_table.c.id == space.id)
                .values(**space_dict)
            )
        else:
            stmt = spaces_table.insert().values(**space_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return space
