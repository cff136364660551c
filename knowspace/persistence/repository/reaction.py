"""PostgreSQL implementation of Reaction repository."""

from typing import Optional

from sqlalchemy import and_, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from knowspace.domain.model import Reaction
from knowspace.domain.repository import ReactionRepository
from knowspace.domain.value import ReactionTarget, UserId
from knowspace.persistence.mappers import (
    TARGET_COLUMNS,
    reaction_to_dict,
    row_to_reaction,
)
from knowspace.persistence.tables import reactions_table


class PostgresReactionRepository(ReactionRepository):
    """PostgreSQL implementation of ReactionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @staticmethod
    def _target_clause(target: ReactionTarget):
        return reactions_table.c[TARGET_COLUMNS[target.kind]] == target.id

    async def find_by_user_and_target(
        self, user_id: UserId, target: ReactionTarget
    ) -> Optional[Reaction]:
        """Find a user's reaction on a specific target."""
        stmt = select(reactions_table).where(
            and_(
                reactions_table.c.user_id == user_id,
                self._target_clause(target),
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_reaction(row._asdict()) if row else None

    async def find_by_target(self, target: ReactionTarget) -> list[Reaction]:
        """Find all reactions on a target, oldest first."""
        stmt = (
            select(reactions_table)
            .where(self._target_clause(target))
            .order_by(reactions_table.c.created_at, reactions_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_reaction(row._asdict()) for row in result.fetchall()]

    async def save(self, reaction: Reaction) -> Reaction:
        """Save a reaction (create).

        Raises:
            IntegrityError: If the user already reacted to the target
        """
        stmt = insert(reactions_table).values(**reaction_to_dict(reaction))
        await self.session.execute(stmt)
        await self.session.flush()
        return reaction
