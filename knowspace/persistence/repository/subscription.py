"""PostgreSQL implementations of Subscription and Contribution repositories."""

from typing import Optional

from sqlalchemy import and_, delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from knowspace.domain.model import SpaceContribution, SpaceSubscription
from knowspace.domain.repository import ContributionRepository, SubscriptionRepository
from knowspace.domain.value import SpaceId, UserId
from knowspace.persistence.mappers import (
    contribution_to_dict,
    row_to_contribution,
    row_to_subscription,
    subscription_to_dict,
)
from knowspace.persistence.tables import (
    space_contributions_table,
    space_subscriptions_table,
)


class PostgresSubscriptionRepository(SubscriptionRepository):
    """PostgreSQL implementation of SubscriptionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_user_and_space(
        self, user_id: UserId, space_id: SpaceId
    ) -> Optional[SpaceSubscription]:
        """Find a user's subscription to a space."""
        stmt = select(space_subscriptions_table).where(
            and_(
                space_subscriptions_table.c.user_id == user_id,
                space_subscriptions_table.c.space_id == space_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_subscription(row._asdict()) if row else None

    async def find_space_ids_by_user(self, user_id: UserId) -> set[SpaceId]:
        """Find the IDs of every space a user subscribes to."""
        stmt = select(space_subscriptions_table.c.space_id).where(
            space_subscriptions_table.c.user_id == user_id
        )
        result = await self.session.execute(stmt)
        return {SpaceId(row.space_id) for row in result.fetchall()}

    async def find_by_space(self, space_id: SpaceId) -> list[SpaceSubscription]:
        """Find the subscriptions of a space, oldest first."""
        stmt = (
            select(space_subscriptions_table)
            .where(space_subscriptions_table.c.space_id == space_id)
            .order_by(
                space_subscriptions_table.c.created_at,
                space_subscriptions_table.c.id,
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_subscription(row._asdict()) for row in result.fetchall()]

    async def save(self, subscription: SpaceSubscription) -> SpaceSubscription:
        """Save a subscription (create)."""
        stmt = insert(space_subscriptions_table).values(
            **subscription_to_dict(subscription)
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return subscription

    async def delete_by_user_and_space(self, user_id: UserId, space_id: SpaceId) -> bool:
        """Delete a user's subscription to a space."""
        stmt = delete(space_subscriptions_table).where(
            and_(
                space_subscriptions_table.c.user_id == user_id,
                space_subscriptions_table.c.space_id == space_id,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]


class PostgresContributionRepository(ContributionRepository):
    """PostgreSQL implementation of ContributionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_space(self, space_id: SpaceId) -> list[SpaceContribution]:
        """Find the contributions of a space, oldest first."""
        stmt = (
            select(space_contributions_table)
            .where(space_contributions_table.c.space_id == space_id)
            .order_by(
                space_contributions_table.c.created_at,
                space_contributions_table.c.id,
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_contribution(row._asdict()) for row in result.fetchall()]

    async def save(self, contribution: SpaceContribution) -> SpaceContribution:
        """Save a contribution (create)."""
        stmt = insert(space_contributions_table).values(
            **contribution_to_dict(contribution)
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return contribution
