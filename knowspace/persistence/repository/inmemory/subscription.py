"""In-memory subscription and contribution repositories for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from knowspace.domain.model.subscription import SpaceContribution, SpaceSubscription
from knowspace.domain.repository.subscription import (
    ContributionRepository,
    SubscriptionRepository,
)
from knowspace.domain.value import SpaceId, UserId

from .store import InMemoryStore, oldest_first


class InMemorySubscriptionRepository(SubscriptionRepository):
    """In-memory implementation of SubscriptionRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_user_and_space(
        self, user_id: UserId, space_id: SpaceId
    ) -> Optional[SpaceSubscription]:
        """Find a user's subscription to a space."""
        for subscription in self._store.subscriptions:
            if subscription.user_id == user_id and subscription.space_id == space_id:
                return subscription
        return None

    async def find_space_ids_by_user(self, user_id: UserId) -> set[SpaceId]:
        """Find the IDs of every space a user subscribes to."""
        return {s.space_id for s in self._store.subscriptions if s.user_id == user_id}

    async def find_by_space(self, space_id: SpaceId) -> list[SpaceSubscription]:
        """Find the subscriptions of a space."""
        return oldest_first(
            s for s in self._store.subscriptions if s.space_id == space_id
        )

    async def save(self, subscription: SpaceSubscription) -> SpaceSubscription:
        """Save a subscription.

        Raises:
            IntegrityError: If the user is already subscribed
        """
        existing = await self.find_by_user_and_space(
            subscription.user_id, subscription.space_id
        )
        if existing:
            raise IntegrityError("Duplicate subscription", None, Exception())

        self._store.subscriptions.append(subscription)
        return subscription

    async def delete_by_user_and_space(self, user_id: UserId, space_id: SpaceId) -> bool:
        """Delete a user's subscription to a space."""
        before = len(self._store.subscriptions)
        self._store.subscriptions[:] = [
            s
            for s in self._store.subscriptions
            if not (s.user_id == user_id and s.space_id == space_id)
        ]
        return len(self._store.subscriptions) < before


class InMemoryContributionRepository(ContributionRepository):
    """In-memory implementation of ContributionRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_space(self, space_id: SpaceId) -> list[SpaceContribution]:
        """Find the contributions of a space."""
        return oldest_first(
            c for c in self._store.contributions if c.space_id == space_id
        )

    async def save(self, contribution: SpaceContribution) -> SpaceContribution:
        """Save a contribution.

        Raises:
            IntegrityError: If the user already contributes to the space
        """
        for existing in self._store.contributions:
            if (
                existing.user_id == contribution.user_id
                and existing.space_id == contribution.space_id
            ):
                raise IntegrityError("Duplicate contribution", None, Exception())

        self._store.contributions.append(contribution)
        return contribution
