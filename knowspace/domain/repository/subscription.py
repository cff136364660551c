"""Subscription and contribution repository interfaces."""

from abc import ABC, abstractmethod
from typing import Optional

from knowspace.domain.model.subscription import SpaceContribution, SpaceSubscription
from knowspace.domain.value import SpaceId, UserId


class SubscriptionRepository(ABC):
    """Repository for SpaceSubscription entity."""

    @abstractmethod
    async def find_by_user_and_space(
        self, user_id: UserId, space_id: SpaceId
    ) -> Optional[SpaceSubscription]:
        """Find a user's subscription to a space.

        Args:
            user_id: The user's ID
            space_id: The space's ID

        Returns:
            The subscription if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_space_ids_by_user(self, user_id: UserId) -> set[SpaceId]:
        """Find the IDs of every space a user subscribes to.

        Args:
            user_id: The user's ID

        Returns:
            Set of subscribed space IDs
        """
        pass

    @abstractmethod
    async def find_by_space(self, space_id: SpaceId) -> list[SpaceSubscription]:
        """Find the subscriptions of a space, oldest first."""
        pass

    @abstractmethod
    async def save(self, subscription: SpaceSubscription) -> SpaceSubscription:
        """Save a new subscription.

        Raises:
            IntegrityError: If the user is already subscribed
        """
        pass

    @abstractmethod
    async def delete_by_user_and_space(self, user_id: UserId, space_id: SpaceId) -> bool:
        """Delete a user's subscription to a space.

        Returns:
            True if a subscription was deleted, False if none existed
        """
        pass


class ContributionRepository(ABC):
    """Repository for SpaceContribution entity."""

    @abstractmethod
    async def find_by_space(self, space_id: SpaceId) -> list[SpaceContribution]:
        """Find the contributors of a space, oldest first."""
        pass

    @abstractmethod
    async def save(self, contribution: SpaceContribution) -> SpaceContribution:
        """Save a new contribution.

        Raises:
            IntegrityError: If the user already contributes to the space
        """
        pass
