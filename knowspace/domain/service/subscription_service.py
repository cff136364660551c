"""Subscription domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from knowspace.domain.model import SpaceContribution, SpaceSubscription
from knowspace.domain.repository import ContributionRepository, SubscriptionRepository
from knowspace.domain.value import SpaceId, SubscriptionId, UserId

from .alert_service import AlertService
from .base import Service
from .space_service import SpaceService


class SubscriptionService(Service):
    """Domain service for space subscriptions and contributions."""

    def __init__(
        self,
        subscription_repository: SubscriptionRepository,
        contribution_repository: ContributionRepository,
        space_service: SpaceService,
        alert_service: AlertService,
    ) -> None:
        """Initialize subscription service.

        Args:
            subscription_repository: Subscription repository
            contribution_repository: Contribution repository
            space_service: Space domain service
            alert_service: Alert domain service
        """
        self.subscription_repository = subscription_repository
        self.contribution_repository = contribution_repository
        self.space_service = space_service
        self.alert_service = alert_service

    async def toggle_subscription(self, user_id: UserId, space_id: SpaceId) -> bool:
        """Subscribe a user to a space, or unsubscribe if already subscribed.

        Subscribing also raises a subscription alert for the space.

        Args:
            user_id: User ID
            space_id: Space ID

        Returns:
            True if the user is now subscribed, False if unsubscribed

        Raises:
            NotFoundError: If the space does not exist
            ConstraintConflictError: If a concurrent subscribe won the race
        """
        with logfire.span(
            "subscription_service.toggle_subscription",
            user_id=str(user_id),
            space_id=str(space_id),
        ):
            space = await self.space_service.get_by_id(space_id)

            existing = await self.subscription_repository.find_by_user_and_space(
                user_id, space_id
            )
            if existing:
                await self.subscription_repository.delete_by_user_and_space(
                    user_id, space_id
                )
                logfire.info(
                    "Unsubscribed from space",
                    user_id=str(user_id),
                    space_id=str(space_id),
                )
                return False

            subscription = SpaceSubscription(
                id=SubscriptionId(uuid4()),
                user_id=user_id,
                space_id=space_id,
                created_at=datetime.now(),
            )
            with self.conflict_on_duplicate(
                "User is already subscribed to this space",
                user_id=str(user_id),
                space_id=str(space_id),
            ):
                await self.subscription_repository.save(subscription)

            await self.alert_service.raise_subscription_alert(user_id, space)
            logfire.info(
                "Subscribed to space", user_id=str(user_id), space_id=str(space_id)
            )
            return True

    async def list_subscribers(self, space_id: SpaceId) -> list[SpaceSubscription]:
        """List the subscriptions of a space, oldest first."""
        return await self.subscription_repository.find_by_space(space_id)

    async def list_contributors(self, space_id: SpaceId) -> list[SpaceContribution]:
        """List the contributions of a space, oldest first."""
        return await self.contribution_repository.find_by_space(space_id)
