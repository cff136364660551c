"""Alert domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from knowspace.domain.model import Alert, Space
from knowspace.domain.repository import AlertRepository
from knowspace.domain.value import AlertId, AlertType, SpaceId, UserId

from .base import Service


class AlertService(Service):
    """Domain service for space alerts."""

    def __init__(self, alert_repository: AlertRepository) -> None:
        """Initialize alert service.

        Args:
            alert_repository: Alert repository
        """
        self.alert_repository = alert_repository

    async def raise_subscription_alert(self, user_id: UserId, space: Space) -> Alert:
        """Record that a user joined a space.

        Args:
            user_id: The user who subscribed
            space: The space joined

        Returns:
            The stored alert
        """
        with logfire.span(
            "alert_service.raise_subscription_alert",
            user_id=str(user_id),
            space_id=str(space.id),
        ):
            alert = Alert(
                id=AlertId(uuid4()),
                type=AlertType.SUBSCRIPTION,
                message=f"New member joined {space.name}",
                user_id=user_id,
                space_id=space.id,
                is_read=False,
                created_at=datetime.now(),
            )
            saved = await self.alert_repository.save(alert)
            logfire.info("Subscription alert raised", alert_id=str(saved.id))
            return saved

    async def list_for_space(
        self,
        space_id: SpaceId,
        user_id: UserId | None = None,
        unread_only: bool = False,
    ) -> list[Alert]:
        """List alerts of a space, optionally narrowed to one user's unread ones.

        Args:
            space_id: The space ID
            user_id: Only this user's alerts when given
            unread_only: Skip alerts already read

        Returns:
            Alerts, oldest first
        """
        with logfire.span(
            "alert_service.list_for_space",
            space_id=str(space_id),
            user_id=str(user_id) if user_id else None,
            unread_only=unread_only,
        ):
            return await self.alert_repository.find_by_space(
                space_id, user_id=user_id, unread_only=unread_only
            )
