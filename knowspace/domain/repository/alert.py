"""Alert repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from knowspace.domain.model.alert import Alert
from knowspace.domain.value import AlertId, SpaceId, UserId


class AlertRepository(ABC):
    """Repository for Alert entity."""

    @abstractmethod
    async def find_by_id(self, alert_id: AlertId) -> Optional[Alert]:
        """Find an alert by ID.

        Args:
            alert_id: The alert's unique identifier

        Returns:
            The alert if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_space(
        self,
        space_id: SpaceId,
        user_id: Optional[UserId] = None,
        unread_only: bool = False,
    ) -> list[Alert]:
        """Find alerts raised in a space, oldest first.

        Args:
            space_id: The space ID
            user_id: Only alerts for this user when given
            unread_only: Skip alerts already marked as read

        Returns:
            Matching alerts
        """
        pass

    @abstractmethod
    async def save(self, alert: Alert) -> Alert:
        """Save an alert (create or update)."""
        pass
