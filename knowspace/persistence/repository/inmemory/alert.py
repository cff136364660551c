"""In-memory alert repository for testing."""

from typing import Optional

from knowspace.domain.model.alert import Alert
from knowspace.domain.repository.alert import AlertRepository
from knowspace.domain.value import AlertId, SpaceId, UserId

from .store import InMemoryStore, oldest_first


class InMemoryAlertRepository(AlertRepository):
    """In-memory implementation of AlertRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_id(self, alert_id: AlertId) -> Optional[Alert]:
        """Find an alert by ID."""
        return self._store.alerts.get(alert_id)

    async def find_by_space(
        self,
        space_id: SpaceId,
        user_id: Optional[UserId] = None,
        unread_only: bool = False,
    ) -> list[Alert]:
        """Find alerts raised in a space."""
        return oldest_first(
            a
            for a in self._store.alerts.values()
            if a.space_id == space_id
            and (user_id is None or a.user_id == user_id)
            and not (unread_only and a.is_read)
        )

    async def save(self, alert: Alert) -> Alert:
        """Save an alert."""
        self._store.alerts[alert.id] = alert
        return alert
