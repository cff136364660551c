"""PostgreSQL implementation of Alert repository."""

from typing import Optional

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from knowspace.domain.model import Alert
from knowspace.domain.repository import AlertRepository
from knowspace.domain.value import AlertId, SpaceId, UserId
from knowspace.persistence.mappers import alert_to_dict, row_to_alert
from knowspace.persistence.tables import alerts_table


class PostgresAlertRepository(AlertRepository):
    """PostgreSQL implementation of AlertRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, alert_id: AlertId) -> Optional[Alert]:
        """Find an alert by ID."""
        stmt = select(alerts_table).where(alerts_table.c.id == alert_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_alert(row._asdict()) if row else None

    async def find_by_space(
        self,
        space_id: SpaceId,
        user_id: Optional[UserId] = None,
        unread_only: bool = False,
    ) -> list[Alert]:
        """Find alerts raised in a space, oldest first."""
        stmt = select(alerts_table).where(alerts_table.c.space_id == space_id)

        if user_id is not None:
            stmt = stmt.where(alerts_table.c.user_id == user_id)
        if unread_only:
            stmt = stmt.where(alerts_table.c.is_read.is_(False))

        stmt = stmt.order_by(alerts_table.c.created_at, alerts_table.c.id)
        result = await self.session.execute(stmt)
        return [row_to_alert(row._asdict()) for row in result.fetchall()]

    async def save(self, alert: Alert) -> Alert:
        """Save an alert (create or update)."""
        existing = await self.find_by_id(alert.id)
        alert_dict = alert_to_dict(alert)

        if existing:
            stmt = (
                alerts_table.update()
                .where(alerts_table.c.id == alert.id)
                .values(**alert_dict)
            )
        else:
            stmt = insert(alerts_table).values(**alert_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return alert
