"""PostgreSQL implementation of User repository."""

from typing import Optional, Sequence

from sqlalchemy import Select, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from knowspace.domain.model import User
from knowspace.domain.repository import UserRepository
from knowspace.domain.value import UserId
from knowspace.domain.value.types import Username
from knowspace.persistence.mappers import row_to_user, user_to_dict
from knowspace.persistence.tables import users_table

# Columns a repeated save may change; id and created_at are fixed at insert
_MUTABLE_COLUMNS = ("username", "email", "is_admin", "updated_at")


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def _one(self, stmt: Select) -> Optional[User]:
        row = (await self.session.execute(stmt)).fetchone()
        return row_to_user(row._asdict()) if row else None

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        return await self._one(select(users_table).where(users_table.c.id == user_id))

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        """Find several users in one query; unknown ids are skipped."""
        if not user_ids:
            return []
        stmt = select(users_table).where(users_table.c.id.in_(list(user_ids)))
        result = await self.session.execute(stmt)
        return [row_to_user(row._asdict()) for row in result.fetchall()]

    async def find_by_username(self, username: Username) -> Optional[User]:
        return await self._one(
            select(users_table).where(users_table.c.username == username.root)
        )

    async def save(self, user: User) -> User:
        """Insert a user, or update the profile columns of an existing one."""
        stmt = insert(users_table).values(**user_to_dict(user))
        stmt = stmt.on_conflict_do_update(
            index_elements=[users_table.c.id],
            set_={column: stmt.excluded[column] for column in _MUTABLE_COLUMNS},
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return user
