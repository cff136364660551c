"""In-memory user repository for testing."""

from typing import Optional, Sequence

from knowspace.domain.model.user import User
from knowspace.domain.repository.user import UserRepository
from knowspace.domain.value import UserId
from knowspace.domain.value.types import Username

from .store import InMemoryStore


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._store.users.get(user_id)

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        """Find several users at once."""
        return [
            self._store.users[user_id]
            for user_id in user_ids
            if user_id in self._store.users
        ]

    async def find_by_username(self, username: Username) -> Optional[User]:
        """Find a user by their username."""
        for user in self._store.users.values():
            if user.username == username:
                return user
        return None

    async def save(self, user: User) -> User:
        """Save a user."""
        self._store.users[user.id] = user
        return user
