"""User domain service."""

from typing import Sequence

import logfire

from knowspace.domain.error import NotFoundError
from knowspace.domain.model import User, UserSummary
from knowspace.domain.repository import UserRepository
from knowspace.domain.value import UserId

from .base import Service


class UserSummaryCache:
    """Per-call cache of user summaries.

    One instance lives for a single assembly (a thread, a space detail) so
    an author who wrote many comments is looked up once. Never share an
    instance across requests.
    """

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
        self._summaries: dict[UserId, UserSummary] = {}

    async def get(self, user_id: UserId) -> UserSummary:
        """Return the summary for a user, loading it on first use.

        Raises:
            NotFoundError: If the user row is missing
        """
        summary = self._summaries.get(user_id)
        if summary is None:
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.error("Referenced user is missing", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            summary = user.summary()
            self._summaries[user_id] = summary
        return summary

    async def preload(self, user_ids: Sequence[UserId]) -> None:
        """Warm the cache with one batch query."""
        missing = [uid for uid in set(user_ids) if uid not in self._summaries]
        if not missing:
            return
        for user in await self.user_repository.find_by_ids(missing):
            self._summaries[user.id] = user.summary()


class UserService(Service):
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            logfire.info("User found", user_id=str(user_id), username=user.username.root)
            return user

    def summary_cache(self) -> UserSummaryCache:
        """Create a fresh summary cache for one assembly."""
        return UserSummaryCache(self.user_repository)
