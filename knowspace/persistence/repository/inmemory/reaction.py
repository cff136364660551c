"""In-memory reaction repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from knowspace.domain.model.reaction import Reaction
from knowspace.domain.repository.reaction import ReactionRepository
from knowspace.domain.value import ReactionTarget, UserId

from .store import InMemoryStore, oldest_first


class InMemoryReactionRepository(ReactionRepository):
    """In-memory implementation of ReactionRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_user_and_target(
        self, user_id: UserId, target: ReactionTarget
    ) -> Optional[Reaction]:
        """Find a user's reaction on a target."""
        for reaction in self._store.reactions:
            if reaction.user_id == user_id and reaction.target == target:
                return reaction
        return None

    async def find_by_target(self, target: ReactionTarget) -> list[Reaction]:
        """Find all reactions on a target."""
        return oldest_first(r for r in self._store.reactions if r.target == target)

    async def save(self, reaction: Reaction) -> Reaction:
        """Save a reaction.

        Raises:
            IntegrityError: If the user already reacted to the target
        """
        existing = await self.find_by_user_and_target(reaction.user_id, reaction.target)
        if existing:
            raise IntegrityError("Duplicate reaction", None, Exception())

        self._store.reactions.append(reaction)
        return reaction
