"""Reaction repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from knowspace.domain.model.reaction import Reaction
from knowspace.domain.value import ReactionTarget, UserId


class ReactionRepository(ABC):
    """Repository for Reaction entity.

    Defines the contract for reaction persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_user_and_target(
        self, user_id: UserId, target: ReactionTarget
    ) -> Optional[Reaction]:
        """Find a user's reaction on a specific target.

        Args:
            user_id: The user's ID
            target: Article, flashcard, comment or alert reference

        Returns:
            The reaction if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_target(self, target: ReactionTarget) -> list[Reaction]:
        """Find all reactions on a target, oldest first.

        Args:
            target: Article, flashcard, comment or alert reference

        Returns:
            List of reactions on the target
        """
        pass

    @abstractmethod
    async def save(self, reaction: Reaction) -> Reaction:
        """Save a new reaction.

        Args:
            reaction: The reaction to save

        Returns:
            The saved reaction

        Raises:
            IntegrityError: If the user already reacted to this target
        """
        pass
