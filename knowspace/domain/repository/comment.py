"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from knowspace.domain.model.comment import Comment
from knowspace.domain.value import CommentId, CommentTarget


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_roots(self, target: CommentTarget) -> list[Comment]:
        """Find the top-level comments on a piece of content.

        Comments are returned in insertion order (created_at, then id)
        so repeated calls see the same sequence.

        Args:
            target: The article or flashcard

        Returns:
            Comments with no parent attached to the target
        """
        pass

    @abstractmethod
    async def find_children(self, parent_id: CommentId) -> list[Comment]:
        """Find direct replies to a comment in insertion order.

        Args:
            parent_id: The parent comment ID

        Returns:
            List of child comments
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment.

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass
