"""In-memory comment repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from knowspace.domain.model.comment import Comment
from knowspace.domain.repository.comment import CommentRepository
from knowspace.domain.value import CommentId, CommentTarget

from .store import InMemoryStore, oldest_first


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._store.comments.get(comment_id)

    async def find_roots(self, target: CommentTarget) -> list[Comment]:
        """Find the top-level comments on a piece of content."""
        return oldest_first(
            c
            for c in self._store.comments.values()
            if c.parent_id is None and c.target == target
        )

    async def find_children(self, parent_id: CommentId) -> list[Comment]:
        """Find direct replies to a comment."""
        return oldest_first(
            c for c in self._store.comments.values() if c.parent_id == parent_id
        )

    async def save(self, comment: Comment) -> Comment:
        """Save a comment.

        Raises:
            IntegrityError: If the parent comment does not exist
        """
        if comment.parent_id and comment.parent_id not in self._store.comments:
            raise IntegrityError("Unknown parent comment", None, Exception())
        self._store.comments[comment.id] = comment
        return comment
