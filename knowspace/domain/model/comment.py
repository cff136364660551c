"""Comment entity.

Comments are threaded discussions on an article or flashcard, nested
at most four levels deep. Replies carry the same content target as
the root of their thread, copied from the parent when they are created,
so a whole thread can be fetched by target without walking parents.
"""

from typing import Optional

from pydantic import Field, model_validator

from knowspace.domain.model.common import Entity
from knowspace.domain.value import MAX_COMMENT_LEVEL, CommentId, CommentTarget, UserId


class Comment(Entity):
    """Comment entity.

    Threading is managed through:
    - parent_id: Direct parent comment (None for top-level)
    - level: 1 for top-level, parent level + 1 for replies, capped at 4
    - target: Article or flashcard the thread belongs to
    """

    id: CommentId
    text: str = Field(min_length=1, max_length=10000)
    author_id: UserId
    level: int = Field(default=1, ge=1, le=MAX_COMMENT_LEVEL)
    parent_id: Optional[CommentId] = None
    target: CommentTarget

    @model_validator(mode="after")
    def check_level_matches_parent(self) -> "Comment":
        """Only top-level comments sit at level 1."""
        if (self.parent_id is None) != (self.level == 1):
            raise ValueError("Top-level comments are level 1; replies are deeper")
        return self

    @property
    def accepts_replies(self) -> bool:
        """Whether a reply to this comment stays within the depth cap."""
        return self.level < MAX_COMMENT_LEVEL
