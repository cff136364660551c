"""Domain value objects for Knowspace."""

from knowspace.domain.value.identifiers import (
    AlertId,
    ArticleId,
    CommentId,
    ContributionId,
    FlashcardId,
    ReactionId,
    SpaceId,
    SubscriptionId,
    UserId,
)
from knowspace.domain.value.targets import (
    AlertRef,
    ArticleRef,
    CommentRef,
    CommentTarget,
    FlashcardRef,
    ReactionTarget,
    comment_target_from_fields,
    reaction_target_from_fields,
)
from knowspace.domain.value.types import (
    ALLOWED_EMOJIS,
    MAX_COMMENT_LEVEL,
    MAX_SPACE_LEVEL,
    AlertType,
    ContentKind,
    Emoji,
    Username,
)

__all__ = [
    # Identifiers
    "UserId",
    "SpaceId",
    "ArticleId",
    "FlashcardId",
    "CommentId",
    "ReactionId",
    "AlertId",
    "SubscriptionId",
    "ContributionId",
    # Targets
    "ArticleRef",
    "FlashcardRef",
    "CommentRef",
    "AlertRef",
    "CommentTarget",
    "ReactionTarget",
    "comment_target_from_fields",
    "reaction_target_from_fields",
    # Types
    "ALLOWED_EMOJIS",
    "MAX_COMMENT_LEVEL",
    "MAX_SPACE_LEVEL",
    "AlertType",
    "ContentKind",
    "Emoji",
    "Username",
]
