"""Strongly typed identifiers for Knowspace domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

# Core domain entity identifiers
UserId = NewType("UserId", UUID)
SpaceId = NewType("SpaceId", UUID)
ArticleId = NewType("ArticleId", UUID)
FlashcardId = NewType("FlashcardId", UUID)
CommentId = NewType("CommentId", UUID)
ReactionId = NewType("ReactionId", UUID)
AlertId = NewType("AlertId", UUID)
SubscriptionId = NewType("SubscriptionId", UUID)
ContributionId = NewType("ContributionId", UUID)
