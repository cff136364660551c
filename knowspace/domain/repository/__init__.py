"""Repository interfaces for Knowspace domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from knowspace.domain.repository.alert import AlertRepository
from knowspace.domain.repository.comment import CommentRepository
from knowspace.domain.repository.content import ArticleRepository, FlashcardRepository
from knowspace.domain.repository.reaction import ReactionRepository
from knowspace.domain.repository.space import SpaceRepository
from knowspace.domain.repository.subscription import (
    ContributionRepository,
    SubscriptionRepository,
)
from knowspace.domain.repository.user import UserRepository

__all__ = [
    "AlertRepository",
    "ArticleRepository",
    "CommentRepository",
    "ContributionRepository",
    "FlashcardRepository",
    "ReactionRepository",
    "SpaceRepository",
    "SubscriptionRepository",
    "UserRepository",
]
