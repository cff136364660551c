"""PostgreSQL repository implementations."""

from knowspace.persistence.repository.alert import PostgresAlertRepository
from knowspace.persistence.repository.comment import PostgresCommentRepository
from knowspace.persistence.repository.content import (
    PostgresArticleRepository,
    PostgresFlashcardRepository,
)
from knowspace.persistence.repository.reaction import PostgresReactionRepository
from knowspace.persistence.repository.space import PostgresSpaceRepository
from knowspace.persistence.repository.subscription import (
    PostgresContributionRepository,
    PostgresSubscriptionRepository,
)
from knowspace.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresAlertRepository",
    "PostgresArticleRepository",
    "PostgresCommentRepository",
    "PostgresContributionRepository",
    "PostgresFlashcardRepository",
    "PostgresReactionRepository",
    "PostgresSpaceRepository",
    "PostgresSubscriptionRepository",
    "PostgresUserRepository",
]
