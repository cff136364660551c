"""In-memory repository implementations for testing."""

from .alert import InMemoryAlertRepository
from .comment import InMemoryCommentRepository
from .content import InMemoryArticleRepository, InMemoryFlashcardRepository
from .reaction import InMemoryReactionRepository
from .space import InMemorySpaceRepository
from .store import InMemoryStore
from .subscription import InMemoryContributionRepository, InMemorySubscriptionRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryAlertRepository",
    "InMemoryArticleRepository",
    "InMemoryCommentRepository",
    "InMemoryContributionRepository",
    "InMemoryFlashcardRepository",
    "InMemoryReactionRepository",
    "InMemorySpaceRepository",
    "InMemoryStore",
    "InMemorySubscriptionRepository",
    "InMemoryUserRepository",
]
