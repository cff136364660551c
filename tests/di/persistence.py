"""Mock persistence providers for testing."""

from dishka import Scope, provide

from knowspace.domain.repository import (
    AlertRepository,
    ArticleRepository,
    CommentRepository,
    ContributionRepository,
    FlashcardRepository,
    ReactionRepository,
    SpaceRepository,
    SubscriptionRepository,
    UserRepository,
)
from knowspace.persistence.repository.inmemory import (
    InMemoryAlertRepository,
    InMemoryArticleRepository,
    InMemoryCommentRepository,
    InMemoryContributionRepository,
    InMemoryFlashcardRepository,
    InMemoryReactionRepository,
    InMemorySpaceRepository,
    InMemoryStore,
    InMemorySubscriptionRepository,
    InMemoryUserRepository,
)
from knowspace.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    All repositories of a container share one store, the way they share a
    database in production. Each container gets a fresh store unless one
    is passed in, so tests stay isolated while still being able to seed
    data before requests are made.
    """

    __is_mock__ = True

    def __init__(self, store: InMemoryStore | None = None) -> None:
        super().__init__()
        self.store = store or InMemoryStore()

    @provide(scope=Scope.APP)
    def get_store(self) -> InMemoryStore:
        """Provide the shared in-memory store."""
        return self.store

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, store: InMemoryStore) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_space_repository(self, store: InMemoryStore) -> SpaceRepository:
        """Provide in-memory space repository."""
        return InMemorySpaceRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_article_repository(self, store: InMemoryStore) -> ArticleRepository:
        """Provide in-memory article repository."""
        return InMemoryArticleRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_flashcard_repository(self, store: InMemoryStore) -> FlashcardRepository:
        """Provide in-memory flashcard repository."""
        return InMemoryFlashcardRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, store: InMemoryStore) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_reaction_repository(self, store: InMemoryStore) -> ReactionRepository:
        """Provide in-memory reaction repository."""
        return InMemoryReactionRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_subscription_repository(
        self, store: InMemoryStore
    ) -> SubscriptionRepository:
        """Provide in-memory subscription repository."""
        return InMemorySubscriptionRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_contribution_repository(
        self, store: InMemoryStore
    ) -> ContributionRepository:
        """Provide in-memory contribution repository."""
        return InMemoryContributionRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_alert_repository(self, store: InMemoryStore) -> AlertRepository:
        """Provide in-memory alert repository."""
        return InMemoryAlertRepository(store)
