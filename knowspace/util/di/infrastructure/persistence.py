"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from knowspace.config import Settings
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
from knowspace.persistence.database import (
    create_engine,
    create_session_factory,
    transaction,
)
from knowspace.persistence.repository import (
    PostgresAlertRepository,
    PostgresArticleRepository,
    PostgresCommentRepository,
    PostgresContributionRepository,
    PostgresFlashcardRepository,
    PostgresReactionRepository,
    PostgresSpaceRepository,
    PostgresSubscriptionRepository,
    PostgresUserRepository,
)
from knowspace.util.di.base import ProviderBase
from knowspace.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Instrumented engine, disposed when the container closes."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """One transaction per request, committed when the handler succeeds."""
        async with transaction(session_factory) as session:
            yield session

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        """Provide User repository."""
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_space_repository(self, session: AsyncSession) -> SpaceRepository:
        """Provide Space repository."""
        return PostgresSpaceRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_article_repository(self, session: AsyncSession) -> ArticleRepository:
        """Provide Article repository."""
        return PostgresArticleRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_flashcard_repository(self, session: AsyncSession) -> FlashcardRepository:
        """Provide Flashcard repository."""
        return PostgresFlashcardRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, session: AsyncSession) -> CommentRepository:
        """Provide Comment repository."""
        return PostgresCommentRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_reaction_repository(self, session: AsyncSession) -> ReactionRepository:
        """Provide Reaction repository."""
        return PostgresReactionRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_subscription_repository(
        self, session: AsyncSession
    ) -> SubscriptionRepository:
        """Provide SpaceSubscription repository."""
        return PostgresSubscriptionRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_contribution_repository(
        self, session: AsyncSession
    ) -> ContributionRepository:
        """Provide SpaceContribution repository."""
        return PostgresContributionRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_alert_repository(self, session: AsyncSession) -> AlertRepository:
        """Provide Alert repository."""
        return PostgresAlertRepository(session)
