"""Domain layer DI providers."""

from dishka import Scope, provide

from knowspace.config import AuthSettings
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
from knowspace.domain.service import (
    AlertService,
    CommentService,
    ContentService,
    JWTService,
    ReactionService,
    SpaceService,
    SubscriptionService,
    ThreadService,
    UserService,
)
from knowspace.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_content_service(
        self,
        article_repository: ArticleRepository,
        flashcard_repository: FlashcardRepository,
        comment_repository: CommentRepository,
        alert_repository: AlertRepository,
    ) -> ContentService:
        """Provide content domain service."""
        return ContentService(
            article_repository=article_repository,
            flashcard_repository=flashcard_repository,
            comment_repository=comment_repository,
            alert_repository=alert_repository,
        )

    @provide
    def get_reaction_service(
        self,
        reaction_repository: ReactionRepository,
        content_service: ContentService,
        user_service: UserService,
    ) -> ReactionService:
        """Provide reaction domain service."""
        return ReactionService(
            reaction_repository=reaction_repository,
            content_service=content_service,
            user_service=user_service,
        )

    @provide
    def get_thread_service(
        self,
        comment_repository: CommentRepository,
        reaction_service: ReactionService,
        user_service: UserService,
    ) -> ThreadService:
        """Provide comment thread assembly service."""
        return ThreadService(
            comment_repository=comment_repository,
            reaction_service=reaction_service,
            user_service=user_service,
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        content_service: ContentService,
        user_service: UserService,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            content_service=content_service,
            user_service=user_service,
        )

    @provide
    def get_alert_service(self, alert_repository: AlertRepository) -> AlertService:
        """Provide alert domain service."""
        return AlertService(alert_repository=alert_repository)

    @provide
    def get_space_service(
        self,
        space_repository: SpaceRepository,
        subscription_repository: SubscriptionRepository,
    ) -> SpaceService:
        """Provide space domain service."""
        return SpaceService(
            space_repository=space_repository,
            subscription_repository=subscription_repository,
        )

    @provide
    def get_subscription_service(
        self,
        subscription_repository: SubscriptionRepository,
        contribution_repository: ContributionRepository,
        space_service: SpaceService,
        alert_service: AlertService,
    ) -> SubscriptionService:
        """Provide subscription domain service."""
        return SubscriptionService(
            subscription_repository=subscription_repository,
            contribution_repository=contribution_repository,
            space_service=space_service,
            alert_service=alert_service,
        )
