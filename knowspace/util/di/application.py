"""Application layer DI providers."""

from dishka import Scope, provide

from knowspace.application.usecase.auth import GetCurrentUserUseCase
from knowspace.application.usecase.comment import (
    CreateCommentUseCase,
    GetThreadUseCase,
)
from knowspace.application.usecase.reaction import CreateReactionUseCase
from knowspace.application.usecase.space import (
    GetAllSpacesUseCase,
    GetSpaceTitlesUseCase,
    GetSpaceUseCase,
    GetSubscribedHierarchyUseCase,
    GetSubscribedSpacesUseCase,
    SpaceDetailBuilder,
    ToggleSubscriptionUseCase,
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


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_current_user_use_case(
        self, jwt_service: JWTService, user_service: UserService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(jwt_service=jwt_service, user_service=user_service)

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self, comment_service: CommentService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_thread_use_case(
        self, thread_service: ThreadService, content_service: ContentService
    ) -> GetThreadUseCase:
        """Provide get thread use case."""
        return GetThreadUseCase(
            thread_service=thread_service, content_service=content_service
        )

    # Reaction use cases
    @provide(scope=Scope.REQUEST)
    def get_create_reaction_use_case(
        self, reaction_service: ReactionService
    ) -> CreateReactionUseCase:
        """Provide create reaction use case."""
        return CreateReactionUseCase(reaction_service=reaction_service)

    # Space use cases
    @provide(scope=Scope.REQUEST)
    def get_space_detail_builder(
        self,
        user_service: UserService,
        content_service: ContentService,
        thread_service: ThreadService,
        reaction_service: ReactionService,
        subscription_service: SubscriptionService,
    ) -> SpaceDetailBuilder:
        """Provide space detail builder."""
        return SpaceDetailBuilder(
            user_service=user_service,
            content_service=content_service,
            thread_service=thread_service,
            reaction_service=reaction_service,
            subscription_service=subscription_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_all_spaces_use_case(
        self,
        space_service: SpaceService,
        alert_service: AlertService,
        detail_builder: SpaceDetailBuilder,
    ) -> GetAllSpacesUseCase:
        """Provide get all spaces use case."""
        return GetAllSpacesUseCase(
            space_service=space_service,
            alert_service=alert_service,
            detail_builder=detail_builder,
        )

    @provide(scope=Scope.REQUEST)
    def get_subscribed_spaces_use_case(
        self,
        space_service: SpaceService,
        alert_service: AlertService,
        detail_builder: SpaceDetailBuilder,
    ) -> GetSubscribedSpacesUseCase:
        """Provide get subscribed spaces use case."""
        return GetSubscribedSpacesUseCase(
            space_service=space_service,
            alert_service=alert_service,
            detail_builder=detail_builder,
        )

    @provide(scope=Scope.REQUEST)
    def get_space_use_case(
        self,
        space_service: SpaceService,
        alert_service: AlertService,
        detail_builder: SpaceDetailBuilder,
    ) -> GetSpaceUseCase:
        """Provide get space use case."""
        return GetSpaceUseCase(
            space_service=space_service,
            alert_service=alert_service,
            detail_builder=detail_builder,
        )

    @provide(scope=Scope.REQUEST)
    def get_space_titles_use_case(
        self, space_service: SpaceService
    ) -> GetSpaceTitlesUseCase:
        """Provide get space titles use case."""
        return GetSpaceTitlesUseCase(space_service=space_service)

    @provide(scope=Scope.REQUEST)
    def get_subscribed_hierarchy_use_case(
        self, space_service: SpaceService
    ) -> GetSubscribedHierarchyUseCase:
        """Provide get subscribed hierarchy use case."""
        return GetSubscribedHierarchyUseCase(space_service=space_service)

    @provide(scope=Scope.REQUEST)
    def get_toggle_subscription_use_case(
        self, subscription_service: SubscriptionService
    ) -> ToggleSubscriptionUseCase:
        """Provide toggle subscription use case."""
        return ToggleSubscriptionUseCase(subscription_service=subscription_service)
