"""Space detail assembly shared by the space listing use cases."""

from datetime import datetime

from pydantic import BaseModel

from knowspace.application.usecase.views import (
    AlertItem,
    CommentItem,
    ReactionItem,
    UserSummaryItem,
)
from knowspace.domain.model import Alert, Space
from knowspace.domain.service import (
    ContentService,
    ReactionService,
    SubscriptionService,
    ThreadService,
    UserService,
    UserSummaryCache,
)
from knowspace.domain.value import ArticleRef, FlashcardRef


class ArticleItem(BaseModel):
    """Article with its author, reactions and comment thread."""

    id: str
    title: str
    text: str
    author: UserSummaryItem
    created_at: datetime
    reactions: list[ReactionItem]
    comments: list[CommentItem]


class FlashcardItem(BaseModel):
    """Flashcard with its author, reactions and comment thread."""

    id: str
    title: str
    short_description: str
    long_description: str
    author: UserSummaryItem
    created_at: datetime
    reactions: list[ReactionItem]
    comments: list[CommentItem]


class SpaceDetail(BaseModel):
    """Everything shown on a space page."""

    id: str
    name: str
    about: str
    banner_url: str | None
    level: int
    parent_id: str | None
    created_at: datetime
    subscribers: list[UserSummaryItem]
    contributors: list[UserSummaryItem]
    articles: list[ArticleItem]
    flashcards: list[FlashcardItem]
    alerts: list[AlertItem]


class SpaceDetailBuilder:
    """Decorates spaces with members, content, threads and alerts."""

    def __init__(
        self,
        user_service: UserService,
        content_service: ContentService,
        thread_service: ThreadService,
        reaction_service: ReactionService,
        subscription_service: SubscriptionService,
    ) -> None:
        """Initialize space detail builder.

        Args:
            user_service: User service for summaries
            content_service: Content service for articles and flashcards
            thread_service: Thread assembly service
            reaction_service: Reaction service for content reactions
            subscription_service: Subscription service for members
        """
        self.user_service = user_service
        self.content_service = content_service
        self.thread_service = thread_service
        self.reaction_service = reaction_service
        self.subscription_service = subscription_service

    def new_cache(self) -> UserSummaryCache:
        """Create the user cache for one request's worth of spaces."""
        return self.user_service.summary_cache()

    async def build(
        self, space: Space, alerts: list[Alert], users: UserSummaryCache
    ) -> SpaceDetail:
        """Assemble the detail of one space.

        Args:
            space: The space
            alerts: Alerts to show, already narrowed by the caller
            users: User summary cache shared across the request

        Returns:
            Space detail
        """
        subscriptions = await self.subscription_service.list_subscribers(space.id)
        contributions = await self.subscription_service.list_contributors(space.id)
        await users.preload(
            [s.user_id for s in subscriptions] + [c.user_id for c in contributions]
        )

        articles = [
            ArticleItem(
                id=str(article.id),
                title=article.title,
                text=article.text,
                author=UserSummaryItem.from_domain(await users.get(article.author_id)),
                created_at=article.created_at,
                reactions=await self._reactions(ArticleRef(id=article.id), users),
                comments=await self._comments(ArticleRef(id=article.id), users),
            )
            for article in await self.content_service.list_articles(space.id)
        ]
        flashcards = [
            FlashcardItem(
                id=str(card.id),
                title=card.title,
                short_description=card.short_description,
                long_description=card.long_description,
                author=UserSummaryItem.from_domain(await users.get(card.author_id)),
                created_at=card.created_at,
                reactions=await self._reactions(FlashcardRef(id=card.id), users),
                comments=await self._comments(FlashcardRef(id=card.id), users),
            )
            for card in await self.content_service.list_flashcards(space.id)
        ]

        return SpaceDetail(
            id=str(space.id),
            name=space.name,
            about=space.about,
            banner_url=space.banner_url,
            level=space.level,
            parent_id=str(space.parent_id) if space.parent_id else None,
            created_at=space.created_at,
            subscribers=[
                UserSummaryItem.from_domain(await users.get(s.user_id))
                for s in subscriptions
            ],
            contributors=[
                UserSummaryItem.from_domain(await users.get(c.user_id))
                for c in contributions
            ],
            articles=articles,
            flashcards=flashcards,
            alerts=[
                AlertItem.from_domain(alert, await users.get(alert.user_id))
                for alert in alerts
            ],
        )

    async def _reactions(
        self, target: ArticleRef | FlashcardRef, users: UserSummaryCache
    ) -> list[ReactionItem]:
        views = await self.reaction_service.list_for_target(target, users)
        return [ReactionItem.from_domain(view) for view in views]

    async def _comments(
        self, target: ArticleRef | FlashcardRef, users: UserSummaryCache
    ) -> list[CommentItem]:
        nodes = await self.thread_service.assemble_thread(target, users)
        return [CommentItem.from_domain(node) for node in nodes]
