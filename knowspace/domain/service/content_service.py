"""Content domain service.

Looks up articles and flashcards, and checks that the things comments
and reactions point at actually exist.
"""

import logfire

from knowspace.domain.error import NotFoundError
from knowspace.domain.model import Article, Flashcard
from knowspace.domain.repository import (
    AlertRepository,
    ArticleRepository,
    CommentRepository,
    FlashcardRepository,
)
from knowspace.domain.value import (
    AlertId,
    ArticleId,
    ArticleRef,
    CommentRef,
    FlashcardId,
    FlashcardRef,
    ReactionTarget,
    SpaceId,
)

from .base import Service


class ContentService(Service):
    """Domain service for articles, flashcards and target lookups."""

    def __init__(
        self,
        article_repository: ArticleRepository,
        flashcard_repository: FlashcardRepository,
        comment_repository: CommentRepository,
        alert_repository: AlertRepository,
    ) -> None:
        """Initialize content service.

        Args:
            article_repository: Article repository
            flashcard_repository: Flashcard repository
            comment_repository: Comment repository
            alert_repository: Alert repository
        """
        self.article_repository = article_repository
        self.flashcard_repository = flashcard_repository
        self.comment_repository = comment_repository
        self.alert_repository = alert_repository

    async def get_article(self, article_id: ArticleId) -> Article:
        """Get an article by ID.

        Raises:
            NotFoundError: If the article does not exist
        """
        article = await self.article_repository.find_by_id(article_id)
        if not article:
            logfire.warn("Article not found", article_id=str(article_id))
            raise NotFoundError("Article", str(article_id))
        return article

    async def get_flashcard(self, flashcard_id: FlashcardId) -> Flashcard:
        """Get a flashcard by ID.

        Raises:
            NotFoundError: If the flashcard does not exist
        """
        flashcard = await self.flashcard_repository.find_by_id(flashcard_id)
        if not flashcard:
            logfire.warn("Flashcard not found", flashcard_id=str(flashcard_id))
            raise NotFoundError("Flashcard", str(flashcard_id))
        return flashcard

    async def list_articles(self, space_id: SpaceId) -> list[Article]:
        """List the articles of a space, oldest first."""
        return await self.article_repository.find_by_space(space_id)

    async def list_flashcards(self, space_id: SpaceId) -> list[Flashcard]:
        """List the flashcards of a space, oldest first."""
        return await self.flashcard_repository.find_by_space(space_id)

    async def require_target(self, target: ReactionTarget) -> None:
        """Ensure the entity a comment or reaction points at exists.

        Args:
            target: Article, flashcard, comment or alert reference

        Raises:
            NotFoundError: If the referenced entity does not exist
        """
        with logfire.span("content_service.require_target", target=str(target)):
            if isinstance(target, ArticleRef):
                await self.get_article(target.id)
            elif isinstance(target, FlashcardRef):
                await self.get_flashcard(target.id)
            elif isinstance(target, CommentRef):
                if not await self.comment_repository.find_by_id(target.id):
                    logfire.warn("Comment not found", comment_id=str(target.id))
                    raise NotFoundError("Comment", str(target.id))
            elif not await self.alert_repository.find_by_id(AlertId(target.id)):
                logfire.warn("Alert not found", alert_id=str(target.id))
                raise NotFoundError("Alert", str(target.id))
