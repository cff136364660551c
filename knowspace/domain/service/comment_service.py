"""Comment domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from knowspace.domain.error import InvalidInputError, NotFoundError
from knowspace.domain.model import Comment
from knowspace.domain.repository import CommentRepository
from knowspace.domain.value import (
    MAX_COMMENT_LEVEL,
    ArticleId,
    CommentId,
    CommentTarget,
    ContentKind,
    FlashcardId,
    UserId,
    comment_target_from_fields,
)

from .base import Service
from .content_service import ContentService
from .thread_service import CommentNode
from .user_service import UserService

MAX_COMMENT_LENGTH = 10000


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        content_service: ContentService,
        user_service: UserService,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            content_service: Content service for target lookups
            user_service: User domain service
        """
        self.comment_repository = comment_repository
        self.content_service = content_service
        self.user_service = user_service

    async def create_comment(
        self,
        author_id: UserId,
        text: str,
        content_type: ContentKind | None = None,
        article_id: ArticleId | None = None,
        flashcard_id: FlashcardId | None = None,
        parent_id: CommentId | None = None,
    ) -> CommentNode:
        """Create a comment on content or reply to another comment.

        Replies inherit the content target of their parent and sit one
        level below it. Nothing is written when a check fails.

        Args:
            author_id: Author user ID
            text: Comment text
            content_type: Kind of content for top-level comments
            article_id: Article commented on
            flashcard_id: Flashcard commented on
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            The created comment with its author, without reactions or replies

        Raises:
            InvalidInputError: If the text is empty, the target is ambiguous,
                or the parent is already at the deepest level
            NotFoundError: If the parent comment or the target does not exist
        """
        with logfire.span(
            "comment_service.create_comment",
            author_id=str(author_id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            if not text.strip():
                raise InvalidInputError("Comment text is required")
            if len(text) > MAX_COMMENT_LENGTH:
                raise InvalidInputError(
                    f"Comment text exceeds {MAX_COMMENT_LENGTH} characters"
                )
            if article_id and flashcard_id:
                raise InvalidInputError(
                    "Cannot comment on both article and flashcard simultaneously"
                )

            if parent_id:
                target, level = await self._reply_position(
                    parent_id, article_id, flashcard_id
                )
            else:
                target = self._top_level_target(content_type, article_id, flashcard_id)
                level = 1

            await self.content_service.require_target(target)

            comment = Comment(
                id=CommentId(uuid4()),
                text=text,
                author_id=author_id,
                level=level,
                parent_id=parent_id,
                target=target,
                created_at=datetime.now(),
            )
            saved = await self.comment_repository.save(comment)
            author = await self.user_service.summary_cache().get(author_id)

            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                target=str(target),
                level=level,
            )
            return CommentNode(comment=saved, author=author)

    async def _reply_position(
        self,
        parent_id: CommentId,
        article_id: ArticleId | None,
        flashcard_id: FlashcardId | None,
    ) -> tuple[CommentTarget, int]:
        parent = await self.get_comment_by_id(parent_id)
        if not parent.accepts_replies:
            logfire.warn(
                "Reply beyond depth limit",
                parent_id=str(parent_id),
                parent_level=parent.level,
            )
            raise InvalidInputError(
                f"Cannot reply to comments beyond level {MAX_COMMENT_LEVEL}"
            )

        if article_id or flashcard_id:
            requested = comment_target_from_fields(article_id, flashcard_id)
            if requested != parent.target:
                logfire.warn(
                    "Reply target differs from parent",
                    parent_target=str(parent.target),
                    requested_target=str(requested),
                )
                raise InvalidInputError(
                    "A reply must target the same content as its parent"
                )

        return parent.target, parent.level + 1

    @staticmethod
    def _top_level_target(
        content_type: ContentKind | None,
        article_id: ArticleId | None,
        flashcard_id: FlashcardId | None,
    ) -> CommentTarget:
        # Alert discussions hang off the article the alert is about
        if content_type is ContentKind.FLASHCARD and not flashcard_id:
            raise InvalidInputError("flashcard_id is required for flashcard comments")
        if content_type in (ContentKind.ARTICLE, ContentKind.ALERT) and not article_id:
            raise InvalidInputError(
                f"article_id is required for {content_type.value} comments"
            )
        return comment_target_from_fields(article_id, flashcard_id)

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment:
        """Get a comment by ID.

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                logfire.warn("Comment not found", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))
            return comment
