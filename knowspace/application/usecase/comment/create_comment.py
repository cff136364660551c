"""Create comment use case."""

from pydantic import BaseModel

from knowspace.domain.service import CommentService
from knowspace.domain.value import (
    ArticleId,
    CommentId,
    ContentKind,
    FlashcardId,
    UserId,
)

from knowspace.application.usecase.base import parse_optional_uuid, parse_uuid
from knowspace.application.usecase.views import CommentItem


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    author_id: str  # User ID from authenticated user
    text: str
    content_type: ContentKind | None = None
    article_id: str | None = None
    flashcard_id: str | None = None
    parent_id: str | None = None  # Parent comment ID for replies


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment: CommentItem


class CreateCommentUseCase:
    """Use case for commenting on content or replying to another comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Args:
            request: Create comment request

        Returns:
            The created comment with its author

        Raises:
            InvalidInputError: If an ID is malformed or the comment breaks a
                threading rule
            NotFoundError: If the parent or the content does not exist
        """
        article_id = parse_optional_uuid(request.article_id, "article_id")
        flashcard_id = parse_optional_uuid(request.flashcard_id, "flashcard_id")
        parent_id = parse_optional_uuid(request.parent_id, "parent_id")

        node = await self.comment_service.create_comment(
            author_id=UserId(parse_uuid(request.author_id, "author_id")),
            text=request.text,
            content_type=request.content_type,
            article_id=ArticleId(article_id) if article_id else None,
            flashcard_id=FlashcardId(flashcard_id) if flashcard_id else None,
            parent_id=CommentId(parent_id) if parent_id else None,
        )

        return CreateCommentResponse(comment=CommentItem.from_domain(node))
