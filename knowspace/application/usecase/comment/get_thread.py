"""Get comment thread use case."""

from typing import Literal

from pydantic import BaseModel

from knowspace.domain.service import ContentService, ThreadService
from knowspace.domain.value import ArticleId, ArticleRef, FlashcardId, FlashcardRef

from knowspace.application.usecase.base import parse_uuid
from knowspace.application.usecase.views import CommentItem


class GetThreadRequest(BaseModel):
    """Get thread request."""

    content_kind: Literal["article", "flashcard"]
    content_id: str  # UUID string


class GetThreadResponse(BaseModel):
    """Get thread response."""

    content_kind: str
    content_id: str
    comments: list[CommentItem]
    total: int


class GetThreadUseCase:
    """Use case for getting the threaded comments of an article or flashcard."""

    def __init__(
        self, thread_service: ThreadService, content_service: ContentService
    ) -> None:
        """Initialize get thread use case.

        Args:
            thread_service: Thread assembly service
            content_service: Content service for the existence check
        """
        self.thread_service = thread_service
        self.content_service = content_service

    async def execute(self, request: GetThreadRequest) -> GetThreadResponse:
        """Execute get thread flow.

        Args:
            request: Content kind and ID

        Returns:
            Root comments with nested replies, at most four levels deep

        Raises:
            InvalidInputError: If the content ID is malformed
            NotFoundError: If the content does not exist
        """
        content_id = parse_uuid(request.content_id, f"{request.content_kind}_id")
        target = (
            ArticleRef(id=ArticleId(content_id))
            if request.content_kind == "article"
            else FlashcardRef(id=FlashcardId(content_id))
        )

        await self.content_service.require_target(target)
        nodes = await self.thread_service.assemble_thread(target)

        # Count all nodes recursively
        def count_nodes(items: list[CommentItem]) -> int:
            return sum(1 + count_nodes(item.replies) for item in items)

        comments = [CommentItem.from_domain(node) for node in nodes]
        return GetThreadResponse(
            content_kind=request.content_kind,
            content_id=str(content_id),
            comments=comments,
            total=count_nodes(comments),
        )
