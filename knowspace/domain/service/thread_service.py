"""Threaded comment assembly.

Turns the flat comment rows of an article or flashcard into a tree of
nodes, each decorated with its author and its reactions.
"""

from dataclasses import dataclass, field

import logfire

from knowspace.domain.model import Comment, UserSummary
from knowspace.domain.repository import CommentRepository
from knowspace.domain.value import MAX_COMMENT_LEVEL, CommentRef, CommentTarget

from .base import Service
from .reaction_service import ReactionService, ReactionView
from .user_service import UserService, UserSummaryCache


@dataclass
class CommentNode:
    """Node in an assembled comment thread."""

    comment: Comment
    author: UserSummary
    reactions: list[ReactionView] = field(default_factory=list)
    replies: list["CommentNode"] = field(default_factory=list)


class ThreadService(Service):
    """Domain service that assembles comment threads."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        reaction_service: ReactionService,
        user_service: UserService,
    ) -> None:
        """Initialize thread service.

        Args:
            comment_repository: Comment repository
            reaction_service: Reaction service for per-comment reactions
            user_service: User service for author summaries
        """
        self.comment_repository = comment_repository
        self.reaction_service = reaction_service
        self.user_service = user_service

    async def assemble_thread(
        self, target: CommentTarget, users: UserSummaryCache | None = None
    ) -> list[CommentNode]:
        """Assemble the comment thread of an article or flashcard.

        Roots come back in insertion order, and replies keep the order the
        store returns them in. Replies are only fetched for nodes below
        level 4, so anything deeper is cut off without an error.

        Args:
            target: Article or flashcard reference
            users: Summary cache to share with a surrounding assembly

        Returns:
            Root nodes with nested replies; empty if there are no comments

        Raises:
            NotFoundError: If a comment author or reacting user is missing
        """
        with logfire.span("thread_service.assemble_thread", target=str(target)):
            if users is None:
                users = self.user_service.summary_cache()

            roots = await self.comment_repository.find_roots(target)
            nodes = [await self._build_node(root, 1, users) for root in roots]

            logfire.info(
                "Thread assembled", target=str(target), root_count=len(nodes)
            )
            return nodes

    async def _build_node(
        self, comment: Comment, level: int, users: UserSummaryCache
    ) -> CommentNode:
        author = await users.get(comment.author_id)
        reactions = await self.reaction_service.list_for_target(
            CommentRef(id=comment.id), users
        )

        replies: list[CommentNode] = []
        if level < MAX_COMMENT_LEVEL:
            children = await self.comment_repository.find_children(comment.id)
            replies = [
                await self._build_node(child, level + 1, users) for child in children
            ]

        return CommentNode(
            comment=comment, author=author, reactions=reactions, replies=replies
        )
