"""Create reaction use case."""

from pydantic import BaseModel

from knowspace.domain.service import ReactionService
from knowspace.domain.value import UserId, reaction_target_from_fields

from knowspace.application.usecase.base import parse_optional_uuid, parse_uuid
from knowspace.application.usecase.views import ReactionItem


class CreateReactionRequest(BaseModel):
    """Create reaction request."""

    user_id: str  # User ID from authenticated user
    emoji: str
    article_id: str | None = None
    flashcard_id: str | None = None
    comment_id: str | None = None
    alert_id: str | None = None


class CreateReactionResponse(BaseModel):
    """Create reaction response."""

    reaction: ReactionItem


class CreateReactionUseCase:
    """Use case for reacting to an article, flashcard, comment or alert."""

    def __init__(self, reaction_service: ReactionService) -> None:
        """Initialize create reaction use case.

        Args:
            reaction_service: Reaction domain service
        """
        self.reaction_service = reaction_service

    async def execute(self, request: CreateReactionRequest) -> CreateReactionResponse:
        """Execute create reaction flow.

        Steps:
        1. Check the emoji is allowed
        2. Resolve exactly one target from the request IDs
        3. Store the reaction via the reaction service

        Args:
            request: Create reaction request

        Returns:
            The stored reaction with the reacting user

        Raises:
            InvalidInputError: If the emoji is not allowed or the request does
                not name exactly one target
            NotFoundError: If the target does not exist
            ConstraintConflictError: If the user already reacted to the target
        """
        emoji = self.reaction_service.parse_emoji(request.emoji)
        target = reaction_target_from_fields(
            article_id=parse_optional_uuid(request.article_id, "article_id"),
            flashcard_id=parse_optional_uuid(request.flashcard_id, "flashcard_id"),
            comment_id=parse_optional_uuid(request.comment_id, "comment_id"),
            alert_id=parse_optional_uuid(request.alert_id, "alert_id"),
        )

        view = await self.reaction_service.create_reaction(
            user_id=UserId(parse_uuid(request.user_id, "user_id")),
            emoji=emoji.value,
            target=target,
        )
        return CreateReactionResponse(reaction=ReactionItem.from_domain(view))
