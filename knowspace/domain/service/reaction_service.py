"""Reaction domain service."""

from dataclasses import dataclass
from datetime import datetime
from uuid import uuid4

import logfire

from knowspace.domain.error import ConstraintConflictError, InvalidInputError
from knowspace.domain.model import Reaction, UserSummary
from knowspace.domain.repository import ReactionRepository
from knowspace.domain.value import (
    ALLOWED_EMOJIS,
    Emoji,
    ReactionId,
    ReactionTarget,
    UserId,
)

from .base import Service
from .content_service import ContentService
from .user_service import UserService, UserSummaryCache


@dataclass
class ReactionView:
    """A reaction together with the user who left it."""

    reaction: Reaction
    user: UserSummary


class ReactionService(Service):
    """Domain service for reaction operations."""

    def __init__(
        self,
        reaction_repository: ReactionRepository,
        content_service: ContentService,
        user_service: UserService,
    ) -> None:
        """Initialize reaction service.

        Args:
            reaction_repository: Reaction repository
            content_service: Content service for target lookups
            user_service: User domain service
        """
        self.reaction_repository = reaction_repository
        self.content_service = content_service
        self.user_service = user_service

    @staticmethod
    def parse_emoji(emoji: str) -> Emoji:
        """Check an emoji against the allowed set.

        Raises:
            InvalidInputError: If the emoji is not one of the allowed ones
        """
        if emoji not in ALLOWED_EMOJIS:
            raise InvalidInputError(
                f"Invalid emoji. Allowed emojis: {', '.join(ALLOWED_EMOJIS)}"
            )
        return Emoji(emoji)

    async def create_reaction(
        self, user_id: UserId, emoji: str, target: ReactionTarget
    ) -> ReactionView:
        """Leave a reaction on an article, flashcard, comment or alert.

        Args:
            user_id: Reacting user ID
            emoji: One of the allowed emojis
            target: The thing being reacted to

        Returns:
            The stored reaction with the reacting user's summary

        Raises:
            InvalidInputError: If the emoji is not allowed
            NotFoundError: If the target or the user does not exist
            ConstraintConflictError: If the user already reacted to the target
        """
        with logfire.span(
            "reaction_service.create_reaction",
            user_id=str(user_id),
            target=str(target),
        ):
            parsed = self.parse_emoji(emoji)

            await self.content_service.require_target(target)

            existing = await self.reaction_repository.find_by_user_and_target(
                user_id, target
            )
            if existing:
                logfire.warn(
                    "Duplicate reaction attempt",
                    user_id=str(user_id),
                    target=str(target),
                )
                raise ConstraintConflictError("User has already reacted to this content")

            reaction = Reaction(
                id=ReactionId(uuid4()),
                emoji=parsed,
                user_id=user_id,
                target=target,
                created_at=datetime.now(),
            )

            # The store has the final word on concurrent duplicates
            with self.conflict_on_duplicate(
                "User has already reacted to this content",
                user_id=str(user_id),
                target=str(target),
            ):
                saved = await self.reaction_repository.save(reaction)

            user = await self.user_service.summary_cache().get(user_id)
            logfire.info(
                "Reaction created",
                reaction_id=str(saved.id),
                emoji=parsed.value,
                target=str(target),
            )
            return ReactionView(reaction=saved, user=user)

    async def list_for_target(
        self, target: ReactionTarget, users: UserSummaryCache
    ) -> list[ReactionView]:
        """List the reactions on a target with their users, oldest first.

        Args:
            target: The thing reacted to
            users: Summary cache of the current assembly

        Returns:
            Reaction views in store order

        Raises:
            NotFoundError: If a reacting user row is missing
        """
        reactions = await self.reaction_repository.find_by_target(target)
        return [
            ReactionView(reaction=reaction, user=await users.get(reaction.user_id))
            for reaction in reactions
        ]
