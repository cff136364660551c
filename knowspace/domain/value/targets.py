"""Tagged references to the things comments and reactions attach to.

A comment hangs off exactly one article or flashcard; a reaction hangs off
exactly one article, flashcard, comment or alert. The variants are
discriminated on ``kind`` so a target can never name two things at once.
"""

from typing import Annotated, Literal, Union
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from knowspace.domain.error import InvalidInputError
from knowspace.domain.value.identifiers import (
    AlertId,
    ArticleId,
    CommentId,
    FlashcardId,
)


class TargetRef(BaseModel):
    """Base class for target references.

    Refs are immutable and hashable, so they can key lookups.
    """

    model_config = ConfigDict(frozen=True)

    kind: str
    id: UUID

    def __str__(self) -> str:
        return f"{self.kind}:{self.id}"


class ArticleRef(TargetRef):
    """Reference to an article."""

    kind: Literal["article"] = "article"
    id: ArticleId


class FlashcardRef(TargetRef):
    """Reference to a flashcard."""

    kind: Literal["flashcard"] = "flashcard"
    id: FlashcardId


class CommentRef(TargetRef):
    """Reference to a comment."""

    kind: Literal["comment"] = "comment"
    id: CommentId


class AlertRef(TargetRef):
    """Reference to an alert."""

    kind: Literal["alert"] = "alert"
    id: AlertId


CommentTarget = Annotated[Union[ArticleRef, FlashcardRef], Field(discriminator="kind")]

ReactionTarget = Annotated[
    Union[ArticleRef, FlashcardRef, CommentRef, AlertRef],
    Field(discriminator="kind"),
]


def comment_target_from_fields(
    article_id: UUID | None, flashcard_id: UUID | None
) -> ArticleRef | FlashcardRef:
    """Build a comment target from optional request fields.

    Raises:
        InvalidInputError: If both or neither of the ids are given
    """
    if article_id and flashcard_id:
        raise InvalidInputError(
            "Cannot comment on both article and flashcard simultaneously"
        )
    if article_id:
        return ArticleRef(id=ArticleId(article_id))
    if flashcard_id:
        return FlashcardRef(id=FlashcardId(flashcard_id))
    raise InvalidInputError("Either article_id or flashcard_id is required")


def reaction_target_from_fields(
    article_id: UUID | None = None,
    flashcard_id: UUID | None = None,
    comment_id: UUID | None = None,
    alert_id: UUID | None = None,
) -> ArticleRef | FlashcardRef | CommentRef | AlertRef:
    """Build a reaction target from optional request fields.

    Raises:
        InvalidInputError: Unless exactly one id is given
    """
    candidates: list[TargetRef] = []
    if article_id:
        candidates.append(ArticleRef(id=ArticleId(article_id)))
    if flashcard_id:
        candidates.append(FlashcardRef(id=FlashcardId(flashcard_id)))
    if comment_id:
        candidates.append(CommentRef(id=CommentId(comment_id)))
    if alert_id:
        candidates.append(AlertRef(id=AlertId(alert_id)))

    if not candidates:
        raise InvalidInputError(
            "Either article_id, flashcard_id, comment_id, or alert_id is required"
        )
    if len(candidates) > 1:
        raise InvalidInputError("A reaction must name exactly one target")
    return candidates[0]  # type: ignore[return-value]
