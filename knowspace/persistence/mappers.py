"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.

Content targets are stored as one nullable foreign key column per kind;
exactly one of them is set on any row.
"""

from typing import Any, Dict, Optional
from uuid import UUID

from knowspace.domain.model import (
    Alert,
    Article,
    Comment,
    Flashcard,
    Reaction,
    Space,
    SpaceContribution,
    SpaceSubscription,
    User,
)
from knowspace.domain.value import (
    AlertId,
    AlertRef,
    AlertType,
    ArticleId,
    ArticleRef,
    CommentId,
    CommentRef,
    ContributionId,
    Emoji,
    FlashcardId,
    FlashcardRef,
    ReactionId,
    ReactionTarget,
    SpaceId,
    SubscriptionId,
    UserId,
)
from knowspace.domain.value.types import Username

TARGET_COLUMNS = {
    "article": "article_id",
    "flashcard": "flashcard_id",
    "comment": "comment_id",
    "alert": "alert_id",
}


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _optional_uuid(value: Any) -> Optional[UUID]:
    return _uuid(value) if value else None


def target_to_columns(target: ReactionTarget, kinds: tuple[str, ...]) -> Dict[str, Any]:
    """Spread a target reference over its per-kind foreign key columns.

    Args:
        target: Article, flashcard, comment or alert reference
        kinds: Target kinds the table has columns for

    Returns:
        Dict with the matching column set and the others None
    """
    columns: Dict[str, Any] = {TARGET_COLUMNS[kind]: None for kind in kinds}
    columns[TARGET_COLUMNS[target.kind]] = target.id
    return columns


def row_to_target(row: Dict[str, Any]) -> ReactionTarget:
    """Rebuild a target reference from whichever target column is set.

    Raises:
        ValueError: If no target column is set on the row
    """
    if row.get("article_id"):
        return ArticleRef(id=ArticleId(_uuid(row["article_id"])))
    if row.get("flashcard_id"):
        return FlashcardRef(id=FlashcardId(_uuid(row["flashcard_id"])))
    if row.get("comment_id"):
        return CommentRef(id=CommentId(_uuid(row["comment_id"])))
    if row.get("alert_id"):
        return AlertRef(id=AlertId(_uuid(row["alert_id"])))
    raise ValueError(f"Row {row.get('id')} has no target column set")


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        username=Username(row["username"]),
        email=row["email"],
        is_admin=row.get("is_admin", False),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = user.model_dump()
    data["username"] = user.username.root
    return data


def row_to_space(row: Dict[str, Any]) -> Space:
    """Convert database row to Space domain model."""
    return Space(
        id=SpaceId(_uuid(row["id"])),
        name=row["name"],
        about=row.get("about") or "",
        banner_url=row.get("banner_url"),
        level=row["level"],
        parent_id=SpaceId(_uuid(row["parent_id"])) if row.get("parent_id") else None,
        created_at=row["created_at"],
    )


def space_to_dict(space: Space) -> Dict[str, Any]:
    """Convert Space domain model to database dict."""
    return space.model_dump()


def row_to_article(row: Dict[str, Any]) -> Article:
    """Convert database row to Article domain model."""
    return Article(
        id=ArticleId(_uuid(row["id"])),
        title=row["title"],
        text=row["text"],
        author_id=UserId(_uuid(row["author_id"])),
        space_id=SpaceId(_uuid(row["space_id"])),
        created_at=row["created_at"],
    )


def article_to_dict(article: Article) -> Dict[str, Any]:
    """Convert Article domain model to database dict."""
    return article.model_dump()


def row_to_flashcard(row: Dict[str, Any]) -> Flashcard:
    """Convert database row to Flashcard domain model."""
    return Flashcard(
        id=FlashcardId(_uuid(row["id"])),
        title=row["title"],
        short_description=row["short_description"],
        long_description=row["long_description"],
        author_id=UserId(_uuid(row["author_id"])),
        space_id=SpaceId(_uuid(row["space_id"])),
        created_at=row["created_at"],
    )


def flashcard_to_dict(flashcard: Flashcard) -> Dict[str, Any]:
    """Convert Flashcard domain model to database dict."""
    return flashcard.model_dump()


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    parent_id = _optional_uuid(row.get("parent_id"))
    return Comment(
        id=CommentId(_uuid(row["id"])),
        text=row["text"],
        author_id=UserId(_uuid(row["author_id"])),
        level=row["level"],
        parent_id=CommentId(parent_id) if parent_id else None,
        target=row_to_target(row),
        created_at=row["created_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion
    """
    data = comment.model_dump(exclude={"target"})
    data.update(target_to_columns(comment.target, ("article", "flashcard")))
    return data


def row_to_reaction(row: Dict[str, Any]) -> Reaction:
    """Convert database row to Reaction domain model."""
    return Reaction(
        id=ReactionId(_uuid(row["id"])),
        emoji=Emoji(row["emoji"]),
        user_id=UserId(_uuid(row["user_id"])),
        target=row_to_target(row),
        created_at=row["created_at"],
    )


def reaction_to_dict(reaction: Reaction) -> Dict[str, Any]:
    """Convert Reaction domain model to database dict."""
    data = reaction.model_dump(exclude={"target"})
    data["emoji"] = reaction.emoji.value
    data.update(target_to_columns(reaction.target, tuple(TARGET_COLUMNS)))
    return data


def row_to_subscription(row: Dict[str, Any]) -> SpaceSubscription:
    """Convert database row to SpaceSubscription domain model."""
    return SpaceSubscription(
        id=SubscriptionId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        space_id=SpaceId(_uuid(row["space_id"])),
        created_at=row["created_at"],
    )


def subscription_to_dict(subscription: SpaceSubscription) -> Dict[str, Any]:
    """Convert SpaceSubscription domain model to database dict."""
    return subscription.model_dump()


def row_to_contribution(row: Dict[str, Any]) -> SpaceContribution:
    """Convert database row to SpaceContribution domain model."""
    return SpaceContribution(
        id=ContributionId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        space_id=SpaceId(_uuid(row["space_id"])),
        created_at=row["created_at"],
    )


def contribution_to_dict(contribution: SpaceContribution) -> Dict[str, Any]:
    """Convert SpaceContribution domain model to database dict."""
    return contribution.model_dump()


def row_to_alert(row: Dict[str, Any]) -> Alert:
    """Convert database row to Alert domain model."""
    return Alert(
        id=AlertId(_uuid(row["id"])),
        type=AlertType(row["type"]),
        message=row["message"],
        user_id=UserId(_uuid(row["user_id"])),
        space_id=SpaceId(_uuid(row["space_id"])),
        is_read=row.get("is_read", False),
        created_at=row["created_at"],
    )


def alert_to_dict(alert: Alert) -> Dict[str, Any]:
    """Convert Alert domain model to database dict."""
    data = alert.model_dump()
    data["type"] = alert.type.value
    return data
