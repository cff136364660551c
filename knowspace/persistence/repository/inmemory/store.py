"""Shared backing store for the in-memory repositories."""

from dataclasses import dataclass, field

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
    ArticleId,
    CommentId,
    FlashcardId,
    SpaceId,
    UserId,
)


@dataclass
class InMemoryStore:
    """Rows of every table, keyed by ID where lookups need it.

    One store backs all repositories of a container so that, like a single
    database, a comment written through one repository is visible to the
    target lookups of another. Lists keep insertion order.
    """

    users: dict[UserId, User] = field(default_factory=dict)
    spaces: dict[SpaceId, Space] = field(default_factory=dict)
    articles: dict[ArticleId, Article] = field(default_factory=dict)
    flashcards: dict[FlashcardId, Flashcard] = field(default_factory=dict)
    comments: dict[CommentId, Comment] = field(default_factory=dict)
    alerts: dict[AlertId, Alert] = field(default_factory=dict)
    reactions: list[Reaction] = field(default_factory=list)
    subscriptions: list[SpaceSubscription] = field(default_factory=list)
    contributions: list[SpaceContribution] = field(default_factory=list)


def oldest_first(items):
    """Sort by creation time; ties keep insertion order."""
    return sorted(items, key=lambda item: item.created_at)
