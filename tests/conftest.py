"""Test configuration and fixtures."""

from datetime import datetime, timedelta
from itertools import count
from uuid import uuid4

import logfire

from knowspace.config import Settings
from knowspace.domain.model import Article, Comment, Flashcard, Space, User
from knowspace.domain.value import (
    ArticleId,
    ArticleRef,
    CommentId,
    CommentTarget,
    FlashcardId,
    SpaceId,
    UserId,
    Username,
)
from knowspace.util.jwt import create_token

# Keep spans local; nothing leaves the test process
logfire.configure(send_to_logfire=False, console=False)

_ticks = count()
_epoch = datetime(2026, 1, 1, 12, 0, 0)


def tick() -> datetime:
    """Strictly increasing timestamps so creation order is unambiguous."""
    return _epoch + timedelta(seconds=next(_ticks))


def make_user(username: str = "user1", is_admin: bool = False) -> User:
    """Build a user with a unique ID."""
    return User(
        id=UserId(uuid4()),
        username=Username(username),
        email=f"{username}@example.org",
        is_admin=is_admin,
        created_at=tick(),
    )


def make_space(
    name: str, level: int = 1, parent: Space | None = None
) -> Space:
    """Build a space, nested under ``parent`` when given."""
    return Space(
        id=SpaceId(uuid4()),
        name=name,
        level=level,
        parent_id=parent.id if parent else None,
        created_at=tick(),
    )


def make_article(author: User, space: Space, title: str = "Article") -> Article:
    """Build an article in a space."""
    return Article(
        id=ArticleId(uuid4()),
        title=title,
        text=f"Body of {title}",
        author_id=author.id,
        space_id=space.id,
        created_at=tick(),
    )


def make_flashcard(author: User, space: Space, title: str = "Card") -> Flashcard:
    """Build a flashcard in a space."""
    return Flashcard(
        id=FlashcardId(uuid4()),
        title=title,
        short_description=f"{title} in brief",
        long_description=f"{title} in full",
        author_id=author.id,
        space_id=space.id,
        created_at=tick(),
    )


def make_comment(
    author: User,
    target: CommentTarget,
    text: str = "A comment",
    parent: Comment | None = None,
) -> Comment:
    """Build a comment; replies take their level and target from the parent."""
    return Comment(
        id=CommentId(uuid4()),
        text=text,
        author_id=author.id,
        level=parent.level + 1 if parent else 1,
        parent_id=parent.id if parent else None,
        target=parent.target if parent else target,
        created_at=tick(),
    )


def article_ref(article: Article) -> ArticleRef:
    """Reference to an article."""
    return ArticleRef(id=article.id)


def bearer(user: User) -> dict[str, str]:
    """Authorization header carrying a freshly minted token for ``user``."""
    token = create_token(str(user.id), user.username.root, Settings().auth)
    return {"Authorization": f"Bearer {token}"}
