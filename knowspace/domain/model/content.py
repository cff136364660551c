"""Content entities.

Articles and flashcards are the pieces of content that live in a space
and carry comment threads and reactions.
"""

from pydantic import Field

from knowspace.domain.model.common import Entity
from knowspace.domain.value import ArticleId, FlashcardId, SpaceId, UserId


class Article(Entity):
    """Long-form content in a space."""

    id: ArticleId
    title: str = Field(min_length=1, max_length=300)
    text: str
    author_id: UserId
    space_id: SpaceId


class Flashcard(Entity):
    """Short study card in a space."""

    id: FlashcardId
    title: str = Field(min_length=1, max_length=300)
    short_description: str
    long_description: str
    author_id: UserId
    space_id: SpaceId
