"""Article and flashcard repository interfaces."""

from abc import ABC, abstractmethod
from typing import Optional

from knowspace.domain.model.content import Article, Flashcard
from knowspace.domain.value import ArticleId, FlashcardId, SpaceId


class ArticleRepository(ABC):
    """Repository for Article entity."""

    @abstractmethod
    async def find_by_id(self, article_id: ArticleId) -> Optional[Article]:
        """Find an article by ID.

        Args:
            article_id: The article's unique identifier

        Returns:
            The article if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_space(self, space_id: SpaceId) -> list[Article]:
        """Find the articles of a space, oldest first.

        Args:
            space_id: The space ID

        Returns:
            Articles in the space
        """
        pass

    @abstractmethod
    async def save(self, article: Article) -> Article:
        """Save an article (create or update)."""
        pass


class FlashcardRepository(ABC):
    """Repository for Flashcard entity."""

    @abstractmethod
    async def find_by_id(self, flashcard_id: FlashcardId) -> Optional[Flashcard]:
        """Find a flashcard by ID.

        Args:
            flashcard_id: The flashcard's unique identifier

        Returns:
            The flashcard if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_space(self, space_id: SpaceId) -> list[Flashcard]:
        """Find the flashcards of a space, oldest first.

        Args:
            space_id: The space ID

        Returns:
            Flashcards in the space
        """
        pass

    @abstractmethod
    async def save(self, flashcard: Flashcard) -> Flashcard:
        """Save a flashcard (create or update)."""
        pass
