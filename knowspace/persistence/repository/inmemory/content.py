"""In-memory article and flashcard repositories for testing."""

from typing import Optional

from knowspace.domain.model.content import Article, Flashcard
from knowspace.domain.repository.content import ArticleRepository, FlashcardRepository
from knowspace.domain.value import ArticleId, FlashcardId, SpaceId

from .store import InMemoryStore, oldest_first


class InMemoryArticleRepository(ArticleRepository):
    """In-memory implementation of ArticleRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_id(self, article_id: ArticleId) -> Optional[Article]:
        """Find an article by ID."""
        return self._store.articles.get(article_id)

    async def find_by_space(self, space_id: SpaceId) -> list[Article]:
        """Find the articles of a space."""
        return oldest_first(
            a for a in self._store.articles.values() if a.space_id == space_id
        )

    async def save(self, article: Article) -> Article:
        """Save an article."""
        self._store.articles[article.id] = article
        return article


class InMemoryFlashcardRepository(FlashcardRepository):
    """In-memory implementation of FlashcardRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_id(self, flashcard_id: FlashcardId) -> Optional[Flashcard]:
        """Find a flashcard by ID."""
        return self._store.flashcards.get(flashcard_id)

    async def find_by_space(self, space_id: SpaceId) -> list[Flashcard]:
        """Find the flashcards of a space."""
        return oldest_first(
            f for f in self._store.flashcards.values() if f.space_id == space_id
        )

    async def save(self, flashcard: Flashcard) -> Flashcard:
        """Save a flashcard."""
        self._store.flashcards[flashcard.id] = flashcard
        return flashcard
