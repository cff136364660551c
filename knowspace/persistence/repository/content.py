"""PostgreSQL implementations of Article and Flashcard repositories."""

from typing import Optional

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from knowspace.domain.model import Article, Flashcard
from knowspace.domain.repository import ArticleRepository, FlashcardRepository
from knowspace.domain.value import ArticleId, FlashcardId, SpaceId
from knowspace.persistence.mappers import (
    article_to_dict,
    flashcard_to_dict,
    row_to_article,
    row_to_flashcard,
)
from knowspace.persistence.tables import articles_table, flashcards_table


class PostgresArticleRepository(ArticleRepository):
    """PostgreSQL implementation of ArticleRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, article_id: ArticleId) -> Optional[Article]:
        """Find an article by ID."""
        stmt = select(articles_table).where(articles_table.c.id == article_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_article(row._asdict()) if row else None

    async def find_by_space(self, space_id: SpaceId) -> list[Article]:
        """Find the articles of a space, oldest first."""
        stmt = (
            select(articles_table)
            .where(articles_table.c.space_id == space_id)
            .order_by(articles_table.c.created_at, articles_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_article(row._asdict()) for row in result.fetchall()]

    async def save(self, article: Article) -> Article:
        """Save an article (create)."""
        stmt = insert(articles_table).values(**article_to_dict(article))
        await self.session.execute(stmt)
        await self.session.flush()
        return article


class PostgresFlashcardRepository(FlashcardRepository):
    """PostgreSQL implementation of FlashcardRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, flashcard_id: FlashcardId) -> Optional[Flashcard]:
        """Find a flashcard by ID."""
        stmt = select(flashcards_table).where(flashcards_table.c.id == flashcard_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_flashcard(row._asdict()) if row else None

    async def find_by_space(self, space_id: SpaceId) -> list[Flashcard]:
        """Find the flashcards of a space, oldest first."""
        stmt = (
            select(flashcards_table)
            .where(flashcards_table.c.space_id == space_id)
            .order_by(flashcards_table.c.created_at, flashcards_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_flashcard(row._asdict()) for row in result.fetchall()]

    async def save(self, flashcard: Flashcard) -> Flashcard:
        """Save a flashcard (create)."""
        stmt = insert(flashcards_table).values(**flashcard_to_dict(flashcard))
        await self.session.execute(stmt)
        await self.session.flush()
        return flashcard
