"""PostgreSQL implementation of Comment repository."""

from typing import Optional

from sqlalchemy import and_, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from knowspace.domain.model import Comment
from knowspace.domain.repository import CommentRepository
from knowspace.domain.value import ArticleRef, CommentId, CommentTarget
from knowspace.persistence.mappers import comment_to_dict, row_to_comment
from knowspace.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_roots(self, target: CommentTarget) -> list[Comment]:
        """Find the top-level comments on an article or flashcard."""
        target_column = (
            comments_table.c.article_id
            if isinstance(target, ArticleRef)
            else comments_table.c.flashcard_id
        )
        stmt = (
            select(comments_table)
            .where(
                and_(
                    target_column == target.id,
                    comments_table.c.parent_id.is_(None),
                )
            )
            .order_by(comments_table.c.created_at, comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_children(self, parent_id: CommentId) -> list[Comment]:
        """Find direct replies to a comment in insertion order."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.parent_id == parent_id)
            .order_by(comments_table.c.created_at, comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create)."""
        stmt = insert(comments_table).values(**comment_to_dict(comment))
        await self.session.execute(stmt)
        await self.session.flush()
        return comment
