"""initial_schema

Create the foundational schema for Knowspace:
- Users
- Spaces (three-level hierarchy)
- Articles and Flashcards (content inside a space)
- Comments (threaded, at most four levels, on an article or a flashcard)
- Alerts (raised on space events)
- Reactions (one per user and target)
- Space subscriptions and contributions

Revision ID: 3c1f0b7d92ae
Revises:
Create Date: 2026-10-19 10:12:41.508113

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f0b7d92ae"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _id() -> sa.Column:
    return sa.Column(
        "id",
        sa.UUID(),
        server_default=sa.text("uuid_generate_v4()"),
        nullable=False,
    )


def _created_at() -> sa.Column:
    return sa.Column(
        "created_at",
        sa.TIMESTAMP(timezone=True),
        nullable=False,
        server_default=sa.text("NOW()"),
    )


def _fk(column: str, table: str, nullable: bool = False) -> sa.Column:
    return sa.Column(
        column,
        sa.UUID(),
        sa.ForeignKey(f"{table}.id", ondelete="CASCADE"),
        nullable=nullable,
    )


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    op.execute("""
        DO $$ BEGIN
            CREATE TYPE alert_type AS ENUM ('subscription');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        _id(),
        sa.Column("username", sa.String(50), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("is_admin", sa.Boolean(), nullable=False, server_default="false"),
        _created_at(),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email", name="uq_users_email"),
    )
    op.create_index("idx_users_username", "users", ["username"])

    # ========================================================================
    # SPACES table (level 1 roots, at most three levels)
    # ========================================================================
    op.create_table(
        "spaces",
        _id(),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("about", sa.Text(), nullable=False, server_default=""),
        sa.Column("banner_url", sa.Text(), nullable=True),
        sa.Column("level", sa.Integer(), nullable=False, server_default="1"),
        _fk("parent_id", "spaces", nullable=True),
        _created_at(),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("level BETWEEN 1 AND 3", name="ck_spaces_level"),
        sa.CheckConstraint(
            "(level = 1) = (parent_id IS NULL)",
            name="ck_spaces_parent_matches_level",
        ),
    )
    op.create_index("idx_spaces_parent_id", "spaces", ["parent_id"])

    # ========================================================================
    # ARTICLES and FLASHCARDS tables
    # ========================================================================
    op.create_table(
        "articles",
        _id(),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("text", sa.Text(), nullable=False),
        _fk("author_id", "users"),
        _fk("space_id", "spaces"),
        _created_at(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_articles_space_id", "articles", ["space_id"])

    op.create_table(
        "flashcards",
        _id(),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("short_description", sa.Text(), nullable=False),
        sa.Column("long_description", sa.Text(), nullable=False),
        _fk("author_id", "users"),
        _fk("space_id", "spaces"),
        _created_at(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_flashcards_space_id", "flashcards", ["space_id"])

    # ========================================================================
    # COMMENTS table (threaded, replies copy the root's content target)
    # ========================================================================
    op.create_table(
        "comments",
        _id(),
        sa.Column("text", sa.Text(), nullable=False),
        _fk("author_id", "users"),
        sa.Column("level", sa.Integer(), nullable=False, server_default="1"),
        _fk("parent_id", "comments", nullable=True),
        _fk("article_id", "articles", nullable=True),
        _fk("flashcard_id", "flashcards", nullable=True),
        _created_at(),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("level BETWEEN 1 AND 4", name="ck_comments_level"),
        sa.CheckConstraint(
            "(article_id IS NULL) <> (flashcard_id IS NULL)",
            name="ck_comments_single_target",
        ),
    )
    op.create_index("idx_comments_article_id", "comments", ["article_id"])
    op.create_index("idx_comments_flashcard_id", "comments", ["flashcard_id"])
    op.create_index("idx_comments_parent_id", "comments", ["parent_id"])

    # ========================================================================
    # ALERTS table
    # ========================================================================
    op.create_table(
        "alerts",
        _id(),
        sa.Column(
            "type",
            postgresql.ENUM("subscription", name="alert_type", create_type=False),
            nullable=False,
        ),
        sa.Column("message", sa.Text(), nullable=False),
        _fk("user_id", "users"),
        _fk("space_id", "spaces"),
        sa.Column("is_read", sa.Boolean(), nullable=False, server_default="false"),
        _created_at(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_alerts_space_id", "alerts", ["space_id"])
    op.create_index("idx_alerts_user_id", "alerts", ["user_id"])

    # ========================================================================
    # REACTIONS table (exactly one target, one reaction per user and target)
    # ========================================================================
    op.create_table(
        "reactions",
        _id(),
        sa.Column("emoji", sa.String(16), nullable=False),
        _fk("user_id", "users"),
        _fk("article_id", "articles", nullable=True),
        _fk("flashcard_id", "flashcards", nullable=True),
        _fk("comment_id", "comments", nullable=True),
        _fk("alert_id", "alerts", nullable=True),
        _created_at(),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "num_nonnulls(article_id, flashcard_id, comment_id, alert_id) = 1",
            name="ck_reactions_single_target",
        ),
        sa.UniqueConstraint("user_id", "article_id", name="uq_reaction_user_article"),
        sa.UniqueConstraint(
            "user_id", "flashcard_id", name="uq_reaction_user_flashcard"
        ),
        sa.UniqueConstraint("user_id", "comment_id", name="uq_reaction_user_comment"),
        sa.UniqueConstraint("user_id", "alert_id", name="uq_reaction_user_alert"),
    )
    op.create_index("idx_reactions_article_id", "reactions", ["article_id"])
    op.create_index("idx_reactions_flashcard_id", "reactions", ["flashcard_id"])
    op.create_index("idx_reactions_comment_id", "reactions", ["comment_id"])
    op.create_index("idx_reactions_alert_id", "reactions", ["alert_id"])

    # ========================================================================
    # SPACE_SUBSCRIPTIONS and SPACE_CONTRIBUTIONS tables
    # ========================================================================
    op.create_table(
        "space_subscriptions",
        _id(),
        _fk("user_id", "users"),
        _fk("space_id", "spaces"),
        _created_at(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", "space_id", name="uq_space_subscription"),
    )
    op.create_index(
        "idx_space_subscriptions_space_id", "space_subscriptions", ["space_id"]
    )

    op.create_table(
        "space_contributions",
        _id(),
        _fk("user_id", "users"),
        _fk("space_id", "spaces"),
        _created_at(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", "space_id", name="uq_space_contribution"),
    )
    op.create_index(
        "idx_space_contributions_space_id", "space_contributions", ["space_id"]
    )


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables (in reverse order of dependencies)
    op.drop_table("space_contributions")
    op.drop_table("space_subscriptions")
    op.drop_table("reactions")
    op.drop_table("alerts")
    op.drop_table("comments")
    op.drop_table("flashcards")
    op.drop_table("articles")
    op.drop_table("spaces")
    op.drop_table("users")

    op.execute("DROP TYPE IF EXISTS alert_type")
