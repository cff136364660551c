"""SQLAlchemy table definitions for Knowspace.

These table definitions are used with SQLAlchemy Core queries.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Enum,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("username", String(50), nullable=False),
    Column("email", String(255), nullable=False, unique=True),
    Column("is_admin", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_users_username", users_table.c.username)

# ============================================================================
# SPACES TABLE (three-level hierarchy)
# ============================================================================
spaces_table = Table(
    "spaces",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("name", String(200), nullable=False),
    Column("about", Text, nullable=False, server_default=""),
    Column("banner_url", Text, nullable=True),
    Column("level", Integer, nullable=False, server_default="1"),
    Column(
        "parent_id", UUID, ForeignKey("spaces.id", ondelete="CASCADE"), nullable=True
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("level BETWEEN 1 AND 3", name="ck_spaces_level"),
    CheckConstraint(
        "(level = 1) = (parent_id IS NULL)", name="ck_spaces_parent_matches_level"
    ),
)

Index("idx_spaces_parent_id", spaces_table.c.parent_id)

# ============================================================================
# ARTICLES TABLE
# ============================================================================
articles_table = Table(
    "articles",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("title", String(300), nullable=False),
    Column("text", Text, nullable=False),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "space_id", UUID, ForeignKey("spaces.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_articles_space_id", articles_table.c.space_id)

# ============================================================================
# FLASHCARDS TABLE
# ============================================================================
flashcards_table = Table(
    "flashcards",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("title", String(300), nullable=False),
    Column("short_description", Text, nullable=False),
    Column("long_description", Text, nullable=False),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "space_id", UUID, ForeignKey("spaces.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_flashcards_space_id", flashcards_table.c.space_id)

# ============================================================================
# COMMENTS TABLE (threaded, max 4 levels)
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("text", Text, nullable=False),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("level", Integer, nullable=False, server_default="1"),
    Column(
        "parent_id", UUID, ForeignKey("comments.id", ondelete="CASCADE"), nullable=True
    ),
    Column(
        "article_id",
        UUID,
        ForeignKey("articles.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column(
        "flashcard_id",
        UUID,
        ForeignKey("flashcards.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("level BETWEEN 1 AND 4", name="ck_comments_level"),
    CheckConstraint(
        "(article_id IS NULL) <> (flashcard_id IS NULL)",
        name="ck_comments_single_target",
    ),
)

Index("idx_comments_article_id", comments_table.c.article_id)
Index("idx_comments_flashcard_id", comments_table.c.flashcard_id)
Index("idx_comments_parent_id", comments_table.c.parent_id)

# ============================================================================
# ALERTS TABLE
# ============================================================================
alerts_table = Table(
    "alerts",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "type",
        Enum("subscription", name="alert_type", create_type=False),
        nullable=False,
    ),
    Column("message", Text, nullable=False),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column(
        "space_id", UUID, ForeignKey("spaces.id", ondelete="CASCADE"), nullable=False
    ),
    Column("is_read", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_alerts_space_id", alerts_table.c.space_id)
Index("idx_alerts_user_id", alerts_table.c.user_id)

# ============================================================================
# REACTIONS TABLE (one per user and target)
# ============================================================================
reactions_table = Table(
    "reactions",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("emoji", String(16), nullable=False),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column(
        "article_id",
        UUID,
        ForeignKey("articles.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column(
        "flashcard_id",
        UUID,
        ForeignKey("flashcards.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column(
        "comment_id",
        UUID,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column(
        "alert_id", UUID, ForeignKey("alerts.id", ondelete="CASCADE"), nullable=True
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "num_nonnulls(article_id, flashcard_id, comment_id, alert_id) = 1",
        name="ck_reactions_single_target",
    ),
    UniqueConstraint("user_id", "article_id", name="uq_reaction_user_article"),
    UniqueConstraint("user_id", "flashcard_id", name="uq_reaction_user_flashcard"),
    UniqueConstraint("user_id", "comment_id", name="uq_reaction_user_comment"),
    UniqueConstraint("user_id", "alert_id", name="uq_reaction_user_alert"),
)

Index("idx_reactions_article_id", reactions_table.c.article_id)
Index("idx_reactions_flashcard_id", reactions_table.c.flashcard_id)
Index("idx_reactions_comment_id", reactions_table.c.comment_id)
Index("idx_reactions_alert_id", reactions_table.c.alert_id)

# ============================================================================
# SPACE SUBSCRIPTIONS TABLE
# ============================================================================
space_subscriptions_table = Table(
    "space_subscriptions",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column(
        "space_id", UUID, ForeignKey("spaces.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("user_id", "space_id", name="uq_space_subscription"),
)

Index("idx_space_subscriptions_space_id", space_subscriptions_table.c.space_id)

# ============================================================================
# SPACE CONTRIBUTIONS TABLE
# ============================================================================
space_contributions_table = Table(
    "space_contributions",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column(
        "space_id", UUID, ForeignKey("spaces.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("user_id", "space_id", name="uq_space_contribution"),
)

Index("idx_space_contributions_space_id", space_contributions_table.c.space_id)
