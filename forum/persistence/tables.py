"""SQLAlchemy table definitions for the forum.

These table definitions are used by the repositories' core queries.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Column,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE (owned by the identity system)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", String(50), primary_key=True),
    Column("username", String(50), nullable=False, unique=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# THREADS TABLE
# ============================================================================
threads_table = Table(
    "threads",
    metadata,
    Column("id", String(50), primary_key=True),
    Column("title", Text, nullable=False),
    Column("body", Text, nullable=False),
    Column(
        "owner",
        String(50),
        ForeignKey("users.id", ondelete="CASCADE", onupdate="CASCADE"),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_threads_owner", threads_table.c.owner)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", String(50), primary_key=True),
    Column("content", Text, nullable=False),
    Column(
        "thread",
        String(50),
        ForeignKey("threads.id", ondelete="CASCADE", onupdate="CASCADE"),
        nullable=False,
    ),
    Column(
        "owner",
        String(50),
        ForeignKey("users.id", ondelete="CASCADE", onupdate="CASCADE"),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("deleted_at", TIMESTAMP(timezone=True), nullable=True),
)

Index(
    "idx_comments_thread_created_at",
    comments_table.c.thread,
    comments_table.c.created_at,
)
Index("idx_comments_owner", comments_table.c.owner)

# ============================================================================
# REPLIES TABLE
# ============================================================================
replies_table = Table(
    "replies",
    metadata,
    Column("id", String(50), primary_key=True),
    Column("content", Text, nullable=False),
    Column(
        "comment",
        String(50),
        ForeignKey("comments.id", ondelete="CASCADE", onupdate="CASCADE"),
        nullable=False,
    ),
    Column(
        "owner",
        String(50),
        ForeignKey("users.id", ondelete="CASCADE", onupdate="CASCADE"),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("deleted_at", TIMESTAMP(timezone=True), nullable=True),
)

Index(
    "idx_replies_comment_created_at",
    replies_table.c.comment,
    replies_table.c.created_at,
)
Index("idx_replies_owner", replies_table.c.owner)

# ============================================================================
# COMMENT LIKES TABLE
# ============================================================================
comment_likes_table = Table(
    "comment_likes",
    metadata,
    Column("id", String(50), primary_key=True),
    Column(
        "comment_id",
        String(50),
        ForeignKey("comments.id", ondelete="CASCADE", onupdate="CASCADE"),
        nullable=False,
    ),
    Column(
        "user_id",
        String(50),
        ForeignKey("users.id", ondelete="CASCADE", onupdate="CASCADE"),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("comment_id", "user_id", name="unique_comment_and_user_id"),
)

Index("idx_comment_likes_comment_id", comment_likes_table.c.comment_id)
