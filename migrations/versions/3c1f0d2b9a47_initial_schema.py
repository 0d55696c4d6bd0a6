"""initial_schema

Create the foundational schema for the forum:
- Users (owned by the identity system, read for usernames)
- Threads
- Comments (soft-deleted via deleted_at)
- Replies (soft-deleted via deleted_at)

Revision ID: 3c1f0d2b9a47
Revises:
Create Date: 2025-04-18 09:23:16.320114

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f0d2b9a47"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _created_at() -> sa.Column:
    return sa.Column(
        "created_at",
        postgresql.TIMESTAMP(timezone=True),
        nullable=False,
        server_default=sa.text("NOW()"),
    )


def _owner_fk(column: str = "owner") -> sa.Column:
    return sa.Column(
        column,
        sa.String(50),
        sa.ForeignKey("users.id", ondelete="CASCADE", onupdate="CASCADE"),
        nullable=False,
    )


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "users",
        sa.Column("id", sa.String(50), primary_key=True),
        sa.Column("username", sa.String(50), nullable=False, unique=True),
        _created_at(),
    )

    op.create_table(
        "threads",
        sa.Column("id", sa.String(50), primary_key=True),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("body", sa.Text(), nullable=False),
        _owner_fk(),
        _created_at(),
    )
    op.create_index("idx_threads_owner", "threads", ["owner"])

    op.create_table(
        "comments",
        sa.Column("id", sa.String(50), primary_key=True),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column(
            "thread",
            sa.String(50),
            sa.ForeignKey("threads.id", ondelete="CASCADE", onupdate="CASCADE"),
            nullable=False,
        ),
        _owner_fk(),
        _created_at(),
        sa.Column("deleted_at", postgresql.TIMESTAMP(timezone=True), nullable=True),
    )
    # Thread detail reads comments of one thread in creation order
    op.create_index(
        "idx_comments_thread_created_at", "comments", ["thread", "created_at"]
    )
    op.create_index("idx_comments_owner", "comments", ["owner"])

    op.create_table(
        "replies",
        sa.Column("id", sa.String(50), primary_key=True),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column(
            "comment",
            sa.String(50),
            sa.ForeignKey("comments.id", ondelete="CASCADE", onupdate="CASCADE"),
            nullable=False,
        ),
        _owner_fk(),
        _created_at(),
        sa.Column("deleted_at", postgresql.TIMESTAMP(timezone=True), nullable=True),
    )
    op.create_index(
        "idx_replies_comment_created_at", "replies", ["comment", "created_at"]
    )
    op.create_index("idx_replies_owner", "replies", ["owner"])


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables (in reverse order of dependencies)
    op.drop_table("replies")
    op.drop_table("comments")
    op.drop_table("threads")
    op.drop_table("users")
