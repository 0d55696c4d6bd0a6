"""add comment_likes table

Revision ID: 9e5b7a61d2c8
Revises: 3c1f0d2b9a47
Create Date: 2025-06-03 14:12:47.991052

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "9e5b7a61d2c8"
down_revision: Union[str, Sequence[str], None] = "3c1f0d2b9a47"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "comment_likes",
        sa.Column("id", sa.String(50), primary_key=True),
        sa.Column(
            "comment_id",
            sa.String(50),
            sa.ForeignKey("comments.id", ondelete="CASCADE", onupdate="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "user_id",
            sa.String(50),
            sa.ForeignKey("users.id", ondelete="CASCADE", onupdate="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        # One like per user per comment; toggling relies on it
        sa.UniqueConstraint(
            "comment_id", "user_id", name="unique_comment_and_user_id"
        ),
    )
    op.create_index("idx_comment_likes_comment_id", "comment_likes", ["comment_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_comment_likes_comment_id", table_name="comment_likes")
    op.drop_table("comment_likes")
