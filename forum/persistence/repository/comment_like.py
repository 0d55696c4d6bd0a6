"""PostgreSQL implementation of CommentLike repository."""

from typing import Optional

from sqlalchemy import and_, delete, insert, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.error import StorageInvariantError
from forum.domain.model import CommentLike
from forum.domain.repository import CommentLikeRepository
from forum.domain.value import (
    COMMENT_LIKE_PREFIX,
    CommentId,
    IdGenerator,
    UserId,
    generate_id,
    make_id,
)
from forum.persistence.mappers import row_to_comment_like
from forum.persistence.tables import comment_likes_table


class PostgresCommentLikeRepository(CommentLikeRepository):
    """PostgreSQL implementation of CommentLikeRepository."""

    def __init__(
        self, session: AsyncSession, id_generator: IdGenerator = generate_id
    ) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
            id_generator: Source of unique id suffixes
        """
        self.session = session
        self.id_generator = id_generator

    async def get_comment_like(
        self, comment_id: CommentId, user_id: UserId
    ) -> Optional[CommentLike]:
        """Find a user's like on a comment."""
        stmt = select(comment_likes_table).where(
            and_(
                comment_likes_table.c.comment_id == comment_id,
                comment_likes_table.c.user_id == user_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment_like(row._asdict()) if row else None

    async def add_comment_like(
        self, comment_id: CommentId, user_id: UserId
    ) -> CommentLike:
        """Insert a like.

        A duplicate (comment, user) pair is rejected by the unique constraint
        and surfaces as StorageInvariantError.
        """
        stmt = (
            insert(comment_likes_table)
            .values(
                id=make_id(COMMENT_LIKE_PREFIX, self.id_generator),
                comment_id=comment_id,
                user_id=user_id,
            )
            .returning(comment_likes_table)
        )
        try:
            result = await self.session.execute(stmt)
            await self.session.flush()
        except IntegrityError as e:
            raise StorageInvariantError("comment_like", "add", comment_id) from e

        row = result.fetchone()
        if row is None:
            raise StorageInvariantError("comment_like", "add", comment_id)
        return row_to_comment_like(row._asdict())

    async def delete_comment_like(self, comment_id: CommentId, user_id: UserId) -> None:
        """Delete a user's like on a comment."""
        stmt = delete(comment_likes_table).where(
            and_(
                comment_likes_table.c.comment_id == comment_id,
                comment_likes_table.c.user_id == user_id,
            )
        )
        result = await self.session.execute(stmt)
        if result.rowcount == 0:  # type: ignore[attr-defined]
            raise StorageInvariantError("comment_like", "delete", comment_id)
        await self.session.flush()
