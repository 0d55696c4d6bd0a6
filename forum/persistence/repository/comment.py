"""PostgreSQL implementation of Comment repository."""

from typing import List

from sqlalchemy import func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.error import NotAuthorizedError, NotFoundError, StorageInvariantError
from forum.domain.model import AddedComment, CommentRow, NewComment
from forum.domain.repository import CommentRepository
from forum.domain.value import (
    COMMENT_PREFIX,
    CommentId,
    IdGenerator,
    ThreadId,
    UserId,
    generate_id,
    make_id,
)
from forum.persistence.mappers import row_to_comment
from forum.persistence.tables import comment_likes_table, comments_table, users_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

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

    async def add_comment(
        self,
        owner_id: UserId,
        thread_id: ThreadId,
        new_comment: NewComment,
    ) -> AddedComment:
        """Insert a comment and return it with its generated ID."""
        comment_id = make_id(COMMENT_PREFIX, self.id_generator)
        stmt = (
            insert(comments_table)
            .values(
                id=comment_id,
                content=new_comment.content,
                thread=thread_id,
                owner=owner_id,
            )
            .returning(
                comments_table.c.id, comments_table.c.content, comments_table.c.owner
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return AddedComment.create(row._asdict())

    async def delete_comment(self, comment_id: CommentId) -> None:
        """Stamp deleted_at on a live comment."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .where(comments_table.c.deleted_at.is_(None))
            .values(deleted_at=func.now())
        )
        result = await self.session.execute(stmt)
        if result.rowcount == 0:  # type: ignore[attr-defined]
            raise StorageInvariantError("Comment", "delete", comment_id)
        await self.session.flush()

    async def verify_is_comment_exist(self, comment_id: CommentId) -> None:
        """Raise NotFoundError unless the comment exists."""
        stmt = select(comments_table.c.id).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        if result.fetchone() is None:
            raise NotFoundError("Comment", comment_id)

    async def verify_comment_owner(
        self, comment_id: CommentId, user_id: UserId
    ) -> None:
        """Raise NotAuthorizedError unless the user owns the comment."""
        stmt = select(comments_table.c.owner).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if row is None or row.owner != user_id:
            raise NotAuthorizedError("Comment", comment_id, user_id)

    async def get_comments_by_thread_id(self, thread_id: ThreadId) -> List[CommentRow]:
        """Get the comments of a thread with usernames and like counts."""
        like_count = (
            select(func.count())
            .select_from(comment_likes_table)
            .where(comment_likes_table.c.comment_id == comments_table.c.id)
            .scalar_subquery()
            .label("like_count")
        )
        stmt = (
            select(
                comments_table.c.id,
                users_table.c.username,
                comments_table.c.content,
                comments_table.c.created_at,
                comments_table.c.deleted_at,
                like_count,
            )
            .select_from(
                comments_table.join(
                    users_table, comments_table.c.owner == users_table.c.id
                )
            )
            .where(comments_table.c.thread == thread_id)
            .order_by(comments_table.c.created_at.asc())
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]
