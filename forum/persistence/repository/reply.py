"""PostgreSQL implementation of Reply repository."""

from typing import List, Sequence

from sqlalchemy import func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.error import NotAuthorizedError, NotFoundError, StorageInvariantError
from forum.domain.model import AddedReply, NewReply, ReplyRow
from forum.domain.repository import ReplyRepository
from forum.domain.value import (
    REPLY_PREFIX,
    CommentId,
    IdGenerator,
    ReplyId,
    UserId,
    generate_id,
    make_id,
)
from forum.persistence.mappers import row_to_reply
from forum.persistence.tables import replies_table, users_table


class PostgresReplyRepository(ReplyRepository):
    """PostgreSQL implementation of ReplyRepository."""

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

    async def add_reply(
        self,
        comment_id: CommentId,
        owner_id: UserId,
        new_reply: NewReply,
    ) -> AddedReply:
        """Insert a reply and return it with its generated ID."""
        reply_id = make_id(REPLY_PREFIX, self.id_generator)
        stmt = (
            insert(replies_table)
            .values(
                id=reply_id,
                content=new_reply.content,
                comment=comment_id,
                owner=owner_id,
            )
            .returning(
                replies_table.c.id, replies_table.c.content, replies_table.c.owner
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return AddedReply.create(row._asdict())

    async def get_replies_by_comment_ids(
        self, comment_ids: Sequence[CommentId]
    ) -> List[ReplyRow]:
        """Get the replies of several comments in one query."""
        if not comment_ids:
            return []

        stmt = (
            select(
                replies_table.c.id,
                replies_table.c.comment,
                users_table.c.username,
                replies_table.c.content,
                replies_table.c.created_at,
                replies_table.c.deleted_at,
            )
            .select_from(
                replies_table.join(
                    users_table, replies_table.c.owner == users_table.c.id
                )
            )
            .where(replies_table.c.comment.in_(list(comment_ids)))
            .order_by(replies_table.c.created_at.asc())
        )
        result = await self.session.execute(stmt)
        return [row_to_reply(row._asdict()) for row in result.fetchall()]

    async def verify_is_reply_exist(self, reply_id: ReplyId) -> None:
        """Raise NotFoundError unless the reply exists."""
        stmt = select(replies_table.c.id).where(replies_table.c.id == reply_id)
        result = await self.session.execute(stmt)
        if result.fetchone() is None:
            raise NotFoundError("Reply", reply_id)

    async def verify_reply_owner(self, reply_id: ReplyId, user_id: UserId) -> None:
        """Raise NotAuthorizedError unless the user owns the reply."""
        stmt = select(replies_table.c.owner).where(replies_table.c.id == reply_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if row is None or row.owner != user_id:
            raise NotAuthorizedError("Reply", reply_id, user_id)

    async def delete_reply(self, reply_id: ReplyId) -> None:
        """Stamp deleted_at on a live reply."""
        stmt = (
            update(replies_table)
            .where(replies_table.c.id == reply_id)
            .where(replies_table.c.deleted_at.is_(None))
            .values(deleted_at=func.now())
        )
        result = await self.session.execute(stmt)
        if result.rowcount == 0:  # type: ignore[attr-defined]
            raise StorageInvariantError("Reply", "delete", reply_id)
        await self.session.flush()
