"""PostgreSQL implementation of Thread repository."""

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.error import NotFoundError
from forum.domain.model import AddedThread, NewThread, ThreadRow
from forum.domain.repository import ThreadRepository
from forum.domain.value import (
    THREAD_PREFIX,
    IdGenerator,
    ThreadId,
    UserId,
    generate_id,
    make_id,
)
from forum.persistence.mappers import row_to_thread
from forum.persistence.tables import threads_table, users_table


class PostgresThreadRepository(ThreadRepository):
    """PostgreSQL implementation of ThreadRepository."""

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

    async def add_thread(self, owner_id: UserId, new_thread: NewThread) -> AddedThread:
        """Insert a thread and return it with its generated ID."""
        thread_id = make_id(THREAD_PREFIX, self.id_generator)
        stmt = (
            insert(threads_table)
            .values(
                id=thread_id,
                title=new_thread.title,
                body=new_thread.body,
                owner=owner_id,
            )
            .returning(threads_table.c.id, threads_table.c.title, threads_table.c.owner)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return AddedThread.create(row._asdict())

    async def verify_is_thread_exist(self, thread_id: ThreadId) -> None:
        """Raise NotFoundError unless the thread exists."""
        stmt = select(threads_table.c.id).where(threads_table.c.id == thread_id)
        result = await self.session.execute(stmt)
        if result.fetchone() is None:
            raise NotFoundError("Thread", thread_id)

    async def get_thread_by_id(self, thread_id: ThreadId) -> ThreadRow:
        """Get a thread joined with its owner's username."""
        stmt = (
            select(
                threads_table.c.id,
                threads_table.c.title,
                threads_table.c.body,
                threads_table.c.created_at,
                users_table.c.username,
            )
            .select_from(
                threads_table.join(
                    users_table, threads_table.c.owner == users_table.c.id
                )
            )
            .where(threads_table.c.id == thread_id)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if row is None:
            raise NotFoundError("Thread", thread_id)
        return row_to_thread(row._asdict())
