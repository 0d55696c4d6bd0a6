"""In-memory thread repository for testing."""

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
from forum.persistence.repository.inmemory.database import InMemoryDatabase


class InMemoryThreadRepository(ThreadRepository):
    """In-memory implementation of ThreadRepository for testing."""

    def __init__(
        self, database: InMemoryDatabase, id_generator: IdGenerator = generate_id
    ) -> None:
        self.database = database
        self.id_generator = id_generator

    async def add_thread(self, owner_id: UserId, new_thread: NewThread) -> AddedThread:
        """Store a thread."""
        thread_id = make_id(THREAD_PREFIX, self.id_generator)
        self.database.threads[thread_id] = {
            "id": thread_id,
            "title": new_thread.title,
            "body": new_thread.body,
            "owner": owner_id,
            "created_at": self.database.now(),
        }
        return AddedThread(id=thread_id, title=new_thread.title, owner=owner_id)

    async def verify_is_thread_exist(self, thread_id: ThreadId) -> None:
        """Raise NotFoundError unless the thread exists."""
        if thread_id not in self.database.threads:
            raise NotFoundError("Thread", thread_id)

    async def get_thread_by_id(self, thread_id: ThreadId) -> ThreadRow:
        """Get a thread with its owner's username."""
        row = self.database.threads.get(thread_id)
        if row is None:
            raise NotFoundError("Thread", thread_id)
        return row_to_thread(
            {**row, "username": self.database.username_of(row["owner"])}
        )
