"""Thread repository interface."""

from abc import ABC, abstractmethod

from forum.domain.error import UnimplementedError
from forum.domain.model.thread import AddedThread, NewThread, ThreadRow
from forum.domain.value import ThreadId, UserId


class ThreadRepository(ABC):
    """Repository for threads.

    Defines the contract for thread persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def add_thread(self, owner_id: UserId, new_thread: NewThread) -> AddedThread:
        """Persist a new thread.

        Args:
            owner_id: ID of the user creating the thread
            new_thread: Validated thread content

        Returns:
            The stored thread with its generated ID
        """
        raise UnimplementedError("THREAD_REPOSITORY")

    @abstractmethod
    async def verify_is_thread_exist(self, thread_id: ThreadId) -> None:
        """Check that a thread exists.

        Args:
            thread_id: The thread ID

        Raises:
            NotFoundError: If no thread has this ID
        """
        raise UnimplementedError("THREAD_REPOSITORY")

    @abstractmethod
    async def get_thread_by_id(self, thread_id: ThreadId) -> ThreadRow:
        """Get a thread with its owner's username.

        Args:
            thread_id: The thread ID

        Returns:
            The thread row

        Raises:
            NotFoundError: If no thread has this ID
        """
        raise UnimplementedError("THREAD_REPOSITORY")
