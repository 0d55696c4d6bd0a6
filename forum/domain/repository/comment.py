"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List

from forum.domain.error import UnimplementedError
from forum.domain.model.comment import AddedComment, CommentRow, NewComment
from forum.domain.value import CommentId, ThreadId, UserId


class CommentRepository(ABC):
    """Repository for comments.

    Defines the contract for comment persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def add_comment(
        self,
        owner_id: UserId,
        thread_id: ThreadId,
        new_comment: NewComment,
    ) -> AddedComment:
        """Persist a new comment on a thread.

        Args:
            owner_id: ID of the commenting user
            thread_id: The thread being commented on
            new_comment: Validated comment content

        Returns:
            The stored comment with its generated ID
        """
        raise UnimplementedError("COMMENT_REPOSITORY")

    @abstractmethod
    async def delete_comment(self, comment_id: CommentId) -> None:
        """Soft-delete a comment by stamping its deletion time.

        Args:
            comment_id: The comment ID

        Raises:
            StorageInvariantError: If no live comment was updated
        """
        raise UnimplementedError("COMMENT_REPOSITORY")

    @abstractmethod
    async def verify_is_comment_exist(self, comment_id: CommentId) -> None:
        """Check that a comment exists.

        Soft-deleted comments still exist.

        Raises:
            NotFoundError: If no comment has this ID
        """
        raise UnimplementedError("COMMENT_REPOSITORY")

    @abstractmethod
    async def verify_comment_owner(
        self, comment_id: CommentId, user_id: UserId
    ) -> None:
        """Check that a user owns a comment.

        Args:
            comment_id: The comment ID
            user_id: The user claiming ownership

        Raises:
            NotAuthorizedError: If the user is not the owner
        """
        raise UnimplementedError("COMMENT_REPOSITORY")

    @abstractmethod
    async def get_comments_by_thread_id(self, thread_id: ThreadId) -> List[CommentRow]:
        """Get every comment of a thread, oldest first.

        Deleted comments are included. Each row carries the owner's username
        and the number of likes on the comment.

        Args:
            thread_id: The thread ID

        Returns:
            Comment rows in ascending creation order
        """
        raise UnimplementedError("COMMENT_REPOSITORY")
