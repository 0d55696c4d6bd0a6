"""Comment like repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from forum.domain.error import UnimplementedError
from forum.domain.model.comment_like import CommentLike
from forum.domain.value import CommentId, UserId


class CommentLikeRepository(ABC):
    """Repository for comment likes.

    A like is keyed by its (comment, user) pair.
    """

    @abstractmethod
    async def get_comment_like(
        self, comment_id: CommentId, user_id: UserId
    ) -> Optional[CommentLike]:
        """Find a user's like on a comment.

        Args:
            comment_id: The comment ID
            user_id: The user ID

        Returns:
            The like if the user liked the comment, None otherwise
        """
        raise UnimplementedError("COMMENT_LIKE_REPOSITORY")

    @abstractmethod
    async def add_comment_like(
        self, comment_id: CommentId, user_id: UserId
    ) -> CommentLike:
        """Record a user's like on a comment.

        Args:
            comment_id: The comment ID
            user_id: The user ID

        Returns:
            The stored like

        Raises:
            StorageInvariantError: If the like could not be inserted
        """
        raise UnimplementedError("COMMENT_LIKE_REPOSITORY")

    @abstractmethod
    async def delete_comment_like(self, comment_id: CommentId, user_id: UserId) -> None:
        """Remove a user's like on a comment.

        Raises:
            StorageInvariantError: If there was no like to remove
        """
        raise UnimplementedError("COMMENT_LIKE_REPOSITORY")
