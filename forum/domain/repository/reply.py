"""Reply repository interface."""

from abc import ABC, abstractmethod
from typing import List, Sequence

from forum.domain.error import UnimplementedError
from forum.domain.model.reply import AddedReply, NewReply, ReplyRow
from forum.domain.value import CommentId, ReplyId, UserId


class ReplyRepository(ABC):
    """Repository for replies to comments."""

    @abstractmethod
    async def add_reply(
        self,
        comment_id: CommentId,
        owner_id: UserId,
        new_reply: NewReply,
    ) -> AddedReply:
        """Persist a new reply to a comment.

        Args:
            comment_id: The comment being replied to
            owner_id: ID of the replying user
            new_reply: Validated reply content

        Returns:
            The stored reply with its generated ID
        """
        raise UnimplementedError("REPLY_REPOSITORY")

    @abstractmethod
    async def get_replies_by_comment_ids(
        self, comment_ids: Sequence[CommentId]
    ) -> List[ReplyRow]:
        """Get the replies of several comments, oldest first.

        An empty ID list returns an empty list without querying storage.

        Args:
            comment_ids: The parent comment IDs

        Returns:
            Reply rows tagged with their comment ID, in ascending creation order
        """
        raise UnimplementedError("REPLY_REPOSITORY")

    @abstractmethod
    async def verify_is_reply_exist(self, reply_id: ReplyId) -> None:
        """Check that a reply exists.

        Raises:
            NotFoundError: If no reply has this ID
        """
        raise UnimplementedError("REPLY_REPOSITORY")

    @abstractmethod
    async def verify_reply_owner(self, reply_id: ReplyId, user_id: UserId) -> None:
        """Check that a user owns a reply.

        Raises:
            NotAuthorizedError: If the user is not the owner
        """
        raise UnimplementedError("REPLY_REPOSITORY")

    @abstractmethod
    async def delete_reply(self, reply_id: ReplyId) -> None:
        """Soft-delete a reply by stamping its deletion time.

        Raises:
            StorageInvariantError: If no live reply was updated
        """
        raise UnimplementedError("REPLY_REPOSITORY")
