"""Delete reply use case."""

import logfire
from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.domain.repository import (
    CommentRepository,
    ReplyRepository,
    ThreadRepository,
)
from forum.domain.value import CommentId, ReplyId, ThreadId, UserId


class DeleteReplyRequest(BaseModel):
    """Delete reply request."""

    user_id: str  # User ID from authenticated user
    thread_id: str
    comment_id: str
    reply_id: str


class DeleteReplyUseCase(BaseUseCase[DeleteReplyRequest, None]):
    """Use case for soft-deleting one's own reply."""

    def __init__(
        self,
        thread_repository: ThreadRepository,
        comment_repository: CommentRepository,
        reply_repository: ReplyRepository,
    ) -> None:
        """Initialize delete reply use case.

        Args:
            thread_repository: Thread repository
            comment_repository: Comment repository
            reply_repository: Reply repository
        """
        self.thread_repository = thread_repository
        self.comment_repository = comment_repository
        self.reply_repository = reply_repository

    async def execute(self, request: DeleteReplyRequest) -> None:
        """Execute delete reply flow.

        Steps:
        1. Verify the thread exists
        2. Verify the comment exists
        3. Verify the reply exists
        4. Verify the caller owns the reply
        5. Soft-delete the reply

        Raises:
            NotFoundError: If the thread, comment or reply does not exist
            NotAuthorizedError: If the caller does not own the reply
            StorageInvariantError: If the reply was already deleted
        """
        thread_id = ThreadId(request.thread_id)
        comment_id = CommentId(request.comment_id)
        reply_id = ReplyId(request.reply_id)
        user_id = UserId(request.user_id)

        with logfire.span(
            "delete_reply.execute",
            thread_id=thread_id,
            comment_id=comment_id,
            reply_id=reply_id,
            user_id=user_id,
        ):
            await self.thread_repository.verify_is_thread_exist(thread_id)
            await self.comment_repository.verify_is_comment_exist(comment_id)
            await self.reply_repository.verify_is_reply_exist(reply_id)
            await self.reply_repository.verify_reply_owner(reply_id, user_id)
            await self.reply_repository.delete_reply(reply_id)
            logfire.info("Reply deleted", reply_id=reply_id)
