"""Add reply use case."""

from typing import Any

import logfire
from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.domain.model import AddedReply, NewReply
from forum.domain.repository import (
    CommentRepository,
    ReplyRepository,
    ThreadRepository,
)
from forum.domain.value import CommentId, ThreadId, UserId


class AddReplyRequest(BaseModel):
    """Add reply request."""

    user_id: str  # User ID from authenticated user
    thread_id: str
    comment_id: str
    payload: dict[str, Any]  # Raw request body


class AddReplyUseCase(BaseUseCase[AddReplyRequest, AddedReply]):
    """Use case for replying to a comment."""

    def __init__(
        self,
        thread_repository: ThreadRepository,
        comment_repository: CommentRepository,
        reply_repository: ReplyRepository,
    ) -> None:
        """Initialize add reply use case.

        Args:
            thread_repository: Thread repository
            comment_repository: Comment repository
            reply_repository: Reply repository
        """
        self.thread_repository = thread_repository
        self.comment_repository = comment_repository
        self.reply_repository = reply_repository

    async def execute(self, request: AddReplyRequest) -> AddedReply:
        """Execute add reply flow.

        Steps:
        1. Verify the thread exists
        2. Verify the comment exists
        3. Validate the payload
        4. Store the reply

        Raises:
            NotFoundError: If the thread or comment does not exist
            ContentValidationError: If the payload is not a valid reply
        """
        thread_id = ThreadId(request.thread_id)
        comment_id = CommentId(request.comment_id)

        with logfire.span(
            "add_reply.execute",
            thread_id=thread_id,
            comment_id=comment_id,
            user_id=request.user_id,
        ):
            await self.thread_repository.verify_is_thread_exist(thread_id)
            await self.comment_repository.verify_is_comment_exist(comment_id)

            new_reply = NewReply.create(request.payload)
            added = await self.reply_repository.add_reply(
                comment_id, UserId(request.user_id), new_reply
            )
            logfire.info("Reply created", reply_id=added.id, comment_id=comment_id)
            return added
