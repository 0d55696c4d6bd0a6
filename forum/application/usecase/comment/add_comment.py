"""Add comment use case."""

from typing import Any

import logfire
from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.domain.model import AddedComment, NewComment
from forum.domain.repository import CommentRepository, ThreadRepository
from forum.domain.value import ThreadId, UserId


class AddCommentRequest(BaseModel):
    """Add comment request."""

    user_id: str  # User ID from authenticated user
    thread_id: str
    payload: dict[str, Any]  # Raw request body


class AddCommentUseCase(BaseUseCase[AddCommentRequest, AddedComment]):
    """Use case for commenting on a thread."""

    def __init__(
        self,
        thread_repository: ThreadRepository,
        comment_repository: CommentRepository,
    ) -> None:
        """Initialize add comment use case.

        Args:
            thread_repository: Thread repository
            comment_repository: Comment repository
        """
        self.thread_repository = thread_repository
        self.comment_repository = comment_repository

    async def execute(self, request: AddCommentRequest) -> AddedComment:
        """Execute add comment flow.

        Steps:
        1. Verify the thread exists
        2. Validate the payload
        3. Store the comment

        Args:
            request: Add comment request

        Returns:
            The stored comment

        Raises:
            NotFoundError: If the thread does not exist
            ContentValidationError: If the payload is not a valid comment
        """
        thread_id = ThreadId(request.thread_id)

        with logfire.span(
            "add_comment.execute", thread_id=thread_id, user_id=request.user_id
        ):
            await self.thread_repository.verify_is_thread_exist(thread_id)

            new_comment = NewComment.create(request.payload)
            added = await self.comment_repository.add_comment(
                UserId(request.user_id), thread_id, new_comment
            )
            logfire.info("Comment created", comment_id=added.id, thread_id=thread_id)
            return added
