"""Delete comment use case."""

import logfire
from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.domain.repository import CommentRepository, ThreadRepository
from forum.domain.value import CommentId, ThreadId, UserId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    user_id: str  # User ID from authenticated user
    thread_id: str
    comment_id: str


class DeleteCommentUseCase(BaseUseCase[DeleteCommentRequest, None]):
    """Use case for soft-deleting one's own comment."""

    def __init__(
        self,
        thread_repository: ThreadRepository,
        comment_repository: CommentRepository,
    ) -> None:
        """Initialize delete comment use case.

        Args:
            thread_repository: Thread repository
            comment_repository: Comment repository
        """
        self.thread_repository = thread_repository
        self.comment_repository = comment_repository

    async def execute(self, request: DeleteCommentRequest) -> None:
        """Execute delete comment flow.

        Steps:
        1. Verify the thread exists
        2. Verify the comment exists
        3. Verify the caller owns the comment
        4. Soft-delete the comment

        Raises:
            NotFoundError: If the thread or comment does not exist
            NotAuthorizedError: If the caller does not own the comment
            StorageInvariantError: If the comment was already deleted
        """
        thread_id = ThreadId(request.thread_id)
        comment_id = CommentId(request.comment_id)
        user_id = UserId(request.user_id)

        with logfire.span(
            "delete_comment.execute",
            thread_id=thread_id,
            comment_id=comment_id,
            user_id=user_id,
        ):
            await self.thread_repository.verify_is_thread_exist(thread_id)
            await self.comment_repository.verify_is_comment_exist(comment_id)
            await self.comment_repository.verify_comment_owner(comment_id, user_id)
            await self.comment_repository.delete_comment(comment_id)
            logfire.info("Comment deleted", comment_id=comment_id)
