"""Toggle comment like use case."""

import logfire
from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.domain.repository import (
    CommentLikeRepository,
    CommentRepository,
    ThreadRepository,
)
from forum.domain.value import CommentId, ThreadId, UserId


class ToggleCommentLikeRequest(BaseModel):
    """Toggle comment like request."""

    thread_id: str
    comment_id: str
    user_id: str  # User ID from authenticated user


class ToggleCommentLikeResponse(BaseModel):
    """Toggle comment like response."""

    liked: bool  # Whether the user likes the comment after the toggle


class ToggleCommentLikeUseCase(
    BaseUseCase[ToggleCommentLikeRequest, ToggleCommentLikeResponse]
):
    """Use case for liking a comment, or unliking it when already liked."""

    def __init__(
        self,
        thread_repository: ThreadRepository,
        comment_repository: CommentRepository,
        comment_like_repository: CommentLikeRepository,
    ) -> None:
        """Initialize toggle comment like use case.

        Args:
            thread_repository: Thread repository
            comment_repository: Comment repository
            comment_like_repository: Comment like repository
        """
        self.thread_repository = thread_repository
        self.comment_repository = comment_repository
        self.comment_like_repository = comment_like_repository

    async def execute(
        self, request: ToggleCommentLikeRequest
    ) -> ToggleCommentLikeResponse:
        """Execute toggle flow.

        The lookup and the write are not atomic. Two concurrent toggles by
        the same user can both try to insert; the unique (comment, user)
        constraint rejects the second one with StorageInvariantError.

        Raises:
            NotFoundError: If the thread or comment does not exist
            StorageInvariantError: If the like write did not take effect
        """
        thread_id = ThreadId(request.thread_id)
        comment_id = CommentId(request.comment_id)
        user_id = UserId(request.user_id)

        with logfire.span(
            "toggle_comment_like.execute",
            thread_id=thread_id,
            comment_id=comment_id,
            user_id=user_id,
        ):
            await self.thread_repository.verify_is_thread_exist(thread_id)
            await self.comment_repository.verify_is_comment_exist(comment_id)

            existing = await self.comment_like_repository.get_comment_like(
                comment_id, user_id
            )
            if existing is not None:
                await self.comment_like_repository.delete_comment_like(
                    comment_id, user_id
                )
                logfire.info("Comment unliked", comment_id=comment_id, user_id=user_id)
                return ToggleCommentLikeResponse(liked=False)

            await self.comment_like_repository.add_comment_like(comment_id, user_id)
            logfire.info("Comment liked", comment_id=comment_id, user_id=user_id)
            return ToggleCommentLikeResponse(liked=True)
