"""Get thread detail use case."""

from collections import defaultdict
from typing import DefaultDict, List

import logfire
from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.domain.model import (
    DetailedComment,
    DetailedReply,
    DetailedThread,
    ReplyRow,
)
from forum.domain.repository import (
    CommentRepository,
    ReplyRepository,
    ThreadRepository,
)
from forum.domain.value import CommentId, ThreadId


class GetThreadDetailRequest(BaseModel):
    """Get thread detail request."""

    thread_id: str


class GetThreadDetailUseCase(BaseUseCase[GetThreadDetailRequest, DetailedThread]):
    """Use case for reading a thread with its comments and replies."""

    def __init__(
        self,
        thread_repository: ThreadRepository,
        comment_repository: CommentRepository,
        reply_repository: ReplyRepository,
    ) -> None:
        """Initialize get thread detail use case.

        Args:
            thread_repository: Thread repository
            comment_repository: Comment repository
            reply_repository: Reply repository
        """
        self.thread_repository = thread_repository
        self.comment_repository = comment_repository
        self.reply_repository = reply_repository

    async def execute(self, request: GetThreadDetailRequest) -> DetailedThread:
        """Assemble the thread detail.

        Steps:
        1. Verify the thread exists
        2. Load the thread, then its comments in creation order
        3. Load the replies of all comments in one call
        4. Attach replies to their comment, keeping creation order

        Deleted comments and replies stay in the tree with masked content.

        Args:
            request: Get thread detail request

        Returns:
            The detailed thread

        Raises:
            NotFoundError: If the thread does not exist
        """
        thread_id = ThreadId(request.thread_id)

        with logfire.span("get_thread_detail.execute", thread_id=thread_id):
            await self.thread_repository.verify_is_thread_exist(thread_id)

            thread = await self.thread_repository.get_thread_by_id(thread_id)
            comments = await self.comment_repository.get_comments_by_thread_id(
                thread_id
            )
            replies = await self.reply_repository.get_replies_by_comment_ids(
                [comment.id for comment in comments]
            )

            replies_by_comment: DefaultDict[CommentId, List[ReplyRow]] = (
                defaultdict(list)
            )
            for reply in replies:
                replies_by_comment[reply.comment_id].append(reply)

            detailed_comments = [
                DetailedComment.create(
                    {
                        "id": comment.id,
                        "username": comment.username,
                        "content": comment.content,
                        "date": comment.date,
                        "deleted_at": comment.deleted_at,
                        "like_count": comment.like_count,
                        "replies": [
                            DetailedReply.create(reply.model_dump())
                            for reply in replies_by_comment[comment.id]
                        ],
                    }
                )
                for comment in comments
            ]

            logfire.info(
                "Thread detail assembled",
                thread_id=thread_id,
                comment_count=len(comments),
                reply_count=len(replies),
            )
            return DetailedThread.create(
                {**thread.model_dump(), "comments": detailed_comments}
            )
