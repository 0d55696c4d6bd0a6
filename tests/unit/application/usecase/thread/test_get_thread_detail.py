"""Unit tests for GetThreadDetailUseCase."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from forum.application.usecase.thread import (
    GetThreadDetailRequest,
    GetThreadDetailUseCase,
)
from forum.domain.error import NotFoundError
from forum.domain.model import (
    CommentRow,
    NewComment,
    NewReply,
    NewThread,
    ReplyRow,
    ThreadRow,
)
from forum.domain.repository import (
    CommentLikeRepository,
    CommentRepository,
    ReplyRepository,
    ThreadRepository,
    UserRepository,
)
from forum.domain.value import CommentId, ThreadId, UserId
from tests.harness import create_env_fixture, seed_user

unit_env = create_env_fixture()


class TestGetThreadDetail:
    """Tests for GetThreadDetailUseCase."""

    @pytest.mark.asyncio
    async def test_thread_without_comments(self, unit_env):
        """Test a fresh thread has an empty comment list."""
        # Arrange
        await seed_user(await unit_env.get(UserRepository))
        thread_repo = await unit_env.get(ThreadRepository)
        thread = await thread_repo.add_thread(
            UserId("user-123"), NewThread(title="Dicoding", body="Indonesia")
        )
        use_case = await unit_env.get(GetThreadDetailUseCase)

        # Act
        detail = await use_case.execute(GetThreadDetailRequest(thread_id=thread.id))

        # Assert
        assert detail.id == thread.id
        assert detail.title == "Dicoding"
        assert detail.body == "Indonesia"
        assert detail.username == "dicoding"
        assert detail.comments == []

    @pytest.mark.asyncio
    async def test_thread_with_comments_and_replies(self, unit_env):
        """Test comments and replies are nested in order, masked and counted."""
        # Arrange
        users = await unit_env.get(UserRepository)
        await seed_user(users)
        await seed_user(users, "user-456", "johndoe")
        thread_repo = await unit_env.get(ThreadRepository)
        comment_repo = await unit_env.get(CommentRepository)
        reply_repo = await unit_env.get(ReplyRepository)
        like_repo = await unit_env.get(CommentLikeRepository)

        thread = await thread_repo.add_thread(
            UserId("user-123"), NewThread(title="Dicoding", body="Indonesia")
        )
        thread_id = ThreadId(thread.id)
        first = await comment_repo.add_comment(
            UserId("user-456"), thread_id, NewComment(content="first comment")
        )
        second = await comment_repo.add_comment(
            UserId("user-123"), thread_id, NewComment(content="second comment")
        )
        reply_a = await reply_repo.add_reply(
            CommentId(first.id), UserId("user-123"), NewReply(content="reply a")
        )
        reply_b = await reply_repo.add_reply(
            CommentId(first.id), UserId("user-456"), NewReply(content="reply b")
        )
        await comment_repo.delete_comment(CommentId(second.id))
        await reply_repo.delete_reply(reply_b.id)
        await like_repo.add_comment_like(CommentId(first.id), UserId("user-123"))

        use_case = await unit_env.get(GetThreadDetailUseCase)

        # Act
        detail = await use_case.execute(GetThreadDetailRequest(thread_id=thread.id))

        # Assert
        body = detail.model_dump(by_alias=True)
        assert [c["id"] for c in body["comments"]] == [first.id, second.id]

        first_body, second_body = body["comments"]
        assert first_body["username"] == "johndoe"
        assert first_body["content"] == "first comment"
        assert first_body["likeCount"] == 1
        assert [r["id"] for r in first_body["replies"]] == [reply_a.id, reply_b.id]
        assert first_body["replies"][0]["content"] == "reply a"
        assert first_body["replies"][1]["content"] == "**reply deleted**"

        assert second_body["content"] == "**comment deleted**"
        assert second_body["replies"] == []
        assert second_body["likeCount"] == 0
        assert "deleted_at" not in second_body

    @pytest.mark.asyncio
    async def test_missing_thread(self, unit_env):
        """Test reading a thread that doesn't exist."""
        use_case = await unit_env.get(GetThreadDetailUseCase)

        with pytest.raises(NotFoundError) as exc_info:
            await use_case.execute(GetThreadDetailRequest(thread_id="thread-404"))

        assert exc_info.value.code == "THREAD.NOT_FOUND"

    @pytest.mark.asyncio
    async def test_orchestration(self):
        """Test the repositories are called in order, replies in one batch."""
        # Arrange
        calls = MagicMock()
        thread_repo = AsyncMock(spec=ThreadRepository)
        comment_repo = AsyncMock(spec=CommentRepository)
        reply_repo = AsyncMock(spec=ReplyRepository)
        calls.attach_mock(thread_repo, "thread")
        calls.attach_mock(comment_repo, "comment")
        calls.attach_mock(reply_repo, "reply")

        thread_repo.get_thread_by_id.return_value = ThreadRow(
            id=ThreadId("thread-123"),
            title="sebuah thread",
            body="sebuah body thread",
            date="2021-08-08T07:19:09.775Z",
            username="dicoding",
        )
        comment_repo.get_comments_by_thread_id.return_value = [
            CommentRow(
                id=CommentId("comment-123"),
                username="johndoe",
                content="sebuah comment",
                date="2021-08-08T07:22:33.555Z",
            ),
            CommentRow(
                id=CommentId("comment-456"),
                username="dicoding",
                content="rahasia",
                date="2021-08-08T07:26:21.338Z",
                deleted_at="2021-08-08T08:00:00.000Z",
                like_count=2,
            ),
        ]
        reply_repo.get_replies_by_comment_ids.return_value = [
            ReplyRow(
                id="reply-123",
                comment_id=CommentId("comment-456"),
                username="johndoe",
                content="sebuah balasan",
                date="2021-08-08T07:59:48.766Z",
            )
        ]
        use_case = GetThreadDetailUseCase(
            thread_repository=thread_repo,
            comment_repository=comment_repo,
            reply_repository=reply_repo,
        )

        # Act
        detail = await use_case.execute(GetThreadDetailRequest(thread_id="thread-123"))

        # Assert
        assert [name for name, _, _ in calls.mock_calls] == [
            "thread.verify_is_thread_exist",
            "thread.get_thread_by_id",
            "comment.get_comments_by_thread_id",
            "reply.get_replies_by_comment_ids",
        ]
        reply_repo.get_replies_by_comment_ids.assert_awaited_once_with(
            ["comment-123", "comment-456"]
        )
        assert detail.model_dump(by_alias=True) == {
            "id": "thread-123",
            "title": "sebuah thread",
            "body": "sebuah body thread",
            "date": "2021-08-08T07:19:09.775Z",
            "username": "dicoding",
            "comments": [
                {
                    "id": "comment-123",
                    "username": "johndoe",
                    "content": "sebuah comment",
                    "date": "2021-08-08T07:22:33.555Z",
                    "replies": [],
                    "likeCount": 0,
                },
                {
                    "id": "comment-456",
                    "username": "dicoding",
                    "content": "**comment deleted**",
                    "date": "2021-08-08T07:26:21.338Z",
                    "replies": [
                        {
                            "id": "reply-123",
                            "content": "sebuah balasan",
                            "date": "2021-08-08T07:59:48.766Z",
                            "username": "johndoe",
                        }
                    ],
                    "likeCount": 2,
                },
            ],
        }
