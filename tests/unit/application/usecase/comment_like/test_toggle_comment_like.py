"""Unit tests for ToggleCommentLikeUseCase."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from forum.application.usecase.comment_like import (
    ToggleCommentLikeRequest,
    ToggleCommentLikeUseCase,
)
from forum.domain.error import NotFoundError
from forum.domain.model import NewComment, NewThread
from forum.domain.repository import (
    CommentLikeRepository,
    CommentRepository,
    ThreadRepository,
    UserRepository,
)
from forum.domain.value import ThreadId, UserId
from tests.harness import create_env_fixture, seed_user

unit_env = create_env_fixture()


async def _seed_comment(env) -> ToggleCommentLikeRequest:
    await seed_user(await env.get(UserRepository))
    thread = await (await env.get(ThreadRepository)).add_thread(
        UserId("user-123"), NewThread(title="Dicoding", body="Indonesia")
    )
    comment = await (await env.get(CommentRepository)).add_comment(
        UserId("user-123"), ThreadId(thread.id), NewComment(content="a comment")
    )
    return ToggleCommentLikeRequest(
        thread_id=thread.id, comment_id=comment.id, user_id="user-123"
    )


def _mocked_use_case(existing_like):
    calls = MagicMock()
    thread_repo = AsyncMock(spec=ThreadRepository)
    comment_repo = AsyncMock(spec=CommentRepository)
    like_repo = AsyncMock(spec=CommentLikeRepository)
    like_repo.get_comment_like.return_value = existing_like
    calls.attach_mock(thread_repo, "thread")
    calls.attach_mock(comment_repo, "comment")
    calls.attach_mock(like_repo, "like")
    use_case = ToggleCommentLikeUseCase(
        thread_repository=thread_repo,
        comment_repository=comment_repo,
        comment_like_repository=like_repo,
    )
    return use_case, calls


MOCK_REQUEST = ToggleCommentLikeRequest(
    thread_id="thread-123", comment_id="comment-123", user_id="user-123"
)


class TestToggleCommentLike:
    """Tests for ToggleCommentLikeUseCase."""

    @pytest.mark.asyncio
    async def test_like_then_unlike(self, unit_env):
        """Test toggling twice returns the comment to zero likes."""
        # Arrange
        request = await _seed_comment(unit_env)
        use_case = await unit_env.get(ToggleCommentLikeUseCase)
        comment_repo = await unit_env.get(CommentRepository)

        # Act & Assert
        liked = await use_case.execute(request)
        assert liked.liked is True
        [comment] = await comment_repo.get_comments_by_thread_id(request.thread_id)
        assert comment.like_count == 1

        unliked = await use_case.execute(request)
        assert unliked.liked is False
        [comment] = await comment_repo.get_comments_by_thread_id(request.thread_id)
        assert comment.like_count == 0

    @pytest.mark.asyncio
    async def test_like_missing_comment(self, unit_env):
        request = await _seed_comment(unit_env)
        use_case = await unit_env.get(ToggleCommentLikeUseCase)

        with pytest.raises(NotFoundError) as exc_info:
            await use_case.execute(
                request.model_copy(update={"comment_id": "comment-404"})
            )

        assert exc_info.value.code == "COMMENT.NOT_FOUND"

    @pytest.mark.asyncio
    async def test_like_missing_thread(self, unit_env):
        use_case = await unit_env.get(ToggleCommentLikeUseCase)

        with pytest.raises(NotFoundError) as exc_info:
            await use_case.execute(MOCK_REQUEST)

        assert exc_info.value.code == "THREAD.NOT_FOUND"

    @pytest.mark.asyncio
    async def test_adds_like_when_absent(self):
        """Test a missing like is added after the existence checks."""
        use_case, calls = _mocked_use_case(existing_like=None)

        response = await use_case.execute(MOCK_REQUEST)

        assert response.liked is True
        assert [name for name, _, _ in calls.mock_calls] == [
            "thread.verify_is_thread_exist",
            "comment.verify_is_comment_exist",
            "like.get_comment_like",
            "like.add_comment_like",
        ]

    @pytest.mark.asyncio
    async def test_removes_like_when_present(self):
        """Test a stored like counts as present even when it is falsy."""
        existing_like = MagicMock()
        existing_like.__bool__.return_value = False
        use_case, calls = _mocked_use_case(existing_like=existing_like)

        response = await use_case.execute(MOCK_REQUEST)

        assert response.liked is False
        assert calls.mock_calls[-1] == (
            "like.delete_comment_like",
            ("comment-123", "user-123"),
            {},
        )
