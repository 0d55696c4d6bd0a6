"""Unit tests for the in-memory comment repository."""

import pytest

from forum.domain.error import NotAuthorizedError, NotFoundError, StorageInvariantError
from forum.domain.model import NewComment, NewThread
from forum.domain.repository import (
    CommentLikeRepository,
    CommentRepository,
    ThreadRepository,
    UserRepository,
)
from forum.domain.value import CommentId, ThreadId, UserId
from forum.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryDatabase,
)
from tests.harness import create_env_fixture, seed_user, sequential_ids

unit_env = create_env_fixture()


async def _seed_thread(env) -> ThreadId:
    await seed_user(await env.get(UserRepository))
    await seed_user(await env.get(UserRepository), "user-456", "johndoe")
    thread_repo = await env.get(ThreadRepository)
    added = await thread_repo.add_thread(
        UserId("user-123"), NewThread(title="Dicoding", body="Indonesia")
    )
    return ThreadId(added.id)


class TestInMemoryCommentRepository:
    """Tests for InMemoryCommentRepository."""

    @pytest.mark.asyncio
    async def test_add_comment(self, unit_env):
        # Arrange
        thread_id = await _seed_thread(unit_env)
        database = await unit_env.get(InMemoryDatabase)
        repo = InMemoryCommentRepository(database, id_generator=sequential_ids())

        # Act
        added = await repo.add_comment(
            UserId("user-123"), thread_id, NewComment(content="a comment")
        )

        # Assert
        assert added.id == "comment-123"
        assert added.owner == "user-123"
        assert database.comments["comment-123"]["deleted_at"] is None

    @pytest.mark.asyncio
    async def test_verify_comment_exist_and_owner(self, unit_env):
        """Existence and ownership checks pass for the owner."""
        thread_id = await _seed_thread(unit_env)
        repo = await unit_env.get(CommentRepository)
        added = await repo.add_comment(
            UserId("user-123"), thread_id, NewComment(content="a comment")
        )

        await repo.verify_is_comment_exist(CommentId(added.id))
        await repo.verify_comment_owner(CommentId(added.id), UserId("user-123"))

    @pytest.mark.asyncio
    async def test_verify_missing_comment(self, unit_env):
        repo = await unit_env.get(CommentRepository)

        with pytest.raises(NotFoundError) as exc_info:
            await repo.verify_is_comment_exist(CommentId("comment-404"))

        assert exc_info.value.code == "COMMENT.NOT_FOUND"

    @pytest.mark.asyncio
    async def test_verify_comment_owner_rejects_other_user(self, unit_env):
        thread_id = await _seed_thread(unit_env)
        repo = await unit_env.get(CommentRepository)
        added = await repo.add_comment(
            UserId("user-123"), thread_id, NewComment(content="a comment")
        )

        with pytest.raises(NotAuthorizedError) as exc_info:
            await repo.verify_comment_owner(CommentId(added.id), UserId("user-456"))

        assert exc_info.value.code == "COMMENT.NOT_OWNER"

    @pytest.mark.asyncio
    async def test_delete_comment_is_soft(self, unit_env):
        """Deleting stamps deleted_at and keeps the row readable."""
        # Arrange
        thread_id = await _seed_thread(unit_env)
        repo = await unit_env.get(CommentRepository)
        added = await repo.add_comment(
            UserId("user-123"), thread_id, NewComment(content="a comment")
        )

        # Act
        await repo.delete_comment(CommentId(added.id))

        # Assert
        await repo.verify_is_comment_exist(CommentId(added.id))
        [comment] = await repo.get_comments_by_thread_id(thread_id)
        assert comment.deleted_at is not None
        assert comment.content == "a comment"

    @pytest.mark.asyncio
    async def test_delete_comment_twice_fails(self, unit_env):
        thread_id = await _seed_thread(unit_env)
        repo = await unit_env.get(CommentRepository)
        added = await repo.add_comment(
            UserId("user-123"), thread_id, NewComment(content="a comment")
        )
        await repo.delete_comment(CommentId(added.id))
        [first] = await repo.get_comments_by_thread_id(thread_id)

        with pytest.raises(StorageInvariantError) as exc_info:
            await repo.delete_comment(CommentId(added.id))

        assert exc_info.value.code == "COMMENT.DELETE_FAILED"
        [second] = await repo.get_comments_by_thread_id(thread_id)
        assert second.deleted_at == first.deleted_at

    @pytest.mark.asyncio
    async def test_delete_missing_comment_fails(self, unit_env):
        repo = await unit_env.get(CommentRepository)

        with pytest.raises(StorageInvariantError):
            await repo.delete_comment(CommentId("comment-404"))

    @pytest.mark.asyncio
    async def test_get_comments_by_thread_id(self, unit_env):
        """Comments come oldest first with usernames and like counts."""
        # Arrange
        thread_id = await _seed_thread(unit_env)
        repo = await unit_env.get(CommentRepository)
        like_repo = await unit_env.get(CommentLikeRepository)
        first = await repo.add_comment(
            UserId("user-123"), thread_id, NewComment(content="first")
        )
        second = await repo.add_comment(
            UserId("user-456"), thread_id, NewComment(content="second")
        )
        await like_repo.add_comment_like(CommentId(second.id), UserId("user-123"))
        await like_repo.add_comment_like(CommentId(second.id), UserId("user-456"))

        # Act
        comments = await repo.get_comments_by_thread_id(thread_id)

        # Assert
        assert [c.id for c in comments] == [first.id, second.id]
        assert [c.username for c in comments] == ["dicoding", "johndoe"]
        assert [c.like_count for c in comments] == [0, 2]
        assert comments[0].date < comments[1].date

    @pytest.mark.asyncio
    async def test_get_comments_of_other_thread(self, unit_env):
        thread_id = await _seed_thread(unit_env)
        repo = await unit_env.get(CommentRepository)
        await repo.add_comment(UserId("user-123"), thread_id, NewComment(content="x"))

        assert await repo.get_comments_by_thread_id(ThreadId("thread-404")) == []
