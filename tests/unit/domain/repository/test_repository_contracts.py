"""Repository contracts refuse to run without an implementation."""

import pytest

from forum.domain.error import UnimplementedError
from forum.domain.model import NewComment, NewReply, NewThread
from forum.domain.repository import (
    CommentLikeRepository,
    CommentRepository,
    ReplyRepository,
    ThreadRepository,
    UserRepository,
)

THREAD = NewThread(title="Dicoding", body="Indonesia")
COMMENT = NewComment(content="a comment")
REPLY = NewReply(content="a reply")

CONTRACT_CALLS = [
    (ThreadRepository.add_thread, ("user-123", THREAD), "THREAD_REPOSITORY"),
    (ThreadRepository.verify_is_thread_exist, ("thread-123",), "THREAD_REPOSITORY"),
    (ThreadRepository.get_thread_by_id, ("thread-123",), "THREAD_REPOSITORY"),
    (
        CommentRepository.add_comment,
        ("user-123", "thread-123", COMMENT),
        "COMMENT_REPOSITORY",
    ),
    (CommentRepository.delete_comment, ("comment-123",), "COMMENT_REPOSITORY"),
    (
        CommentRepository.verify_is_comment_exist,
        ("comment-123",),
        "COMMENT_REPOSITORY",
    ),
    (
        CommentRepository.verify_comment_owner,
        ("comment-123", "user-123"),
        "COMMENT_REPOSITORY",
    ),
    (
        CommentRepository.get_comments_by_thread_id,
        ("thread-123",),
        "COMMENT_REPOSITORY",
    ),
    (
        ReplyRepository.add_reply,
        ("comment-123", "user-123", REPLY),
        "REPLY_REPOSITORY",
    ),
    (
        ReplyRepository.get_replies_by_comment_ids,
        (["comment-123"],),
        "REPLY_REPOSITORY",
    ),
    (ReplyRepository.verify_is_reply_exist, ("reply-123",), "REPLY_REPOSITORY"),
    (
        ReplyRepository.verify_reply_owner,
        ("reply-123", "user-123"),
        "REPLY_REPOSITORY",
    ),
    (ReplyRepository.delete_reply, ("reply-123",), "REPLY_REPOSITORY"),
    (
        CommentLikeRepository.get_comment_like,
        ("comment-123", "user-123"),
        "COMMENT_LIKE_REPOSITORY",
    ),
    (
        CommentLikeRepository.add_comment_like,
        ("comment-123", "user-123"),
        "COMMENT_LIKE_REPOSITORY",
    ),
    (
        CommentLikeRepository.delete_comment_like,
        ("comment-123", "user-123"),
        "COMMENT_LIKE_REPOSITORY",
    ),
    (UserRepository.add_user, ("user-123", "dicoding"), "USER_REPOSITORY"),
    (UserRepository.get_username, ("user-123",), "USER_REPOSITORY"),
]


class TestRepositoryContracts:
    """Every contract method fails with a METHOD_NOT_IMPLEMENTED code."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "method,args,repository",
        CONTRACT_CALLS,
        ids=[call[0].__qualname__ for call in CONTRACT_CALLS],
    )
    async def test_contract_method_is_unimplemented(self, method, args, repository):
        with pytest.raises(UnimplementedError) as exc_info:
            await method(None, *args)

        assert exc_info.value.code == f"{repository}.METHOD_NOT_IMPLEMENTED"

    @pytest.mark.parametrize(
        "contract",
        [
            ThreadRepository,
            CommentRepository,
            ReplyRepository,
            CommentLikeRepository,
            UserRepository,
        ],
    )
    def test_contract_cannot_be_instantiated(self, contract):
        with pytest.raises(TypeError):
            contract()
