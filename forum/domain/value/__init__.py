"""Domain value objects for the forum."""

from forum.domain.value.identifiers import (
    COMMENT_LIKE_PREFIX,
    COMMENT_PREFIX,
    REPLY_PREFIX,
    THREAD_PREFIX,
    CommentId,
    CommentLikeId,
    IdGenerator,
    ReplyId,
    ThreadId,
    UserId,
    generate_id,
    make_id,
)

__all__ = [
    # Identifiers
    "UserId",
    "ThreadId",
    "CommentId",
    "ReplyId",
    "CommentLikeId",
    # Id generation
    "IdGenerator",
    "generate_id",
    "make_id",
    "THREAD_PREFIX",
    "COMMENT_PREFIX",
    "REPLY_PREFIX",
    "COMMENT_LIKE_PREFIX",
]
