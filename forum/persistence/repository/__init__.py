"""PostgreSQL repository implementations."""

from forum.persistence.repository.comment import PostgresCommentRepository
from forum.persistence.repository.comment_like import PostgresCommentLikeRepository
from forum.persistence.repository.reply import PostgresReplyRepository
from forum.persistence.repository.thread import PostgresThreadRepository
from forum.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresThreadRepository",
    "PostgresCommentRepository",
    "PostgresReplyRepository",
    "PostgresCommentLikeRepository",
]
