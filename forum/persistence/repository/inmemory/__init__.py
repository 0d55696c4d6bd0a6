"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .comment_like import InMemoryCommentLikeRepository
from .database import InMemoryDatabase
from .reply import InMemoryReplyRepository
from .thread import InMemoryThreadRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryDatabase",
    "InMemoryCommentRepository",
    "InMemoryCommentLikeRepository",
    "InMemoryReplyRepository",
    "InMemoryThreadRepository",
    "InMemoryUserRepository",
]
