"""In-memory comment like repository for testing."""

from typing import Optional

from forum.domain.error import StorageInvariantError
from forum.domain.model import CommentLike
from forum.domain.repository import CommentLikeRepository
from forum.domain.value import (
    COMMENT_LIKE_PREFIX,
    CommentId,
    IdGenerator,
    UserId,
    generate_id,
    make_id,
)
from forum.persistence.mappers import row_to_comment_like
from forum.persistence.repository.inmemory.database import InMemoryDatabase, Row


class InMemoryCommentLikeRepository(CommentLikeRepository):
    """In-memory implementation of CommentLikeRepository for testing."""

    def __init__(
        self, database: InMemoryDatabase, id_generator: IdGenerator = generate_id
    ) -> None:
        self.database = database
        self.id_generator = id_generator

    def _find(self, comment_id: CommentId, user_id: UserId) -> Optional[Row]:
        for row in self.database.comment_likes.values():
            if row["comment_id"] == comment_id and row["user_id"] == user_id:
                return row
        return None

    async def get_comment_like(
        self, comment_id: CommentId, user_id: UserId
    ) -> Optional[CommentLike]:
        """Find a user's like on a comment."""
        row = self._find(comment_id, user_id)
        return row_to_comment_like(row) if row else None

    async def add_comment_like(
        self, comment_id: CommentId, user_id: UserId
    ) -> CommentLike:
        """Store a like, enforcing one like per (comment, user)."""
        if self._find(comment_id, user_id) is not None:
            raise StorageInvariantError("comment_like", "add", comment_id)

        like_id = make_id(COMMENT_LIKE_PREFIX, self.id_generator)
        row = {
            "id": like_id,
            "comment_id": comment_id,
            "user_id": user_id,
            "created_at": self.database.now(),
        }
        self.database.comment_likes[like_id] = row
        return row_to_comment_like(row)

    async def delete_comment_like(self, comment_id: CommentId, user_id: UserId) -> None:
        """Remove a user's like on a comment."""
        row = self._find(comment_id, user_id)
        if row is None:
            raise StorageInvariantError("comment_like", "delete", comment_id)
        del self.database.comment_likes[row["id"]]
