"""In-memory comment repository for testing."""

from typing import List

from forum.domain.error import NotAuthorizedError, NotFoundError, StorageInvariantError
from forum.domain.model import AddedComment, CommentRow, NewComment
from forum.domain.repository import CommentRepository
from forum.domain.value import (
    COMMENT_PREFIX,
    CommentId,
    IdGenerator,
    ThreadId,
    UserId,
    generate_id,
    make_id,
)
from forum.persistence.mappers import row_to_comment
from forum.persistence.repository.inmemory.database import InMemoryDatabase


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(
        self, database: InMemoryDatabase, id_generator: IdGenerator = generate_id
    ) -> None:
        self.database = database
        self.id_generator = id_generator

    async def add_comment(
        self,
        owner_id: UserId,
        thread_id: ThreadId,
        new_comment: NewComment,
    ) -> AddedComment:
        """Store a comment."""
        comment_id = make_id(COMMENT_PREFIX, self.id_generator)
        self.database.comments[comment_id] = {
            "id": comment_id,
            "content": new_comment.content,
            "thread": thread_id,
            "owner": owner_id,
            "created_at": self.database.now(),
            "deleted_at": None,
        }
        return AddedComment(id=comment_id, content=new_comment.content, owner=owner_id)

    async def delete_comment(self, comment_id: CommentId) -> None:
        """Stamp deleted_at on a live comment."""
        row = self.database.comments.get(comment_id)
        if row is None or row["deleted_at"] is not None:
            raise StorageInvariantError("Comment", "delete", comment_id)
        row["deleted_at"] = self.database.now()

    async def verify_is_comment_exist(self, comment_id: CommentId) -> None:
        """Raise NotFoundError unless the comment exists."""
        if comment_id not in self.database.comments:
            raise NotFoundError("Comment", comment_id)

    async def verify_comment_owner(
        self, comment_id: CommentId, user_id: UserId
    ) -> None:
        """Raise NotAuthorizedError unless the user owns the comment."""
        row = self.database.comments.get(comment_id)
        if row is None or row["owner"] != user_id:
            raise NotAuthorizedError("Comment", comment_id, user_id)

    async def get_comments_by_thread_id(self, thread_id: ThreadId) -> List[CommentRow]:
        """Get the comments of a thread, oldest first."""
        return [
            row_to_comment(
                {
                    **row,
                    "username": self.database.username_of(row["owner"]),
                    "like_count": self._count_likes(row["id"]),
                }
            )
            for row in self.database.iter_sorted(self.database.comments)
            if row["thread"] == thread_id
        ]

    def _count_likes(self, comment_id: str) -> int:
        return sum(
            1
            for like in self.database.comment_likes.values()
            if like["comment_id"] == comment_id
        )
