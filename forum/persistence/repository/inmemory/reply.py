"""In-memory reply repository for testing."""

from typing import List, Sequence

from forum.domain.error import NotAuthorizedError, NotFoundError, StorageInvariantError
from forum.domain.model import AddedReply, NewReply, ReplyRow
from forum.domain.repository import ReplyRepository
from forum.domain.value import (
    REPLY_PREFIX,
    CommentId,
    IdGenerator,
    ReplyId,
    UserId,
    generate_id,
    make_id,
)
from forum.persistence.mappers import row_to_reply
from forum.persistence.repository.inmemory.database import InMemoryDatabase


class InMemoryReplyRepository(ReplyRepository):
    """In-memory implementation of ReplyRepository for testing."""

    def __init__(
        self, database: InMemoryDatabase, id_generator: IdGenerator = generate_id
    ) -> None:
        self.database = database
        self.id_generator = id_generator

    async def add_reply(
        self,
        comment_id: CommentId,
        owner_id: UserId,
        new_reply: NewReply,
    ) -> AddedReply:
        """Store a reply."""
        reply_id = make_id(REPLY_PREFIX, self.id_generator)
        self.database.replies[reply_id] = {
            "id": reply_id,
            "content": new_reply.content,
            "comment": comment_id,
            "owner": owner_id,
            "created_at": self.database.now(),
            "deleted_at": None,
        }
        return AddedReply(id=reply_id, content=new_reply.content, owner=owner_id)

    async def get_replies_by_comment_ids(
        self, comment_ids: Sequence[CommentId]
    ) -> List[ReplyRow]:
        """Get the replies of several comments, oldest first."""
        if not comment_ids:
            return []

        wanted = set(comment_ids)
        return [
            row_to_reply({**row, "username": self.database.username_of(row["owner"])})
            for row in self.database.iter_sorted(self.database.replies)
            if row["comment"] in wanted
        ]

    async def verify_is_reply_exist(self, reply_id: ReplyId) -> None:
        """Raise NotFoundError unless the reply exists."""
        if reply_id not in self.database.replies:
            raise NotFoundError("Reply", reply_id)

    async def verify_reply_owner(self, reply_id: ReplyId, user_id: UserId) -> None:
        """Raise NotAuthorizedError unless the user owns the reply."""
        row = self.database.replies.get(reply_id)
        if row is None or row["owner"] != user_id:
            raise NotAuthorizedError("Reply", reply_id, user_id)

    async def delete_reply(self, reply_id: ReplyId) -> None:
        """Stamp deleted_at on a live reply."""
        row = self.database.replies.get(reply_id)
        if row is None or row["deleted_at"] is not None:
            raise StorageInvariantError("Reply", "delete", reply_id)
        row["deleted_at"] = self.database.now()
