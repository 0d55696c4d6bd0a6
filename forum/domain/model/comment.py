"""Comment entities.

Comments are first-level replies to a thread. They are soft-deleted: a
deleted comment keeps its row, but its content is never shown again.
"""

from typing import Any, Optional

from pydantic import Field, model_validator

from forum.domain.model.common import DomainModel, Entity
from forum.domain.model.reply import DetailedReply
from forum.domain.value import CommentId

DELETED_COMMENT_CONTENT = "**comment deleted**"


class NewComment(Entity):
    """Comment submitted by a user."""

    entity_name = "NEW_COMMENT"

    content: str


class AddedComment(Entity):
    """Comment as returned right after it was persisted."""

    entity_name = "ADDED_COMMENT"

    id: str
    content: str
    owner: str


class CommentRow(DomainModel):
    """Comment read row, with the owner denormalized to a username."""

    id: CommentId
    username: str
    content: str
    date: str  # ISO-8601, millisecond precision
    deleted_at: Optional[str] = None
    like_count: int = 0


class DetailedComment(Entity):
    """Comment read model with its replies in creation order.

    The content of a deleted comment is replaced by a placeholder while the
    entity is built, and the deletion timestamp itself is never serialized.
    """

    entity_name = "DETAILED_COMMENT"

    id: str
    username: str
    content: str
    date: str
    deleted_at: Optional[str] = Field(exclude=True)
    replies: list[DetailedReply]
    like_count: int = Field(default=0, ge=0, serialization_alias="likeCount")

    @model_validator(mode="before")
    @classmethod
    def mask_deleted_content(cls, data: Any) -> Any:
        """Hide the content of a soft-deleted comment."""
        if isinstance(data, dict) and data.get("deleted_at") is not None:
            return {**data, "content": DELETED_COMMENT_CONTENT}
        return data
