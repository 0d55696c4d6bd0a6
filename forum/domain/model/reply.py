"""Reply entities.

Replies are second-level answers attached to a comment. Like comments,
they are soft-deleted and masked on read.
"""

from typing import Any, Optional

from pydantic import Field, model_validator

from forum.domain.model.common import DomainModel, Entity
from forum.domain.value import CommentId, ReplyId

DELETED_REPLY_CONTENT = "**reply deleted**"


class NewReply(Entity):
    """Reply submitted by a user."""

    entity_name = "NEW_REPLY"

    content: str


class AddedReply(Entity):
    """Reply as returned right after it was persisted."""

    entity_name = "ADDED_REPLY"

    id: str
    content: str
    owner: str


class ReplyRow(DomainModel):
    """Reply read row, tagged with the comment it belongs to."""

    id: ReplyId
    comment_id: CommentId
    username: str
    content: str
    date: str  # ISO-8601, millisecond precision
    deleted_at: Optional[str] = None


class DetailedReply(Entity):
    """Reply read model."""

    entity_name = "DETAILED_REPLY"

    id: str
    content: str
    date: str
    username: str
    deleted_at: Optional[str] = Field(exclude=True)

    @model_validator(mode="before")
    @classmethod
    def mask_deleted_content(cls, data: Any) -> Any:
        """Hide the content of a soft-deleted reply."""
        if isinstance(data, dict) and data.get("deleted_at") is not None:
            return {**data, "content": DELETED_REPLY_CONTENT}
        return data
