"""Domain model entities for the forum."""

from forum.domain.model.comment import (
    DELETED_COMMENT_CONTENT,
    AddedComment,
    CommentRow,
    DetailedComment,
    NewComment,
)
from forum.domain.model.comment_like import CommentLike
from forum.domain.model.common import DomainModel, Entity
from forum.domain.model.reply import (
    DELETED_REPLY_CONTENT,
    AddedReply,
    DetailedReply,
    NewReply,
    ReplyRow,
)
from forum.domain.model.thread import (
    AddedThread,
    DetailedThread,
    NewThread,
    ThreadRow,
)

__all__ = [
    "DomainModel",
    "Entity",
    "NewThread",
    "AddedThread",
    "ThreadRow",
    "DetailedThread",
    "NewComment",
    "AddedComment",
    "CommentRow",
    "DetailedComment",
    "DELETED_COMMENT_CONTENT",
    "NewReply",
    "AddedReply",
    "ReplyRow",
    "DetailedReply",
    "DELETED_REPLY_CONTENT",
    "CommentLike",
]
