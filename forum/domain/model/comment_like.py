"""Comment like model."""

from datetime import datetime

from forum.domain.model.common import DomainModel
from forum.domain.value import CommentId, CommentLikeId, UserId


class CommentLike(DomainModel):
    """A user's like on a comment.

    At most one like exists per (comment, user) pair. Liking again removes it.
    """

    id: CommentLikeId
    comment_id: CommentId
    user_id: UserId
    created_at: datetime
