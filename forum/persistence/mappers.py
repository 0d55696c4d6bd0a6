"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from forum.domain.model import CommentLike, CommentRow, ReplyRow, ThreadRow
from forum.domain.value import CommentId, CommentLikeId, ReplyId, ThreadId, UserId


def format_timestamp(value: datetime) -> str:
    """Format a timestamp as an ISO-8601 UTC string with millisecond precision.

    Naive datetimes are taken to be UTC.

    Example:
        2021-08-08T07:19:09.775Z
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value.isoformat(timespec="milliseconds") + "Z"


def _format_optional(value: Optional[datetime]) -> Optional[str]:
    return format_timestamp(value) if value is not None else None


def row_to_thread(row: Dict[str, Any]) -> ThreadRow:
    """Convert a thread row joined with its owner to a ThreadRow.

    Args:
        row: Database row as dict, with ``username`` from the users table

    Returns:
        ThreadRow read model
    """
    return ThreadRow(
        id=ThreadId(row["id"]),
        title=row["title"],
        body=row["body"],
        date=format_timestamp(row["created_at"]),
        username=row["username"],
    )


def row_to_comment(row: Dict[str, Any]) -> CommentRow:
    """Convert a comment row joined with its owner to a CommentRow.

    Args:
        row: Database row as dict, with ``username`` and ``like_count``

    Returns:
        CommentRow read model
    """
    return CommentRow(
        id=CommentId(row["id"]),
        username=row["username"],
        content=row["content"],
        date=format_timestamp(row["created_at"]),
        deleted_at=_format_optional(row.get("deleted_at")),
        like_count=row.get("like_count") or 0,
    )


def row_to_reply(row: Dict[str, Any]) -> ReplyRow:
    """Convert a reply row joined with its owner to a ReplyRow."""
    return ReplyRow(
        id=ReplyId(row["id"]),
        comment_id=CommentId(row["comment"]),
        username=row["username"],
        content=row["content"],
        date=format_timestamp(row["created_at"]),
        deleted_at=_format_optional(row.get("deleted_at")),
    )


def row_to_comment_like(row: Dict[str, Any]) -> CommentLike:
    """Convert database row to CommentLike domain model."""
    return CommentLike(
        id=CommentLikeId(row["id"]),
        comment_id=CommentId(row["comment_id"]),
        user_id=UserId(row["user_id"]),
        created_at=row["created_at"],
    )
