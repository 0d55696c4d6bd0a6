"""Strongly typed identifiers for forum domain entities.

Identifiers are strings of the form ``<prefix>-<suffix>``. Repositories own id
generation: they ask an id generator for a suffix and prepend the prefix of
the entity kind they store.
"""

from typing import Callable, NewType
from uuid import uuid4

# Core domain entity identifiers
UserId = NewType("UserId", str)
ThreadId = NewType("ThreadId", str)
CommentId = NewType("CommentId", str)
ReplyId = NewType("ReplyId", str)
CommentLikeId = NewType("CommentLikeId", str)

THREAD_PREFIX = "thread"
COMMENT_PREFIX = "comment"
REPLY_PREFIX = "reply"
COMMENT_LIKE_PREFIX = "like"

IdGenerator = Callable[[], str]

SUFFIX_LENGTH = 21


def generate_id() -> str:
    """Generate a process-unique id suffix."""
    return uuid4().hex[:SUFFIX_LENGTH]


def make_id(prefix: str, id_generator: IdGenerator) -> str:
    """Build an entity id from a kind prefix and a generated suffix.

    Args:
        prefix: Entity kind prefix (e.g. "comment")
        id_generator: Callable returning the unique suffix

    Returns:
        Entity id, e.g. "comment-3f2a..."
    """
    return f"{prefix}-{id_generator()}"
