"""Thread entities.

Threads are the top-level discussion topics. They are immutable once
created and are never deleted by the forum itself.
"""

from forum.domain.model.comment import DetailedComment
from forum.domain.model.common import DomainModel, Entity
from forum.domain.value import ThreadId


class NewThread(Entity):
    """Thread submitted by a user."""

    entity_name = "NEW_THREAD"

    title: str
    body: str


class AddedThread(Entity):
    """Thread as returned right after it was persisted."""

    entity_name = "ADDED_THREAD"

    id: str
    title: str
    owner: str


class ThreadRow(DomainModel):
    """Thread read row, with the owner denormalized to a username."""

    id: ThreadId
    title: str
    body: str
    date: str  # ISO-8601, millisecond precision
    username: str


class DetailedThread(Entity):
    """Thread read model with its comments in creation order."""

    entity_name = "DETAILED_THREAD"

    id: str
    title: str
    body: str
    date: str
    username: str
    comments: list[DetailedComment]
