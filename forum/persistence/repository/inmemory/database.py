"""In-memory storage shared by the in-memory repositories.

Rows are plain dicts keyed by id, mirroring the PostgreSQL tables. Removing a
thread or comment cascades to its dependents the way the foreign keys do.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Iterator, List, Optional

Row = Dict[str, Any]


class InMemoryDatabase:
    """Dict-backed tables for users, threads, comments, replies and likes."""

    def __init__(self) -> None:
        self.users: Dict[str, Row] = {}
        self.threads: Dict[str, Row] = {}
        self.comments: Dict[str, Row] = {}
        self.replies: Dict[str, Row] = {}
        self.comment_likes: Dict[str, Row] = {}
        self._last_timestamp: Optional[datetime] = None

    def now(self) -> datetime:
        """Return a UTC timestamp strictly after the previous one.

        Rows created in quick succession still get distinct creation times,
        so ordering by ``created_at`` is stable.
        """
        current = datetime.now(timezone.utc)
        if self._last_timestamp is not None and current <= self._last_timestamp:
            current = self._last_timestamp + timedelta(milliseconds=1)
        self._last_timestamp = current
        return current

    def username_of(self, user_id: str) -> str:
        """Resolve a username, as the JOIN on users would."""
        return self.users[user_id]["username"]

    def iter_sorted(self, table: Dict[str, Row]) -> Iterator[Row]:
        """Iterate a table's rows oldest first."""
        return iter(sorted(table.values(), key=lambda row: row["created_at"]))

    def remove_thread(self, thread_id: str) -> None:
        """Remove a thread and everything that hangs off it."""
        self.threads.pop(thread_id, None)
        for comment_id in [
            c["id"] for c in self.comments.values() if c["thread"] == thread_id
        ]:
            self.remove_comment(comment_id)

    def remove_comment(self, comment_id: str) -> None:
        """Remove a comment with its replies and likes."""
        self.comments.pop(comment_id, None)
        self._remove_where(self.replies, "comment", comment_id)
        self._remove_where(self.comment_likes, "comment_id", comment_id)

    def clear(self) -> None:
        """Drop every row."""
        for table in self._tables():
            table.clear()

    def _tables(self) -> List[Dict[str, Row]]:
        return [
            self.users,
            self.threads,
            self.comments,
            self.replies,
            self.comment_likes,
        ]

    @staticmethod
    def _remove_where(table: Dict[str, Row], column: str, value: str) -> None:
        for row_id in [r["id"] for r in table.values() if r[column] == value]:
            del table[row_id]
