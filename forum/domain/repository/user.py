"""User repository interface.

Accounts belong to the identity system. The forum only keeps the username of
each user id so that threads, comments and replies can show their author.
"""

from abc import ABC, abstractmethod

from forum.domain.error import UnimplementedError
from forum.domain.value import UserId


class UserRepository(ABC):
    """Usernames of the people writing on the forum."""

    @abstractmethod
    async def add_user(self, user_id: UserId, username: str) -> None:
        """Record a user, or rename one that is already known.

        Args:
            user_id: ID assigned by the identity system
            username: Name shown next to the user's content
        """
        raise UnimplementedError("USER_REPOSITORY")

    @abstractmethod
    async def get_username(self, user_id: UserId) -> str:
        """Resolve the username of a user.

        Raises:
            NotFoundError: If the user is unknown
        """
        raise UnimplementedError("USER_REPOSITORY")
