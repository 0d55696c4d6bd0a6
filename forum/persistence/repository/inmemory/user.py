"""In-memory user repository for testing."""

from forum.domain.error import NotFoundError
from forum.domain.repository import UserRepository
from forum.domain.value import UserId
from forum.persistence.repository.inmemory.database import InMemoryDatabase


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self.database = database

    async def add_user(self, user_id: UserId, username: str) -> None:
        row = self.database.users.get(user_id)
        if row is not None:
            row["username"] = username
            return
        self.database.users[user_id] = {
            "id": user_id,
            "username": username,
            "created_at": self.database.now(),
        }

    async def get_username(self, user_id: UserId) -> str:
        if user_id not in self.database.users:
            raise NotFoundError("User", user_id)
        return self.database.username_of(user_id)
