"""PostgreSQL implementation of User repository."""

from sqlalchemy import func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.error import NotFoundError
from forum.domain.repository import UserRepository
from forum.domain.value import UserId
from forum.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def add_user(self, user_id: UserId, username: str) -> None:
        """Upsert on the primary key; a known user only gets renamed."""
        stmt = (
            insert(users_table)
            .values(id=user_id, username=username, created_at=func.now())
            .on_conflict_do_update(
                index_elements=[users_table.c.id],
                set_={"username": username},
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def get_username(self, user_id: UserId) -> str:
        stmt = select(users_table.c.username).where(users_table.c.id == user_id)
        username = (await self.session.execute(stmt)).scalar_one_or_none()
        if username is None:
            raise NotFoundError("User", user_id)
        return username
