"""Persistence providers.

``PersistenceProvider`` is the mockable ``persistence`` component. The
production variant serves PostgreSQL repositories sharing one session per
request; tests swap in in-memory repositories.
"""

from collections.abc import AsyncIterator

from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from forum.config import DatabaseSettings, Settings
from forum.domain.repository import (
    CommentLikeRepository,
    CommentRepository,
    ReplyRepository,
    ThreadRepository,
    UserRepository,
)
from forum.persistence.database import (
    create_engine,
    create_session_factory,
    session_scope,
)
from forum.persistence.repository import (
    PostgresCommentLikeRepository,
    PostgresCommentRepository,
    PostgresReplyRepository,
    PostgresThreadRepository,
    PostgresUserRepository,
)
from forum.util.di.base import ProviderBase
from forum.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Repositories backed by PostgreSQL."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_engine(
        self, settings: Settings, database: DatabaseSettings
    ) -> AsyncIterator[AsyncEngine]:
        """Engine shared by the process, disposed when the container closes."""
        engine = create_engine(database, echo=settings.debug)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """One transaction per request: committed on success, rolled back on error."""
        async with session_scope(session_factory) as session:
            yield session

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_thread_repository(self, session: AsyncSession) -> ThreadRepository:
        return PostgresThreadRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, session: AsyncSession) -> CommentRepository:
        return PostgresCommentRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_reply_repository(self, session: AsyncSession) -> ReplyRepository:
        return PostgresReplyRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_comment_like_repository(
        self, session: AsyncSession
    ) -> CommentLikeRepository:
        return PostgresCommentLikeRepository(session)
