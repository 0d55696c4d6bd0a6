"""Unit tests for the in-memory user repository."""

import pytest

from forum.domain.error import NotFoundError
from forum.domain.repository import UserRepository
from forum.domain.value import UserId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestInMemoryUserRepository:
    """Tests for InMemoryUserRepository."""

    @pytest.mark.asyncio
    async def test_add_and_get_username(self, unit_env):
        repo = await unit_env.get(UserRepository)

        await repo.add_user(UserId("user-123"), "dicoding")

        assert await repo.get_username(UserId("user-123")) == "dicoding"

    @pytest.mark.asyncio
    async def test_add_user_renames_known_user(self, unit_env):
        repo = await unit_env.get(UserRepository)
        await repo.add_user(UserId("user-123"), "dicoding")

        await repo.add_user(UserId("user-123"), "dicoding-id")

        assert await repo.get_username(UserId("user-123")) == "dicoding-id"

    @pytest.mark.asyncio
    async def test_get_username_of_unknown_user(self, unit_env):
        repo = await unit_env.get(UserRepository)

        with pytest.raises(NotFoundError) as exc:
            await repo.get_username(UserId("user-404"))
        assert exc.value.code == "USER.NOT_FOUND"
