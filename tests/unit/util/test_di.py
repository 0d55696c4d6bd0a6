"""Unit tests for the test container wiring."""

import pytest

from forum.application.usecase.comment import AddCommentUseCase, DeleteCommentUseCase
from forum.application.usecase.comment_like import ToggleCommentLikeUseCase
from forum.application.usecase.reply import AddReplyUseCase, DeleteReplyUseCase
from forum.application.usecase.thread import AddThreadUseCase, GetThreadDetailUseCase
from forum.domain.repository import ThreadRepository
from forum.domain.service import AuthenticationService
from forum.persistence.repository.inmemory import (
    InMemoryDatabase,
    InMemoryThreadRepository,
)
from forum.util.di import (
    PROVIDERS,
    ProdApplicationProvider,
    ProdConfigProvider,
    ProdPersistenceProvider,
    get_provider,
    mockable_components,
    resolve_providers,
)
from tests.di import MockPersistenceProvider, build_test_container
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestContainer:
    """Tests for building containers with mocked components."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "use_case",
        [
            AddThreadUseCase,
            GetThreadDetailUseCase,
            AddCommentUseCase,
            DeleteCommentUseCase,
            AddReplyUseCase,
            DeleteReplyUseCase,
            ToggleCommentLikeUseCase,
        ],
    )
    async def test_resolves_use_cases(self, unit_env, use_case):
        assert isinstance(await unit_env.get(use_case), use_case)

    @pytest.mark.asyncio
    async def test_persistence_is_mocked(self, unit_env):
        repo = await unit_env.get(ThreadRepository)

        assert isinstance(repo, InMemoryThreadRepository)

    @pytest.mark.asyncio
    async def test_database_is_shared_across_requests(self):
        container = build_test_container()

        async with container() as first:
            first_db = await first.get(InMemoryDatabase)
        async with container() as second:
            second_db = await second.get(InMemoryDatabase)

        assert first_db is second_db
        service = await container.get(AuthenticationService)
        assert await container.get(AuthenticationService) is service
        await container.close()

    def test_unknown_component(self):
        with pytest.raises(ValueError, match="Unknown components"):
            build_test_container(unmock={"bluesky"})


class TestResolveProviders:
    """Tests for picking provider variants."""

    def test_production_by_default(self):
        providers = resolve_providers(PROVIDERS)

        assert [type(p) for p in providers] == [
            ProdConfigProvider,
            ProdApplicationProvider,
            ProdPersistenceProvider,
        ]

    def test_mocked_component(self):
        providers = resolve_providers(PROVIDERS, mocked={"persistence"})

        assert isinstance(providers[-1], MockPersistenceProvider)

    def test_unknown_mocked_component(self):
        with pytest.raises(ValueError, match="Unknown components"):
            resolve_providers(PROVIDERS, mocked={"twitter"})

    def test_only_subclassed_bases_are_mockable(self):
        assert mockable_components(PROVIDERS) == {"persistence"}
        assert get_provider(ProdConfigProvider, use_mock=True) is ProdConfigProvider
