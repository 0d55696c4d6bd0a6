"""Dependency injection container."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from forum.util.di import PROVIDERS, Component, resolve_providers


def create_container(mocked: set[Component] | None = None) -> AsyncContainer:
    """Build a container for the API.

    Production implementations are used unless a component is listed in
    ``mocked``. Settings are loaded from environment variables.

    Args:
        mocked: Components to serve from their mock variant

    Returns:
        Configured DI container, including the FastAPI request provider
    """
    providers = resolve_providers(PROVIDERS, mocked=set(mocked or ()))
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach a container to an app so routes can use ``FromDishka``."""
    setup_dishka(container, app)
