"""FastAPI application factory."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from forum.config import Settings
from forum.interface.api.errors import register_exception_handlers
from forum.interface.api.routes import (
    comment_likes,
    comments,
    health,
    replies,
    threads,
)
from forum.util.di.container import create_container, setup_di
from forum.util.observability import instrument_fastapi

API_VERSION = "0.1.0"

ROUTERS = (
    health.router,
    threads.router,
    comments.router,
    replies.router,
    comment_likes.router,
)


def create_app(
    container: AsyncContainer | None = None, settings: Settings | None = None
) -> FastAPI:
    """Build the API.

    Logfire must be configured before this is called; ``scripts/start_app.py``
    does it for deployments.

    Args:
        container: DI container. Tests pass one with mocked components.
        settings: Settings to use instead of the environment's.
    """
    settings = settings or Settings()

    app_instance = FastAPI(
        title="Forum API",
        description="Threads, comments, replies and comment likes",
        version=API_VERSION,
        docs_url=None if settings.is_production else "/docs",
        redoc_url=None,
    )
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        max_age=settings.cors.max_age,
    )

    setup_di(app_instance, container or create_container())
    register_exception_handlers(app_instance)
    for router in ROUTERS:
        app_instance.include_router(router)

    return app_instance


# Module-level app for uvicorn
app = create_app()
