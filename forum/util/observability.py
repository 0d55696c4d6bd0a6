"""Logfire setup and instrumentation.

Code logs and traces through ``logfire`` directly::

    logfire.info("Comment added", comment_id=added.id, thread_id=thread_id)

    with logfire.span("add_comment.execute", thread_id=thread_id):
        ...
"""

from typing import Any

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from forum.config import Settings

SERVICE_NAME = "forum-api"


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once per process.

    Telemetry leaves the process only when export is enabled; otherwise it is
    printed to the console.
    """
    observability = settings.observability
    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=settings.git_sha,
        environment=settings.environment,
        send_to_logfire=observability.export_enabled,
        token=observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )
    logfire.info(
        "Logfire configured",
        environment=settings.environment,
        export=observability.export_enabled,
    )


def request_attributes(request: Any, attributes: dict[str, Any]) -> dict[str, Any]:
    """Tag request spans with the method and path."""
    return {
        **attributes,
        "method": getattr(request, "method", None),
        "path": request.url.path if hasattr(request, "url") else None,
    }


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request served by the app."""
    logfire.instrument_fastapi(app, request_attributes_mapper=request_attributes)


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace every statement run on the engine, with span context in SQL comments."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
