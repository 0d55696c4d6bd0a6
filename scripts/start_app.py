#!/usr/bin/env python3
"""Serve the API with uvicorn.

Logging and Logfire are configured before the app module is imported, so
import-time failures are reported too.
"""

import sys

import logfire
import uvicorn

from forum.config import Settings
from forum.util.logging import setup_logging
from forum.util.observability import configure_logfire

APP = "forum.interface.api.app:app"


def main() -> int:
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    logfire.info("Starting API", host=settings.host, port=settings.port)
    try:
        uvicorn.run(
            APP,
            host=settings.host,
            port=settings.port,
            log_level="debug" if settings.debug else "info",
            proxy_headers=True,
        )
    except Exception:
        logfire.exception("API failed to start")
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
