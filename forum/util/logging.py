"""Logging configuration for the application.

Standard library loggers are routed to the console and to Logfire, so
records from uvicorn, SQLAlchemy and ``get_logger`` end up next to the spans
emitted by the use cases.
"""

import logging
import sys

import logfire

from forum.config import Settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

ENVIRONMENT_LEVELS = {
    "test": logging.WARNING,
    "development": logging.INFO,
    "staging": logging.INFO,
    "production": logging.WARNING,
}

# Third-party loggers that are too chatty at INFO
QUIET_LOGGERS = ("sqlalchemy.engine", "asyncpg", "httpx")


def resolve_level(settings: Settings) -> int:
    """Pick the log level: debug wins, otherwise by environment."""
    if settings.debug:
        return logging.DEBUG
    return ENVIRONMENT_LEVELS.get(settings.environment, logging.INFO)


def setup_logging(settings: Settings) -> None:
    """Configure application logging.

    Args:
        settings: Application settings
    """
    level = resolve_level(settings)

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    logging.basicConfig(
        level=level,
        handlers=[console, logfire.LogfireLoggingHandler()],
        force=True,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
    logging.getLogger("forum").setLevel(level)

    get_logger(__name__).info(
        "Logging configured: environment=%s, level=%s",
        settings.environment,
        logging.getLevelName(level),
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance (typically ``get_logger(__name__)``)."""
    return logging.getLogger(name)
