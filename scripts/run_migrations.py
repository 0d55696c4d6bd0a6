#!/usr/bin/env python3
"""Apply Alembic migrations before the API starts.

Usage:
    python scripts/run_migrations.py                # upgrade to head
    python scripts/run_migrations.py 3c1f0d2b9a47   # upgrade to a revision
"""

import sys

import logfire
from alembic import command
from alembic.config import Config

from forum.config import Settings
from forum.util.logging import setup_logging
from forum.util.observability import configure_logfire

ALEMBIC_CONFIG = "alembic.ini"


def main(argv: list[str]) -> int:
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    revision = argv[0] if argv else "head"
    with logfire.span("migrations.upgrade", revision=revision):
        try:
            command.upgrade(Config(ALEMBIC_CONFIG), revision)
        except Exception:
            # A failed migration must stop the deployment
            logfire.exception("Migration failed", revision=revision)
            raise
    logfire.info("Schema is up to date", revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
