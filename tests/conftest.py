"""Test configuration and fixtures."""

import os

import pytest


def pytest_collection_modifyitems(config, items):
    """Skip PostgreSQL-backed tests unless FORUM_INTEGRATION=1."""
    if os.environ.get("FORUM_INTEGRATION") == "1":
        return

    skip_integration = pytest.mark.skip(reason="set FORUM_INTEGRATION=1 to run")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_integration)
