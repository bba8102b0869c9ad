"""Pytest configuration and fixtures.

Test Markers:
    - Default: Unit tests run automatically, fully offline
    - @pytest.mark.manual: Integration tests against real upstream APIs
    - @pytest.mark.slow: Tests that take more than a few seconds

Run commands:
    pytest                          # Run unit tests only (default)
    pytest -m manual                # Run manual/integration tests
    pytest -m "not slow"            # Skip slow tests
    pytest -m ""                    # Run ALL tests (no filter)
"""

import pytest
from faker import Faker

from toolbelt.core.tools import ToolRequest
from toolbelt.core.tools.discovery import discover_tools


@pytest.fixture(scope='session')
def faker() -> Faker:
    return Faker()


@pytest.fixture(scope='session', autouse=True)
def registered_tools() -> list[str]:
    """Import every tool module once so the registry is populated."""
    return discover_tools()


@pytest.fixture
def post_request():
    """Build a POST `ToolRequest` from a body."""

    def build(body):
        return ToolRequest(method='POST', body=body)

    return build
