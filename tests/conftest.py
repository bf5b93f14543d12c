"""
Global pytest configuration and fixtures for the MCP GitHub Server test suite.

This file provides:
1. Test environment isolation for access tokens and log level
2. Configuration and client fixtures (real client over a mocked session)
3. The in-memory GitHub remote used by the file publishing tests
"""

import os

import pytest

from mcp_server_github.configuration import create_test_config
from mcp_server_github.github.client import GitHubClient

from tests.fixtures.fake_github import FakeGitHub
from tests.fixtures.http_mocks import make_response, make_session
from tests.fixtures.github_responses import github_response_factory, mock_github_client  # noqa: F401


# Test environment setup
@pytest.fixture
def test_environment():
    """Set up test environment variables and configuration."""
    original_env = os.environ.copy()

    # Real tokens from the developer's shell must never reach a test
    for name in ("GITHUB_PERSONAL_ACCESS_TOKEN", "GITHUB_TOKEN", "GITHUB_API_URL"):
        os.environ.pop(name, None)
    os.environ["LOG_LEVEL"] = "DEBUG"
    os.environ["TESTING"] = "true"

    yield

    # Restore original environment
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def github_config():
    return create_test_config()


@pytest.fixture
def mock_session():
    """An aiohttp session mock answering every request with an empty 200."""
    return make_session(make_response(200, {}))


@pytest.fixture
def github_client(github_config, mock_session):
    """Real GitHubClient sending through ``mock_session``."""
    return GitHubClient(config=github_config, session=mock_session)


@pytest.fixture
def fake_github():
    """In-memory remote seeded with a ``main`` branch holding two files."""
    return FakeGitHub.with_files(
        {"README.md": "# Demo\n", "src/app.py": "print('hello')\n"},
        branch="main",
    )
