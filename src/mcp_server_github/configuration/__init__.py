"""Configuration module for MCP GitHub Server.

Configuration is a single validated pydantic model, built once at startup and
threaded explicitly into the GitHub client. Nothing below the server bootstrap
reads the environment.

Environment variable binding:
    ```bash
    export GITHUB_PERSONAL_ACCESS_TOKEN=ghp_xxxxxxxxxxxx   # or GITHUB_TOKEN
    export GITHUB_API_URL=https://github.example.com/api/v3
    ```

Usage examples:
    >>> from mcp_server_github.configuration import load_config_from_env
    >>>
    >>> config = load_config_from_env()
    >>> config.api_url
    'https://api.github.com'

Configuration testing:
    >>> from mcp_server_github.configuration import create_test_config
    >>>
    >>> test_config = create_test_config(api_url="http://localhost:8080")
"""

import logging
import os
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..constants import GitHubAPIDefaults, TokenPlaceholders
from ..error_handling import ConfigurationError

logger = logging.getLogger(__name__)

TOKEN_ENV_VARS = GitHubAPIDefaults.TOKEN_ENV_VARS


class GitHubConfig(BaseModel):
    """Settings needed to talk to the GitHub REST API."""

    model_config = ConfigDict(frozen=True)

    token: str = Field(repr=False, description="Personal access token")
    api_url: str = GitHubAPIDefaults.API_URL
    accept: str = GitHubAPIDefaults.ACCEPT_HEADER
    user_agent: str = GitHubAPIDefaults.USER_AGENT

    @field_validator("token")
    @classmethod
    def _token_not_blank(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("token must not be empty")
        return value.strip()

    @field_validator("api_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError("api_url must be an http(s) URL")
        return value.rstrip("/")


def is_placeholder_token(token: Optional[str]) -> bool:
    """True when ``token`` is unset, blank or one of ``TokenPlaceholders.VALUES``."""
    if token is None:
        return True
    return token.strip() in TokenPlaceholders.VALUES


def _token_from_env() -> Optional[str]:
    for name in TOKEN_ENV_VARS:
        value = os.getenv(name)
        if is_placeholder_token(value):
            if value and value.strip():
                logger.warning(f"Ignoring placeholder value in {name}")
            continue
        logger.debug(f"Using access token from {name}")
        return value
    return None


def load_config_from_env() -> GitHubConfig:
    """Build the server configuration from environment variables.

    Raises:
        ConfigurationError: No access token is set, or a value is invalid
    """
    token = _token_from_env()
    if token is None:
        raise ConfigurationError(
            f"{TOKEN_ENV_VARS[0]} environment variable is not set"
        )

    values = {"token": token}
    if os.getenv("GITHUB_API_URL"):
        values["api_url"] = os.environ["GITHUB_API_URL"]

    try:
        return GitHubConfig(**values)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e


def create_test_config(**overrides) -> GitHubConfig:
    """Create a configuration suitable for tests."""
    values = {"token": "ghp_" + "t" * 36, "api_url": "https://api.github.test"}
    values.update(overrides)
    return GitHubConfig(**values)


__all__ = [
    "GitHubConfig",
    "is_placeholder_token",
    "load_config_from_env",
    "create_test_config",
]
