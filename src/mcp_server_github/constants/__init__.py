"""Constants module for MCP GitHub Server.

Constants are grouped in classes of ``Final`` values:

    GitHubAPIDefaults: endpoint, headers and environment variable names
    GitObjectDefaults: fixed values used when building Git objects
    TokenPlaceholders: values in the environment that do not count as a token

Usage examples:
    >>> from mcp_server_github.constants import GitHubAPIDefaults
    >>> GitHubAPIDefaults.API_URL
    'https://api.github.com'
"""

from typing import Final

from .._version import __version__


class GitHubAPIDefaults:
    """Defaults for talking to the GitHub REST API."""

    API_URL: Final[str] = "https://api.github.com"
    ACCEPT_HEADER: Final[str] = "application/vnd.github.v3+json"
    USER_AGENT: Final[str] = f"mcp-server-github/{__version__}"
    # Checked in order, first non-blank value wins
    TOKEN_ENV_VARS: Final[tuple[str, ...]] = (
        "GITHUB_PERSONAL_ACCESS_TOKEN",
        "GITHUB_TOKEN",
    )


class GitObjectDefaults:
    """Fixed values for Git data objects created through the API."""

    BLOB_MODE: Final[str] = "100644"
    BLOB_TYPE: Final[str] = "blob"
    HEADS_PREFIX: Final[str] = "heads/"
    # Tried in order when no base branch is given
    DEFAULT_BRANCH_CANDIDATES: Final[tuple[str, ...]] = ("main", "master")


class TokenPlaceholders:
    """Environment values that are treated as "no token configured"."""

    VALUES: Final[tuple[str, ...]] = (
        "",
        "YOUR_TOKEN_HERE",
        "REPLACE_ME",
        "TODO",
        "CHANGEME",
    )


__all__ = [
    "GitHubAPIDefaults",
    "GitObjectDefaults",
    "TokenPlaceholders",
]
