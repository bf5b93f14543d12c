"""Type definitions for MCP GitHub Server.

    github_types: pydantic models of GitHub REST API responses, plus the
        TreeEntry shape submitted when building trees
"""

from .github_types import (
    GitHubCommit,
    GitHubCreateUpdateFileResponse,
    GitHubDirectoryEntry,
    GitHubFileContent,
    GitHubFork,
    GitHubGist,
    GitHubGistSearchResponse,
    GitHubIssue,
    GitHubIssueComment,
    GitHubListCommitsEntry,
    GitHubPullRequest,
    GitHubReference,
    GitHubRepository,
    GitHubSearchResponse,
    GitHubTree,
    TreeEntry,
)

__all__ = [
    "GitHubCommit",
    "GitHubCreateUpdateFileResponse",
    "GitHubDirectoryEntry",
    "GitHubFileContent",
    "GitHubFork",
    "GitHubGist",
    "GitHubGistSearchResponse",
    "GitHubIssue",
    "GitHubIssueComment",
    "GitHubListCommitsEntry",
    "GitHubPullRequest",
    "GitHubReference",
    "GitHubRepository",
    "GitHubSearchResponse",
    "GitHubTree",
    "TreeEntry",
]
