"""GitHub integration for MCP GitHub Server"""

from .api import (
    add_issue_comment,
    create_gist,
    create_issue,
    create_pull_request,
    create_repository,
    fork_repository,
    get_issue,
    list_commits,
    list_issues,
    search_code,
    search_gists,
    search_issues,
    search_repositories,
    search_users,
    update_issue,
)
from .client import GitHubClient, open_github_client
from .contents import create_or_update_file, get_file_contents
from .git_data import create_commit, create_tree
from .publish import push_files
from .refs import (
    create_branch,
    get_branch_sha,
    get_reference,
    resolve_default_branch_sha,
    update_reference,
)

__all__ = [
    "GitHubClient",
    "open_github_client",
    # References and Git data
    "get_reference",
    "get_branch_sha",
    "resolve_default_branch_sha",
    "create_branch",
    "update_reference",
    "create_tree",
    "create_commit",
    "push_files",
    # Contents
    "get_file_contents",
    "create_or_update_file",
    # Repositories, issues, pull requests, gists
    "fork_repository",
    "create_repository",
    "list_commits",
    "list_issues",
    "get_issue",
    "create_issue",
    "update_issue",
    "add_issue_comment",
    "create_pull_request",
    "create_gist",
    # Search
    "search_repositories",
    "search_code",
    "search_issues",
    "search_users",
    "search_gists",
]
