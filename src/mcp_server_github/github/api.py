"""GitHub API operations for MCP GitHub Server

Each operation is one request forwarded to the REST API, with the response
validated into a typed model. ``search_gists`` is the exception: it lists one
page of gists and filters them locally.
"""

import logging
from typing import Any, Mapping, Optional, Sequence

from ..error_handling import parse_response, parse_response_list
from ..types.github_types import (
    GitHubFork,
    GitHubGist,
    GitHubGistSearchResponse,
    GitHubIssue,
    GitHubIssueComment,
    GitHubListCommitsEntry,
    GitHubPullRequest,
    GitHubRepository,
    GitHubSearchResponse,
)
from .client import GitHubClient, repo_endpoint
from .models import GistFile

logger = logging.getLogger(__name__)


def _without_none(values: Mapping[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in values.items() if value is not None}


# Repositories


async def fork_repository(
    client: GitHubClient, owner: str, repo: str, organization: Optional[str] = None
) -> GitHubFork:
    """Fork a repository to the authenticated user or ``organization``"""
    data = await client.post(
        repo_endpoint(owner, repo, "forks"), params={"organization": organization}
    )
    return parse_response(GitHubFork, data)


async def create_repository(
    client: GitHubClient,
    name: str,
    description: Optional[str] = None,
    private: Optional[bool] = None,
    auto_init: Optional[bool] = None,
) -> GitHubRepository:
    """Create a repository for the authenticated user"""
    body = _without_none(
        {"name": name, "description": description, "private": private, "auto_init": auto_init}
    )
    data = await client.post("/user/repos", json=body)
    return parse_response(GitHubRepository, data)


async def list_commits(
    client: GitHubClient,
    owner: str,
    repo: str,
    sha: Optional[str] = None,
    page: Optional[int] = None,
    per_page: Optional[int] = None,
) -> list[GitHubListCommitsEntry]:
    """List commits on a branch (or from a commit)"""
    data = await client.get(
        repo_endpoint(owner, repo, "commits"),
        params={"sha": sha, "page": page, "per_page": per_page},
    )
    return parse_response_list(GitHubListCommitsEntry, data)


# Issues


async def list_issues(
    client: GitHubClient,
    owner: str,
    repo: str,
    state: Optional[str] = None,
    labels: Optional[Sequence[str]] = None,
    sort: Optional[str] = None,
    direction: Optional[str] = None,
    since: Optional[str] = None,
    page: Optional[int] = None,
    per_page: Optional[int] = None,
) -> list[GitHubIssue]:
    """List issues in a repository"""
    params = {
        "state": state,
        "labels": ",".join(labels) if labels else None,
        "sort": sort,
        "direction": direction,
        "since": since,
        "page": page,
        "per_page": per_page,
    }
    data = await client.get(repo_endpoint(owner, repo, "issues"), params=params)
    return parse_response_list(GitHubIssue, data)


async def get_issue(client: GitHubClient, owner: str, repo: str, issue_number: int) -> GitHubIssue:
    data = await client.get(repo_endpoint(owner, repo, "issues", str(issue_number)))
    return parse_response(GitHubIssue, data)


async def create_issue(
    client: GitHubClient,
    owner: str,
    repo: str,
    title: str,
    body: Optional[str] = None,
    assignees: Optional[Sequence[str]] = None,
    milestone: Optional[int] = None,
    labels: Optional[Sequence[str]] = None,
) -> GitHubIssue:
    payload = _without_none(
        {
            "title": title,
            "body": body,
            "assignees": list(assignees) if assignees is not None else None,
            "milestone": milestone,
            "labels": list(labels) if labels is not None else None,
        }
    )
    data = await client.post(repo_endpoint(owner, repo, "issues"), json=payload)
    return parse_response(GitHubIssue, data)


async def update_issue(
    client: GitHubClient,
    owner: str,
    repo: str,
    issue_number: int,
    title: Optional[str] = None,
    body: Optional[str] = None,
    state: Optional[str] = None,
    labels: Optional[Sequence[str]] = None,
    assignees: Optional[Sequence[str]] = None,
    milestone: Optional[int] = None,
) -> GitHubIssue:
    """Update an issue; only the fields that are given are changed"""
    payload = _without_none(
        {
            "title": title,
            "body": body,
            "state": state,
            "labels": list(labels) if labels is not None else None,
            "assignees": list(assignees) if assignees is not None else None,
            "milestone": milestone,
        }
    )
    data = await client.patch(
        repo_endpoint(owner, repo, "issues", str(issue_number)), json=payload
    )
    return parse_response(GitHubIssue, data)


async def add_issue_comment(
    client: GitHubClient, owner: str, repo: str, issue_number: int, body: str
) -> GitHubIssueComment:
    data = await client.post(
        repo_endpoint(owner, repo, "issues", str(issue_number), "comments"),
        json={"body": body},
    )
    return parse_response(GitHubIssueComment, data)


# Pull requests


async def create_pull_request(
    client: GitHubClient,
    owner: str,
    repo: str,
    title: str,
    head: str,
    base: str,
    body: Optional[str] = None,
    draft: Optional[bool] = None,
    maintainer_can_modify: Optional[bool] = None,
) -> GitHubPullRequest:
    payload = _without_none(
        {
            "title": title,
            "head": head,
            "base": base,
            "body": body,
            "draft": draft,
            "maintainer_can_modify": maintainer_can_modify,
        }
    )
    data = await client.post(repo_endpoint(owner, repo, "pulls"), json=payload)
    return parse_response(GitHubPullRequest, data)


# Gists


async def create_gist(
    client: GitHubClient,
    files: Mapping[str, GistFile],
    description: Optional[str] = None,
    public: bool = True,
) -> GitHubGist:
    """Create a gist; ``files`` maps file names to their content"""
    payload = _without_none(
        {
            "description": description,
            "public": public,
            "files": {
                (file.filename or name): {"content": file.content}
                for name, file in files.items()
            },
        }
    )
    data = await client.post("/gists", json=payload)
    return parse_response(GitHubGist, data)


async def list_gists(
    client: GitHubClient,
    since: Optional[str] = None,
    page: Optional[int] = None,
    per_page: Optional[int] = None,
) -> list[GitHubGist]:
    """List one page of the authenticated user's gists"""
    data = await client.get(
        "/gists", params={"since": since, "page": page, "per_page": per_page}
    )
    return parse_response_list(GitHubGist, data)


def filter_gists(
    gists: Sequence[GitHubGist],
    query: str,
    sort: Optional[str] = None,
    order: Optional[str] = None,
) -> list[GitHubGist]:
    """Filter gists by ``language:<name>`` terms and keywords.

    Keywords must all appear (case-insensitively) in the description or a file
    name. ``sort="updated"`` puts the most recently updated first, and
    ``order="asc"`` reverses the sorted result.
    """
    terms = query.lower().split()
    languages = [term.split(":", 1)[1] for term in terms if term.startswith("language:")]
    keywords = [term for term in terms if not term.startswith("language:")]

    def matches(gist: GitHubGist) -> bool:
        for language in languages:
            if not any(
                (file.language or "").lower() == language for file in gist.files.values()
            ):
                return False
        if keywords:
            text = " ".join(
                part
                for part in [gist.description, *(f.filename for f in gist.files.values())]
                if part
            ).lower()
            return all(keyword in text for keyword in keywords)
        return True

    results = [gist for gist in gists if matches(gist)]

    if sort:
        if sort == "updated":
            results.sort(key=lambda gist: gist.updated_at or "", reverse=True)
        if order == "asc":
            results.reverse()
    return results


async def search_gists(
    client: GitHubClient,
    q: str,
    sort: Optional[str] = None,
    order: Optional[str] = None,
    page: Optional[int] = None,
    per_page: Optional[int] = None,
) -> GitHubGistSearchResponse:
    """Search the authenticated user's gists (the API has no gist search)"""
    gists = await list_gists(client, page=page, per_page=per_page)
    items = filter_gists(gists, q, sort=sort, order=order)
    logger.debug(f"Gist search '{q}' matched {len(items)} of {len(gists)}")
    return GitHubGistSearchResponse(
        total_count=len(items), incomplete_results=False, items=items
    )


# Search


async def _search(client: GitHubClient, kind: str, params: Mapping[str, Any]) -> GitHubSearchResponse:
    data = await client.get(f"/search/{kind}", params=params)
    return parse_response(GitHubSearchResponse, data)


async def search_repositories(
    client: GitHubClient,
    query: str,
    page: Optional[int] = None,
    per_page: Optional[int] = None,
) -> GitHubSearchResponse:
    return await _search(
        client, "repositories", {"q": query, "page": page, "per_page": per_page}
    )


async def search_code(
    client: GitHubClient,
    q: str,
    order: Optional[str] = None,
    page: Optional[int] = None,
    per_page: Optional[int] = None,
) -> GitHubSearchResponse:
    return await _search(
        client, "code", {"q": q, "order": order, "page": page, "per_page": per_page}
    )


async def search_issues(
    client: GitHubClient,
    q: str,
    sort: Optional[str] = None,
    order: Optional[str] = None,
    page: Optional[int] = None,
    per_page: Optional[int] = None,
) -> GitHubSearchResponse:
    return await _search(
        client,
        "issues",
        {"q": q, "sort": sort, "order": order, "page": page, "per_page": per_page},
    )


async def search_users(
    client: GitHubClient,
    q: str,
    sort: Optional[str] = None,
    order: Optional[str] = None,
    page: Optional[int] = None,
    per_page: Optional[int] = None,
) -> GitHubSearchResponse:
    return await _search(
        client,
        "users",
        {"q": q, "sort": sort, "order": order, "page": page, "per_page": per_page},
    )
