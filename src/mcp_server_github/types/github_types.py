"""Pydantic models for GitHub API response objects.

Models validate the fields the server relies on and keep everything else the
API returns (``extra="allow"``), so a dumped model is a faithful JSON result
for the tool caller.
"""

from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class GitHubObject(BaseModel):
    """Base for response models: unknown fields are kept as-is."""

    model_config = ConfigDict(extra="allow")


class GitHubOwner(GitHubObject):
    login: str
    id: int
    type: Optional[str] = None
    html_url: Optional[str] = None
    avatar_url: Optional[str] = None


class GitHubRepository(GitHubObject):
    id: int
    name: str
    full_name: str
    owner: GitHubOwner
    private: bool
    description: Optional[str] = None
    fork: bool = False
    html_url: Optional[str] = None
    default_branch: Optional[str] = None


class GitHubFork(GitHubRepository):
    parent: Optional[GitHubRepository] = None
    source: Optional[GitHubRepository] = None


# Git data objects


class GitHubReferenceObject(GitHubObject):
    sha: str
    type: str
    url: Optional[str] = None


class GitHubReference(GitHubObject):
    """A named, mutable pointer to a Git object."""

    ref: str
    node_id: Optional[str] = None
    url: Optional[str] = None
    object: GitHubReferenceObject

    @property
    def sha(self) -> str:
        return self.object.sha


class TreeEntry(BaseModel):
    """One entry submitted to the create-tree endpoint."""

    path: str
    mode: Literal["100644", "100755", "040000", "160000", "120000"] = "100644"
    type: Literal["blob", "tree", "commit"] = "blob"
    content: Optional[str] = None
    sha: Optional[str] = None


class GitHubTreeEntry(GitHubObject):
    path: str
    mode: str
    type: str
    sha: str
    size: Optional[int] = None
    url: Optional[str] = None


class GitHubTree(GitHubObject):
    sha: str
    url: Optional[str] = None
    tree: list[GitHubTreeEntry] = Field(default_factory=list)
    truncated: bool = False


class GitHubGitActor(GitHubObject):
    name: Optional[str] = None
    email: Optional[str] = None
    date: Optional[str] = None


class GitHubObjectPointer(GitHubObject):
    sha: str
    url: Optional[str] = None


class GitHubCommit(GitHubObject):
    """A commit created through (or read from) the Git data API."""

    sha: str
    node_id: Optional[str] = None
    url: Optional[str] = None
    message: str
    tree: GitHubObjectPointer
    parents: list[GitHubObjectPointer] = Field(default_factory=list)
    author: Optional[GitHubGitActor] = None
    committer: Optional[GitHubGitActor] = None


class GitHubListCommitsEntry(GitHubObject):
    """One element of the repository commit listing."""

    sha: str
    node_id: Optional[str] = None
    commit: dict[str, Any]
    url: Optional[str] = None
    html_url: Optional[str] = None
    parents: list[GitHubObjectPointer] = Field(default_factory=list)


# Contents API


class GitHubDirectoryEntry(GitHubObject):
    """One element of a directory listing from the contents API."""

    type: str
    size: int = 0
    name: str
    path: str
    sha: str
    url: Optional[str] = None
    git_url: Optional[str] = None
    html_url: Optional[str] = None
    download_url: Optional[str] = None


class GitHubFileContent(GitHubDirectoryEntry):
    """A single file from the contents API, with its (decoded) content."""

    content: Optional[str] = None
    encoding: Optional[str] = None


class GitHubCreateUpdateFileResponse(GitHubObject):
    content: Optional[GitHubDirectoryEntry] = None
    commit: GitHubCommit


# Issues and pull requests


class GitHubLabel(GitHubObject):
    id: int
    name: str
    color: Optional[str] = None
    description: Optional[str] = None


class GitHubMilestone(GitHubObject):
    id: int
    number: int
    title: str
    state: str


class GitHubIssue(GitHubObject):
    id: int
    number: int
    title: str
    state: str
    html_url: Optional[str] = None
    body: Optional[str] = None
    user: Optional[GitHubOwner] = None
    labels: list[GitHubLabel] = Field(default_factory=list)
    assignees: list[GitHubOwner] = Field(default_factory=list)
    milestone: Optional[GitHubMilestone] = None
    comments: int = 0
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    closed_at: Optional[str] = None


class GitHubIssueComment(GitHubObject):
    id: int
    body: str
    user: Optional[GitHubOwner] = None
    html_url: Optional[str] = None
    created_at: Optional[str] = None


class GitHubPullRequestBranch(GitHubObject):
    label: Optional[str] = None
    ref: str
    sha: str


class GitHubPullRequest(GitHubObject):
    id: int
    number: int
    title: str
    state: str
    html_url: Optional[str] = None
    body: Optional[str] = None
    user: Optional[GitHubOwner] = None
    head: GitHubPullRequestBranch
    base: GitHubPullRequestBranch
    draft: bool = False
    merged: Optional[bool] = None


# Gists


class GitHubGistFile(GitHubObject):
    filename: str
    type: Optional[str] = None
    language: Optional[str] = None
    raw_url: Optional[str] = None
    size: Optional[int] = None


class GitHubGist(GitHubObject):
    id: str
    description: Optional[str] = None
    public: bool = True
    html_url: Optional[str] = None
    files: dict[str, GitHubGistFile] = Field(default_factory=dict)
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


# Search


class GitHubSearchResponse(GitHubObject):
    """Search result envelope; items are kept as returned by the API."""

    total_count: int
    incomplete_results: bool = False
    items: list[dict[str, Any]] = Field(default_factory=list)


class GitHubGistSearchResponse(GitHubObject):
    total_count: int
    incomplete_results: bool = False
    items: list[GitHubGist] = Field(default_factory=list)
