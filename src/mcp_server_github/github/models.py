"""Pydantic models for GitHub tool arguments"""

from typing import Literal, Optional

from pydantic import BaseModel, Field


class RepositoryArgs(BaseModel):
    owner: str = Field(description="Repository owner (username or organization)")
    repo: str = Field(description="Repository name")


class Pagination(BaseModel):
    page: Optional[int] = Field(default=None, ge=1, description="Page number")
    per_page: Optional[int] = Field(
        default=None, ge=1, le=100, description="Results per page (max 100)"
    )


# Repository and branch tools


class ForkRepository(RepositoryArgs):
    organization: Optional[str] = Field(
        default=None, description="Organization to fork into (defaults to your account)"
    )


class CreateRepository(BaseModel):
    name: str = Field(description="Repository name")
    description: Optional[str] = None
    private: Optional[bool] = None
    auto_init: Optional[bool] = Field(
        default=None, description="Initialize with a README"
    )


class CreateBranch(RepositoryArgs):
    branch: str = Field(description="Name for the new branch")
    from_branch: Optional[str] = Field(
        default=None,
        description="Branch to create from (defaults to 'main', then 'master')",
    )


class ListCommits(RepositoryArgs, Pagination):
    sha: Optional[str] = Field(
        default=None, description="Branch name or commit SHA to list from"
    )


# File tools


class GetFileContents(RepositoryArgs):
    path: str = Field(description="Path to the file or directory")
    branch: Optional[str] = Field(default=None, description="Branch, tag or commit")


class CreateOrUpdateFile(RepositoryArgs):
    path: str = Field(description="Path where to create/update the file")
    content: str = Field(description="Content of the file")
    message: str = Field(description="Commit message")
    branch: str = Field(description="Branch to create/update the file in")
    sha: Optional[str] = Field(
        default=None,
        description="Blob SHA of the file being replaced (looked up when omitted)",
    )


class FileOperation(BaseModel):
    path: str
    content: str


class PushFiles(RepositoryArgs):
    branch: str = Field(description="Branch to push to, e.g. 'main'")
    files: list[FileOperation] = Field(description="Files to write in one commit")
    message: str = Field(description="Commit message")


# Issue and pull request tools


class ListIssues(RepositoryArgs, Pagination):
    state: Optional[Literal["open", "closed", "all"]] = None
    labels: Optional[list[str]] = None
    sort: Optional[Literal["created", "updated", "comments"]] = None
    direction: Optional[Literal["asc", "desc"]] = None
    since: Optional[str] = Field(default=None, description="ISO 8601 timestamp")


class GetIssue(RepositoryArgs):
    issue_number: int


class CreateIssue(RepositoryArgs):
    title: str
    body: Optional[str] = None
    assignees: Optional[list[str]] = None
    milestone: Optional[int] = None
    labels: Optional[list[str]] = None


class UpdateIssue(RepositoryArgs):
    issue_number: int
    title: Optional[str] = None
    body: Optional[str] = None
    state: Optional[Literal["open", "closed"]] = None
    labels: Optional[list[str]] = None
    assignees: Optional[list[str]] = None
    milestone: Optional[int] = None


class AddIssueComment(RepositoryArgs):
    issue_number: int
    body: str


class CreatePullRequest(RepositoryArgs):
    title: str
    head: str = Field(description="Branch containing the changes")
    base: str = Field(description="Branch to merge into")
    body: Optional[str] = None
    draft: Optional[bool] = None
    maintainer_can_modify: Optional[bool] = None


# Gist tools


class GistFile(BaseModel):
    content: str = Field(description="The content of the file")
    filename: Optional[str] = Field(default=None, description="The name of the file")


class CreateGist(BaseModel):
    description: Optional[str] = Field(default=None, description="Description of the gist")
    public: bool = Field(default=True, description="Whether the gist is public")
    files: dict[str, GistFile] = Field(description="Files to include in the gist")


# Search tools


class SearchRepositories(Pagination):
    query: str = Field(description="Search query (GitHub search syntax)")


class SearchCode(Pagination):
    q: str = Field(description="Search query (GitHub code search syntax)")
    order: Optional[Literal["asc", "desc"]] = None


class SearchIssues(Pagination):
    q: str = Field(description="Search query (GitHub issues search syntax)")
    sort: Optional[
        Literal[
            "comments",
            "reactions",
            "reactions-+1",
            "reactions--1",
            "reactions-smile",
            "reactions-thinking_face",
            "reactions-heart",
            "reactions-tada",
            "interactions",
            "created",
            "updated",
        ]
    ] = None
    order: Optional[Literal["asc", "desc"]] = None


class SearchUsers(Pagination):
    q: str = Field(description="Search query (GitHub users search syntax)")
    sort: Optional[Literal["followers", "repositories", "joined"]] = None
    order: Optional[Literal["asc", "desc"]] = None


class SearchGists(Pagination):
    q: str = Field(
        description="Keywords to match, plus optional 'language:<name>' filters"
    )
    sort: Optional[Literal["updated"]] = None
    order: Optional[Literal["asc", "desc"]] = None
