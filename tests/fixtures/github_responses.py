"""
GitHub API response fixtures for testing.

Provides payloads shaped like real GitHub REST API responses so the
forwarding operations can be tested without actual API requests.
"""

import base64
from typing import Any, Dict, List, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest


class GitHubResponseFactory:
    """Factory for creating mock GitHub API responses."""

    @staticmethod
    def user_response(login: str = "testuser") -> Dict[str, Any]:
        """Create a mock user response."""
        return {
            "login": login,
            "id": 12345,
            "type": "User",
            "html_url": f"https://github.com/{login}",
            "avatar_url": f"https://github.com/{login}.png",
        }

    @staticmethod
    def repository_response(name: str = "test-repo", owner: str = "testuser") -> Dict[str, Any]:
        """Create a mock repository response."""
        return {
            "id": 67890,
            "name": name,
            "full_name": f"{owner}/{name}",
            "owner": GitHubResponseFactory.user_response(owner),
            "private": False,
            "description": f"Test repository {name}",
            "fork": False,
            "html_url": f"https://github.com/{owner}/{name}",
            "default_branch": "main",
            "stargazers_count": 42,
        }

    @staticmethod
    def fork_response(name: str = "test-repo", owner: str = "forker", upstream: str = "testuser") -> Dict[str, Any]:
        fork = GitHubResponseFactory.repository_response(name, owner)
        fork["fork"] = True
        fork["parent"] = GitHubResponseFactory.repository_response(name, upstream)
        fork["source"] = GitHubResponseFactory.repository_response(name, upstream)
        return fork

    @staticmethod
    def reference_response(ref: str = "heads/main", sha: str = "a" * 40) -> Dict[str, Any]:
        """Create a mock git reference response."""
        return {
            "ref": f"refs/{ref}",
            "node_id": "REF_kwDOA",
            "url": f"https://api.github.com/repos/testuser/test-repo/git/refs/{ref}",
            "object": {
                "sha": sha,
                "type": "commit",
                "url": f"https://api.github.com/repos/testuser/test-repo/git/commits/{sha}",
            },
        }

    @staticmethod
    def tree_response(sha: str = "b" * 40, paths: Optional[List[str]] = None) -> Dict[str, Any]:
        return {
            "sha": sha,
            "url": f"https://api.github.com/repos/testuser/test-repo/git/trees/{sha}",
            "tree": [
                {"path": path, "mode": "100644", "type": "blob", "sha": "c" * 40, "size": 12}
                for path in (paths or ["README.md"])
            ],
            "truncated": False,
        }

    @staticmethod
    def git_commit_response(
        sha: str = "d" * 40, tree: str = "b" * 40, parents: Optional[List[str]] = None, message: str = "Test commit"
    ) -> Dict[str, Any]:
        """Create a mock git data commit response."""
        actor = {"name": "Test User", "email": "test@example.com", "date": "2023-12-01T12:00:00Z"}
        return {
            "sha": sha,
            "node_id": "C_kwDOA",
            "url": f"https://api.github.com/repos/testuser/test-repo/git/commits/{sha}",
            "message": message,
            "tree": {"sha": tree, "url": f"https://api.github.com/repos/testuser/test-repo/git/trees/{tree}"},
            "parents": [{"sha": parent, "url": ""} for parent in (parents if parents is not None else ["a" * 40])],
            "author": actor,
            "committer": actor,
        }

    @staticmethod
    def commit_response(sha: str = "abc123def456") -> Dict[str, Any]:
        """Create a mock list-commits entry."""
        return {
            "sha": sha,
            "node_id": "C_kwDOB",
            "commit": {
                "message": "Test commit message",
                "author": {"name": "Test User", "email": "test@example.com", "date": "2023-12-01T12:00:00Z"},
                "committer": {"name": "Test User", "email": "test@example.com", "date": "2023-12-01T12:00:00Z"},
            },
            "url": f"https://api.github.com/repos/testuser/test-repo/commits/{sha}",
            "html_url": f"https://github.com/testuser/test-repo/commit/{sha}",
            "parents": [],
            "author": GitHubResponseFactory.user_response(),
        }

    @staticmethod
    def file_content_response(path: str = "README.md", text: str = "# Test Repository\n", sha: str = "e" * 40) -> Dict[str, Any]:
        """Create a mock contents response for a file, base64 wrapped like the API does."""
        encoded = base64.b64encode(text.encode("utf-8")).decode("ascii")
        wrapped = "\n".join(encoded[i:i + 60] for i in range(0, len(encoded), 60)) + "\n"
        return {
            "type": "file",
            "encoding": "base64",
            "size": len(text.encode("utf-8")),
            "name": path.rsplit("/", 1)[-1],
            "path": path,
            "content": wrapped,
            "sha": sha,
            "url": f"https://api.github.com/repos/testuser/test-repo/contents/{path}",
            "git_url": None,
            "html_url": f"https://github.com/testuser/test-repo/blob/main/{path}",
            "download_url": f"https://raw.githubusercontent.com/testuser/test-repo/main/{path}",
            "_links": {"self": f"https://api.github.com/repos/testuser/test-repo/contents/{path}"},
        }

    @staticmethod
    def directory_response(entries: Optional[List[tuple]] = None) -> List[Dict[str, Any]]:
        """Create a mock contents response for a directory: ``(path, type)`` pairs."""
        entries = entries or [("docs", "dir"), ("README.md", "file")]
        return [
            {
                "type": kind,
                "size": 0 if kind == "dir" else 18,
                "name": path.rsplit("/", 1)[-1],
                "path": path,
                "sha": f"{index:040d}",
                "url": f"https://api.github.com/repos/testuser/test-repo/contents/{path}",
            }
            for index, (path, kind) in enumerate(entries)
        ]

    @staticmethod
    def issue_response(number: int = 1, state: str = "open", title: str = "Test issue") -> Dict[str, Any]:
        return {
            "id": 1000 + number,
            "number": number,
            "title": title,
            "state": state,
            "html_url": f"https://github.com/testuser/test-repo/issues/{number}",
            "body": "Something is broken",
            "user": GitHubResponseFactory.user_response(),
            "labels": [{"id": 1, "name": "bug", "color": "d73a4a"}],
            "assignees": [],
            "milestone": None,
            "comments": 0,
            "created_at": "2023-11-01T00:00:00Z",
            "updated_at": "2023-12-01T00:00:00Z",
            "closed_at": None,
        }

    @staticmethod
    def issue_comment_response(body: str = "Looks good") -> Dict[str, Any]:
        return {
            "id": 555,
            "body": body,
            "user": GitHubResponseFactory.user_response(),
            "html_url": "https://github.com/testuser/test-repo/issues/1#issuecomment-555",
            "created_at": "2023-12-01T00:00:00Z",
        }

    @staticmethod
    def pull_request_response(number: int = 1, state: str = "open") -> Dict[str, Any]:
        """Create a mock pull request response."""
        return {
            "id": 123456,
            "number": number,
            "state": state,
            "title": f"Test Pull Request #{number}",
            "body": "This is a test pull request",
            "html_url": f"https://github.com/testuser/test-repo/pull/{number}",
            "user": GitHubResponseFactory.user_response(),
            "head": {"label": "testuser:feature-branch", "ref": "feature-branch", "sha": "abc123def456"},
            "base": {"label": "testuser:main", "ref": "main", "sha": "def456abc123"},
            "draft": False,
            "merged": False,
            "mergeable_state": "clean",
        }

    @staticmethod
    def gist_response(
        gist_id: str = "aa5a315d61ae9438b18d",
        description: Optional[str] = "Hello world examples",
        files: Optional[Dict[str, str]] = None,
        updated_at: str = "2023-12-01T00:00:00Z",
    ) -> Dict[str, Any]:
        """Create a mock gist; ``files`` maps file names to languages."""
        files = files if files is not None else {"hello_world.py": "Python"}
        return {
            "id": gist_id,
            "description": description,
            "public": True,
            "html_url": f"https://gist.github.com/{gist_id}",
            "files": {
                name: {
                    "filename": name,
                    "type": "text/plain",
                    "language": language,
                    "raw_url": f"https://gist.githubusercontent.com/raw/{name}",
                    "size": 100,
                }
                for name, language in files.items()
            },
            "created_at": "2023-11-01T00:00:00Z",
            "updated_at": updated_at,
        }

    @staticmethod
    def search_response(items: Optional[List[Dict[str, Any]]] = None) -> Dict[str, Any]:
        items = items if items is not None else [GitHubResponseFactory.repository_response()]
        return {"total_count": len(items), "incomplete_results": False, "items": items}


@pytest.fixture
def github_response_factory():
    """Provide access to GitHubResponseFactory."""
    return GitHubResponseFactory


@pytest.fixture
def mock_github_client():
    """Create a mock GitHub client whose request methods are awaitable."""
    client = MagicMock()
    client.get = AsyncMock()
    client.post = AsyncMock()
    client.patch = AsyncMock()
    client.put = AsyncMock()
    return client
