"""Git data objects: trees and commits"""

import logging
from typing import Iterable, Optional, Sequence

from ..constants import GitObjectDefaults
from ..error_handling import parse_response
from ..types.github_types import GitHubCommit, GitHubTree, TreeEntry
from .client import GitHubClient, repo_endpoint
from .models import FileOperation

logger = logging.getLogger(__name__)


def tree_entries(files: Iterable[FileOperation]) -> list[TreeEntry]:
    return [
        TreeEntry(
            path=file.path,
            mode=GitObjectDefaults.BLOB_MODE,
            type=GitObjectDefaults.BLOB_TYPE,
            content=file.content,
        )
        for file in files
    ]


async def create_tree(
    client: GitHubClient,
    owner: str,
    repo: str,
    files: Sequence[FileOperation],
    base_tree: Optional[str] = None,
) -> GitHubTree:
    """Create a tree holding ``files`` as regular blobs, layered on ``base_tree``.

    All entries go to the API in a single call, so either every entry is
    accepted or none is. ``base_tree`` may be a tree or a commit SHA.
    """
    body = {"tree": [entry.model_dump(exclude_none=True) for entry in tree_entries(files)]}
    if base_tree:
        body["base_tree"] = base_tree

    logger.debug(f"Creating tree with {len(files)} entries on base {base_tree}")
    data = await client.post(repo_endpoint(owner, repo, "git/trees"), json=body)
    return parse_response(GitHubTree, data)


async def create_commit(
    client: GitHubClient,
    owner: str,
    repo: str,
    message: str,
    tree: str,
    parents: Sequence[str],
) -> GitHubCommit:
    """Create a commit object for ``tree`` with the given parent commits."""
    logger.debug(f"Creating commit for tree {tree} with parents {list(parents)}")
    data = await client.post(
        repo_endpoint(owner, repo, "git/commits"),
        json={"message": message, "tree": tree, "parents": list(parents)},
    )
    return parse_response(GitHubCommit, data)
