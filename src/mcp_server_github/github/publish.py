"""Publish a batch of file changes as one commit on a branch.

The branch reference is the only thing a reader observes, and it is moved last
and never forced. A failure at any step leaves the branch where it was; trees
or commits already created stay in the object store unreferenced.
"""

import logging
from typing import Sequence

from ..error_handling import InvalidInputError
from ..types.github_types import GitHubReference
from .client import GitHubClient
from .git_data import create_commit, create_tree
from .models import FileOperation
from .refs import branch_ref, get_branch_sha, update_reference

logger = logging.getLogger(__name__)


def validate_file_path(path: str) -> None:
    """Reject paths the tree API cannot store.

    Raises:
        InvalidInputError: Empty path, leading/trailing slash, or an empty,
            ``.`` or ``..`` component
    """
    if not path or not path.strip():
        raise InvalidInputError("File path must not be empty")
    if path.startswith("/") or path.endswith("/"):
        raise InvalidInputError(f"File path must be relative to the repository root: '{path}'")
    for component in path.split("/"):
        if component in ("", ".", ".."):
            raise InvalidInputError(f"File path has an invalid component: '{path}'")


def validate_batch(files: Sequence[FileOperation]) -> None:
    if not files:
        raise InvalidInputError("At least one file is required")
    seen = set()
    for file in files:
        validate_file_path(file.path)
        if file.path in seen:
            raise InvalidInputError(f"File path appears more than once: '{file.path}'")
        seen.add(file.path)


async def push_files(
    client: GitHubClient,
    owner: str,
    repo: str,
    branch: str,
    files: Sequence[FileOperation],
    message: str,
) -> GitHubReference:
    """Commit ``files`` to ``branch`` in a single commit.

    Steps, each depending on the previous one's result:
        1. read the branch tip
        2. create a tree with the files on top of the tip
        3. create a commit of that tree whose only parent is the tip
        4. fast-forward the branch to the new commit

    Returns:
        The updated branch reference

    Raises:
        InvalidInputError: The batch is empty or holds an invalid path;
            nothing is sent to the API
        BranchNotFoundError: ``branch`` does not exist
        ConflictError: The branch moved since step 1
    """
    validate_batch(files)

    latest_commit_sha = await get_branch_sha(client, owner, repo, branch)
    logger.debug(f"Publishing {len(files)} file(s) on '{branch}' at {latest_commit_sha}")

    # a commit SHA is accepted as base tree and resolved to its tree by the API
    tree = await create_tree(client, owner, repo, files, base_tree=latest_commit_sha)
    commit = await create_commit(client, owner, repo, message, tree.sha, [latest_commit_sha])
    reference = await update_reference(
        client, owner, repo, branch_ref(branch), commit.sha, force=False
    )

    logger.info(
        f"Pushed {len(files)} file(s) to {owner}/{repo}@{branch}: "
        f"{latest_commit_sha[:8]} -> {commit.sha[:8]}"
    )
    return reference
