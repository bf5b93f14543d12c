"""Branch reference resolution, creation and update"""

import logging
from typing import Optional

from ..constants import GitObjectDefaults
from ..error_handling import (
    BranchNotFoundError,
    InvalidInputError,
    NotFoundError,
    ReferenceNotFoundError,
    parse_response,
)
from ..types.github_types import GitHubReference
from .client import GitHubClient, repo_endpoint

logger = logging.getLogger(__name__)


def branch_ref(branch: str) -> str:
    """Turn a branch name into the ref path the Git Data API expects.

    Only branch names are accepted: ``main`` -> ``heads/main`` and
    ``refs/heads/main`` -> ``heads/main``. A name without the ``refs/`` prefix
    is always taken literally, so a branch called ``heads/x`` maps to
    ``heads/heads/x``.

    Raises:
        InvalidInputError: ``branch`` is a qualified ref outside ``refs/heads/``
    """
    if branch.startswith("refs/"):
        qualified = branch[len("refs/"):]
        if not qualified.startswith(GitObjectDefaults.HEADS_PREFIX):
            raise InvalidInputError(f"Not a branch reference: {branch}")
        return qualified
    return f"{GitObjectDefaults.HEADS_PREFIX}{branch}"


async def get_reference(client: GitHubClient, owner: str, repo: str, ref: str) -> GitHubReference:
    """Read exactly the reference ``ref``, such as ``heads/main``.

    Uses the single-ref endpoint; the ``git/refs/`` listing would answer a
    missing name with the refs that merely share its prefix.

    Raises:
        NotFoundError: The reference does not exist
    """
    data = await client.get(repo_endpoint(owner, repo, "git/ref", ref))
    if isinstance(data, list):
        raise NotFoundError(f"Reference '{ref}' not found", 404)
    return parse_response(GitHubReference, data)


async def get_branch_sha(client: GitHubClient, owner: str, repo: str, branch: str) -> str:
    """Return the commit SHA at the tip of ``branch``.

    Raises:
        BranchNotFoundError: The branch does not exist
    """
    try:
        reference = await get_reference(client, owner, repo, branch_ref(branch))
    except NotFoundError as e:
        raise BranchNotFoundError(
            f"Branch '{branch}' not found in {owner}/{repo}", e.status
        ) from e
    return reference.sha


async def resolve_default_branch_sha(client: GitHubClient, owner: str, repo: str) -> str:
    """Return the tip SHA of the repository's default branch.

    Tries each name in ``GitObjectDefaults.DEFAULT_BRANCH_CANDIDATES`` in turn;
    only a not-found moves on to the next name, any other failure propagates.
    Nothing is cached.

    Raises:
        ReferenceNotFoundError: None of the candidate branches exist
    """
    candidates = GitObjectDefaults.DEFAULT_BRANCH_CANDIDATES
    for name in candidates:
        try:
            reference = await get_reference(client, owner, repo, branch_ref(name))
        except NotFoundError:
            logger.debug(f"No '{name}' branch in {owner}/{repo}")
            continue
        logger.debug(f"Default branch of {owner}/{repo} resolved to '{name}' at {reference.sha}")
        return reference.sha

    tried = " and ".join(f"'{name}'" for name in candidates)
    raise ReferenceNotFoundError(f"Could not find default branch (tried {tried})", 404)


async def create_branch(
    client: GitHubClient,
    owner: str,
    repo: str,
    branch: str,
    from_branch: Optional[str] = None,
) -> GitHubReference:
    """Create ``branch`` pointing at the tip of ``from_branch`` or the default branch.

    Raises:
        BranchNotFoundError: ``from_branch`` does not exist
        ReferenceNotFoundError: No ``from_branch`` given and no default branch found
        ConflictError: ``branch`` already exists
    """
    if from_branch:
        sha = await get_branch_sha(client, owner, repo, from_branch)
    else:
        sha = await resolve_default_branch_sha(client, owner, repo)

    logger.info(f"Creating branch '{branch}' in {owner}/{repo} at {sha}")
    data = await client.post(
        repo_endpoint(owner, repo, "git/refs"),
        json={"ref": f"refs/{branch_ref(branch)}", "sha": sha},
    )
    return parse_response(GitHubReference, data)


async def update_reference(
    client: GitHubClient,
    owner: str,
    repo: str,
    ref: str,
    sha: str,
    force: bool = False,
) -> GitHubReference:
    """Move ``ref`` to ``sha``.

    With ``force=False`` the remote only accepts a fast-forward move.

    Raises:
        ConflictError: The move is not a fast-forward and ``force`` is off
        NotFoundError: The reference does not exist
    """
    logger.debug(f"Updating {ref} in {owner}/{repo} to {sha} (force={force})")
    data = await client.patch(
        repo_endpoint(owner, repo, "git/refs", ref),
        json={"sha": sha, "force": force},
    )
    return parse_response(GitHubReference, data)
