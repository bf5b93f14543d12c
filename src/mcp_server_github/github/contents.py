"""File contents: read a file or directory, write a single file"""

import base64
import binascii
import logging
from typing import Optional, Union

from ..error_handling import NotFoundError, parse_response, parse_response_list
from ..types.github_types import (
    GitHubCreateUpdateFileResponse,
    GitHubDirectoryEntry,
    GitHubFileContent,
)
from .client import GitHubClient, repo_endpoint

logger = logging.getLogger(__name__)

FileContents = Union[GitHubFileContent, list[GitHubDirectoryEntry]]


def decode_content(file: GitHubFileContent) -> GitHubFileContent:
    """Return ``file`` with base64 content decoded to UTF-8 text.

    Content that is not valid UTF-8 is returned untouched, still base64.
    """
    if file.encoding != "base64" or file.content is None:
        return file
    try:
        # the API wraps base64 payloads at 60 characters
        raw = base64.b64decode("".join(file.content.split()), validate=True)
        text = raw.decode("utf-8")
    except (binascii.Error, UnicodeDecodeError):
        logger.debug(f"Leaving {file.path} base64-encoded (not UTF-8 text)")
        return file
    return file.model_copy(update={"content": text, "encoding": "utf-8"})


async def get_file_contents(
    client: GitHubClient,
    owner: str,
    repo: str,
    path: str,
    ref: Optional[str] = None,
) -> FileContents:
    """Fetch a file, or the listing of a directory, at ``path``.

    Returns:
        A list of entries, in the order the API returns them, when ``path`` is a
        directory; otherwise the single file with its content decoded

    Raises:
        NotFoundError: ``path`` does not exist at ``ref``
    """
    data = await client.get(
        repo_endpoint(owner, repo, "contents", path),
        params={"ref": ref},
    )
    if isinstance(data, list):
        return parse_response_list(GitHubDirectoryEntry, data)
    return decode_content(parse_response(GitHubFileContent, data))


async def create_or_update_file(
    client: GitHubClient,
    owner: str,
    repo: str,
    path: str,
    content: str,
    message: str,
    branch: str,
    sha: Optional[str] = None,
) -> GitHubCreateUpdateFileResponse:
    """Create or overwrite a single file with one conditional write.

    When ``sha`` is not supplied the current blob SHA at ``(path, branch)`` is
    looked up; a missing file means the write creates it. Only a not-found
    lookup is treated as "no existing file", every other failure propagates.

    Raises:
        ConflictError: ``sha`` (given or looked up) is no longer current
    """
    current_sha = sha
    if current_sha is None:
        try:
            existing = await get_file_contents(client, owner, repo, path, branch)
        except NotFoundError:
            logger.debug(f"{path} does not exist on '{branch}', creating it")
        else:
            if not isinstance(existing, list):
                current_sha = existing.sha

    body = {
        "message": message,
        "content": base64.b64encode(content.encode("utf-8")).decode("ascii"),
        "branch": branch,
    }
    if current_sha:
        body["sha"] = current_sha

    logger.info(
        f"{'Updating' if current_sha else 'Creating'} {path} on '{branch}' in {owner}/{repo}"
    )
    data = await client.put(repo_endpoint(owner, repo, "contents", path), json=body)
    return parse_response(GitHubCreateUpdateFileResponse, data)
