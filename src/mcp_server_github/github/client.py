"""GitHub API client and authentication"""

import logging
import re
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Any, AsyncIterator, Mapping, Optional
from urllib.parse import quote

import aiohttp

from ..configuration import GitHubConfig
from ..error_handling import error_from_response

logger = logging.getLogger(__name__)


def repo_endpoint(owner: str, repo: str, *parts: str) -> str:
    """Build ``/repos/{owner}/{repo}/...``; each part keeps its slashes."""
    path = f"/repos/{quote(owner, safe='')}/{quote(repo, safe='')}"
    for part in parts:
        path += "/" + quote(part.strip("/"), safe="/")
    return path


@dataclass
class GitHubClient:
    """GitHub API client bound to one configuration and one HTTP session."""

    config: GitHubConfig
    session: aiohttp.ClientSession

    def __post_init__(self):
        """Validate GitHub token format"""
        if not self._is_valid_github_token(self.config.token):
            logger.warning("⚠️ GitHub token format appears invalid")

    @staticmethod
    def _is_valid_github_token(token: str) -> bool:
        """Validate GitHub token format"""
        if not token or len(token.strip()) == 0:
            return False

        # GitHub token patterns
        patterns = [
            r"^ghp_[a-zA-Z0-9]{36}$",  # Personal access tokens (classic)
            r"^github_pat_[a-zA-Z0-9_]{82}$",  # Fine-grained personal access tokens
            r"^ghs_[a-zA-Z0-9]{36}$",  # GitHub App installation tokens
            r"^ghu_[a-zA-Z0-9]{36}$",  # GitHub App user tokens
        ]

        return any(re.match(pattern, token.strip()) for pattern in patterns)

    @property
    def headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.config.token}",
            "Accept": self.config.accept,
            "User-Agent": self.config.user_agent,
        }

    def _url(self, endpoint: str) -> str:
        return f"{self.config.api_url}/{endpoint.lstrip('/')}"

    @staticmethod
    def _query_params(params: Optional[Mapping[str, Any]]) -> Optional[dict[str, str]]:
        """Drop unset values and render the rest the way the API expects"""
        if not params:
            return None
        rendered = {}
        for key, value in params.items():
            if value is None:
                continue
            if isinstance(value, bool):
                rendered[key] = "true" if value else "false"
            else:
                rendered[key] = str(value)
        return rendered or None

    @staticmethod
    async def _read_payload(response: aiohttp.ClientResponse) -> Any:
        if response.status == 204:
            return None
        try:
            return await response.json(content_type=None)
        except ValueError:
            return await response.text()

    async def request(
        self,
        method: str,
        endpoint: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        json: Any = None,
    ) -> Any:
        """Send one request and return the decoded JSON body.

        Raises:
            GitHubError: The response status is not 2xx
        """
        url = self._url(endpoint)
        logger.debug(f"{method} {url}")

        async with self.session.request(
            method,
            url,
            headers=self.headers,
            params=self._query_params(params),
            json=json,
        ) as response:
            payload = await self._read_payload(response)
            if not 200 <= response.status < 300:
                error = error_from_response(
                    response.status, payload, response.headers, response.reason or ""
                )
                logger.debug(f"{method} {url} failed: {error}")
                raise error
            return payload

    async def get(self, endpoint: str, **kwargs) -> Any:
        """Make GET request to GitHub API"""
        return await self.request("GET", endpoint, **kwargs)

    async def post(self, endpoint: str, **kwargs) -> Any:
        """Make POST request to GitHub API"""
        return await self.request("POST", endpoint, **kwargs)

    async def patch(self, endpoint: str, **kwargs) -> Any:
        """Make PATCH request to GitHub API"""
        return await self.request("PATCH", endpoint, **kwargs)

    async def put(self, endpoint: str, **kwargs) -> Any:
        """Make PUT request to GitHub API"""
        return await self.request("PUT", endpoint, **kwargs)


@asynccontextmanager
async def open_github_client(config: GitHubConfig) -> AsyncIterator[GitHubClient]:
    """Create a client with its own HTTP session, closed on exit."""
    async with aiohttp.ClientSession() as session:
        logger.debug(f"✅ GitHub client ready for {config.api_url}")
        yield GitHubClient(config=config, session=session)
