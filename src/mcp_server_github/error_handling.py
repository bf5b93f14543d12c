"""Error taxonomy and response-to-exception mapping for MCP GitHub Server."""

import logging
from typing import Any, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

# 422 messages GitHub uses for optimistic-concurrency and fast-forward failures
_CONFLICT_MARKERS = (
    "fast forward",
    "fast-forward",
    "already exists",
    "does not match",
    "wasn't supplied",
)


class GitHubError(Exception):
    """Base class for every failure raised by a GitHub operation."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status = status

    def __str__(self) -> str:
        if self.status is not None:
            return f"GitHub API error ({self.status}): {self.message}"
        return self.message


class NotFoundError(GitHubError):
    """The referenced remote object does not exist."""


class BranchNotFoundError(NotFoundError):
    """A branch whose tip was required does not exist."""


class ReferenceNotFoundError(NotFoundError):
    """No default branch reference could be resolved."""


class ConflictError(GitHubError):
    """Optimistic-concurrency or fast-forward violation."""


class RemoteError(GitHubError):
    """Any other non-success response, or a response of an unexpected shape."""


class RateLimitError(RemoteError):
    """The API refused the request because the rate limit is exhausted."""

    def __init__(self, message: str, status: Optional[int] = None, reset_at: Optional[int] = None):
        super().__init__(message, status)
        self.reset_at = reset_at


class InvalidInputError(GitHubError):
    """Tool arguments or a batch entry are malformed."""


class ConfigurationError(Exception):
    """Server configuration is missing or invalid."""


def _extract_message(payload: Any, default: str) -> str:
    if isinstance(payload, Mapping):
        message = payload.get("message")
        if message:
            errors = payload.get("errors")
            if errors:
                details = []
                for err in errors:
                    if isinstance(err, Mapping):
                        details.append(str(err.get("message") or err.get("code") or err))
                    else:
                        details.append(str(err))
                return f"{message} ({'; '.join(details)})"
            return str(message)
    if isinstance(payload, str) and payload.strip():
        return payload.strip()
    return default


def error_from_response(
    status: int,
    payload: Any = None,
    headers: Optional[Mapping[str, str]] = None,
    reason: str = "",
) -> GitHubError:
    """Build the exception matching a failed GitHub API response.

    Args:
        status: HTTP status code of the response
        payload: Decoded JSON body (or raw text) of the response, if any
        headers: Response headers, used for rate limit detection
        reason: HTTP reason phrase, used when the body carries no message

    Returns:
        An instance of the most specific GitHubError subclass
    """
    message = _extract_message(payload, reason or "Unknown error")
    headers = headers or {}

    if status == 404:
        return NotFoundError(message, status)
    if status == 409:
        return ConflictError(message, status)
    if status == 422 and any(marker in message.lower() for marker in _CONFLICT_MARKERS):
        return ConflictError(message, status)
    if status in (403, 429) and headers.get("x-ratelimit-remaining") == "0":
        reset = headers.get("x-ratelimit-reset")
        reset_at = int(reset) if reset and reset.isdigit() else None
        return RateLimitError(f"Rate limit exceeded: {message}", status, reset_at)
    return RemoteError(message, status)


def parse_response(model: Type[M], payload: Any) -> M:
    """Validate a decoded response body against a pydantic model."""
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        logger.debug(f"Response did not match {model.__name__}: {e}")
        raise RemoteError(
            f"Unexpected response shape for {model.__name__}: {e.error_count()} validation error(s)"
        ) from e


def parse_response_list(model: Type[M], payload: Any) -> list[M]:
    """Validate a decoded JSON array where every element is a ``model``."""
    if not isinstance(payload, list):
        raise RemoteError(
            f"Unexpected response shape: expected a list of {model.__name__}, "
            f"got {type(payload).__name__}"
        )
    return [parse_response(model, item) for item in payload]
