"""Typed API errors, failure normalization, and envelope helpers.

Every failure that leaves the resource client is a `GitHubAPIError`. The dispatch
layer is the only place such errors are turned into response envelopes.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)

METHOD_NOT_FOUND = "METHOD_NOT_FOUND"
UNKNOWN_ERROR = "UNKNOWN_ERROR"
INTERNAL_ERROR = "INTERNAL_ERROR"
VALIDATION_ERROR = "VALIDATION_ERROR"
CONFIG_ERROR = "CONFIG_ERROR"


@dataclass(frozen=True, slots=True)
class GitHubAPIError(Exception):
    """A normalized GitHub API failure.

    `code` is a stable discriminator (`HTTP_404`, `UNKNOWN_ERROR`, ...). `details`
    carries the upstream diagnostic payload when one is available.
    """

    message: str
    code: str
    status_code: int | None = None
    details: Any = None

    def __str__(self) -> str:
        return self.message


def _status_of(candidate: object) -> int | None:
    if isinstance(candidate, Mapping):
        status = candidate.get("status")
    else:
        status = getattr(candidate, "status", None)
        if status is None:
            response = getattr(candidate, "response", None)
            status = getattr(response, "status_code", None)
    if isinstance(status, bool) or not isinstance(status, int) or status <= 0:
        return None
    return status


def _message_of(candidate: object) -> str | None:
    if isinstance(candidate, Mapping):
        message = candidate.get("message")
    else:
        message = getattr(candidate, "message", None)
        if message is None and isinstance(candidate, BaseException):
            message = str(candidate)
    if isinstance(message, str) and message:
        return message
    return None


def _response_data_of(candidate: object) -> Any:
    if isinstance(candidate, Mapping):
        response = candidate.get("response")
        return response.get("data") if isinstance(response, Mapping) else None

    data = getattr(candidate, "response_data", None)
    if data is not None:
        return data

    response = getattr(candidate, "response", None)
    if response is None:
        return None
    data = getattr(response, "data", None)
    if data is not None:
        return data
    # httpx.Response carries the payload behind .json()
    json_fn = getattr(response, "json", None)
    if callable(json_fn):
        try:
            return json_fn()
        except Exception:  # pylint: disable=broad-exception-caught
            return None
    return None


def handle_error(candidate: object) -> GitHubAPIError:
    """Normalize any failure into a `GitHubAPIError`.

    Already-normalized errors are returned as-is, so applying this twice is the
    same as applying it once.
    """
    logger.error("API error occurred: %r", candidate)

    if isinstance(candidate, GitHubAPIError):
        return candidate

    status = _status_of(candidate)
    if status is not None:
        return GitHubAPIError(
            message=_message_of(candidate) or "GitHub API request failed",
            code=f"HTTP_{status}",
            status_code=status,
            details=_response_data_of(candidate),
        )

    return GitHubAPIError(
        message=_message_of(candidate) or "Unknown error occurred",
        code=UNKNOWN_ERROR,
        status_code=None,
        details=candidate,
    )


def to_success_result(data: Any) -> dict[str, Any]:
    """Build a standard success envelope."""
    return {"success": True, "data": data}


def to_error_result(*, code: str, message: str, details: Any = None) -> dict[str, Any]:
    """Build a standard error envelope."""
    error: dict[str, Any] = {"code": code, "message": message}
    if details is not None:
        error["details"] = details
    return {"success": False, "error": error}


def method_not_found_error(method: str) -> dict[str, Any]:
    """Error for a method name with no registered handler."""
    return to_error_result(code=METHOD_NOT_FOUND, message=f"Method '{method}' not found")


def validation_error(message: str) -> GitHubAPIError:
    """Error for parameters that do not match an operation's declared schema."""
    return GitHubAPIError(message=message, code=VALIDATION_ERROR)
