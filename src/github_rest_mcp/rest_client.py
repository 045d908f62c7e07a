"""GitHub REST transport.

Provides:
- bearer authentication from a token provider
- configurable API host (github.com or GitHub Enterprise Server)
- finite timeouts, no automatic redirects, no retries
- upstream failures raised as `GitHubRequestError` with status and payload
"""

from __future__ import annotations

import json
from typing import Any

import httpx

from .auth import TokenProvider
from .config import DEFAULT_API_BASE_URL, LimitsConfig
from .errors import UNKNOWN_ERROR, GitHubAPIError

USER_AGENT = "github-rest-mcp"


class GitHubRequestError(Exception):
    """GitHub answered with a non-success status.

    Mirrors the shape the error normalizer understands: `status`, `message` and
    the decoded `response_data` (if the body was JSON).
    """

    def __init__(self, status: int, message: str, response_data: Any = None) -> None:
        super().__init__(message)
        self.status = status
        self.message = message
        self.response_data = response_data


def _drop_none(params: dict[str, Any] | None) -> dict[str, Any] | None:
    if params is None:
        return None
    return {k: v for k, v in params.items() if v is not None}


def _decode_body(resp: httpx.Response) -> Any:
    if resp.status_code == 204 or not resp.content:
        return None
    content_type = resp.headers.get("content-type", "")
    if "json" not in content_type:
        return resp.text
    try:
        return resp.json()
    except json.JSONDecodeError as exc:
        raise GitHubAPIError(message="GitHub returned invalid JSON", code=UNKNOWN_ERROR) from exc


def _error_from_response(resp: httpx.Response) -> GitHubRequestError:
    payload: Any = None
    try:
        payload = resp.json()
    except Exception:  # pylint: disable=broad-exception-caught
        payload = resp.text or None

    message = "GitHub API request failed"
    if isinstance(payload, dict) and isinstance(payload.get("message"), str) and payload["message"]:
        message = payload["message"]
    return GitHubRequestError(status=resp.status_code, message=message, response_data=payload)


class GitHubRestClient:
    """Minimal GitHub REST client shared by every resource operation.

    Holds no per-call state, so one instance can serve concurrent calls.
    """

    def __init__(
        self,
        *,
        token_provider: TokenProvider,
        limits: LimitsConfig,
        api_base_url: str = DEFAULT_API_BASE_URL,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Create a GitHub REST client.

        Args:
            token_provider: Async callable that returns a bearer token.
            limits: Timeouts for each request.
            api_base_url: https://api.github.com or an enterprise `/api/v3` URL.
            transport: Optional httpx transport for tests.
        """
        self._token_provider = token_provider
        self._limits = limits
        self._api_base_url = api_base_url.rstrip("/")
        self._transport = transport

    @property
    def api_base_url(self) -> str:
        return self._api_base_url

    def _headers(self, token: str, *, accept: str | None, content_type: str | None) -> dict[str, str]:
        headers = {
            "Authorization": f"Bearer {token}",
            "Accept": accept or "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
            "User-Agent": USER_AGENT,
        }
        if content_type:
            headers["Content-Type"] = content_type
        return headers

    async def _send(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None,
        json_body: Any,
        content: bytes | None,
        content_type: str | None,
        accept: str | None,
        base_url: str | None,
    ) -> httpx.Response:
        token = await self._token_provider()
        url = f"{(base_url or self._api_base_url).rstrip('/')}{path}"
        timeout = httpx.Timeout(
            timeout=self._limits.total_timeout_s,
            connect=self._limits.connect_timeout_s,
            read=self._limits.read_timeout_s,
        )

        async with httpx.AsyncClient(follow_redirects=False, timeout=timeout, transport=self._transport) as client:
            return await client.request(
                method,
                url,
                headers=self._headers(token, accept=accept, content_type=content_type),
                params=_drop_none(params),
                json=json_body,
                content=content,
            )

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json_body: Any = None,
        content: bytes | None = None,
        content_type: str | None = None,
        accept: str | None = None,
        base_url: str | None = None,
    ) -> Any:
        """Make a request and return the decoded body.

        Returns decoded JSON (object or array), text for non-JSON bodies, or None
        for empty responses such as 204 No Content.

        Raises:
            GitHubRequestError: GitHub answered with a status >= 300.
            httpx.HTTPError: The request never produced a response.
        """
        resp = await self._send(
            method,
            path,
            params=params,
            json_body=json_body,
            content=content,
            content_type=content_type,
            accept=accept,
            base_url=base_url,
        )
        if resp.status_code >= 300:
            raise _error_from_response(resp)
        return _decode_body(resp)

    async def request_redirect(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """Make a request to an endpoint that answers with a download redirect.

        Returns `{"url": <Location>}` for a 3xx answer, otherwise the decoded body.
        """
        resp = await self._send(
            method,
            path,
            params=params,
            json_body=None,
            content=None,
            content_type=None,
            accept=None,
            base_url=None,
        )
        if 300 <= resp.status_code < 400 and resp.headers.get("location"):
            return {"url": resp.headers["location"]}
        if resp.status_code >= 300:
            raise _error_from_response(resp)
        return _decode_body(resp)
