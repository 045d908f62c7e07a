"""GitHub REST transport tests."""

from __future__ import annotations

import httpx
import pytest
from github_rest_mcp.config import LimitsConfig
from github_rest_mcp.errors import UNKNOWN_ERROR, GitHubAPIError
from github_rest_mcp.rest_client import GitHubRequestError, GitHubRestClient


def _client(handler, *, api_base_url: str = "https://api.github.com") -> GitHubRestClient:
    async def token_provider() -> str:
        return "tok"

    return GitHubRestClient(
        token_provider=token_provider,
        limits=LimitsConfig(),
        api_base_url=api_base_url,
        transport=httpx.MockTransport(handler),
    )


@pytest.mark.asyncio
async def test_sends_bearer_auth_and_api_headers() -> None:
    seen: dict[str, str | None] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["auth"] = request.headers.get("Authorization")
        seen["accept"] = request.headers.get("Accept")
        seen["version"] = request.headers.get("X-GitHub-Api-Version")
        return httpx.Response(200, json={"ok": True})

    out = await _client(handler).request("GET", "/repos/octo/repo")

    assert out == {"ok": True}
    assert seen["url"] == "https://api.github.com/repos/octo/repo"
    assert seen["auth"] == "Bearer tok"
    assert seen["accept"] == "application/vnd.github+json"
    assert seen["version"] == "2022-11-28"


@pytest.mark.asyncio
async def test_enterprise_base_url_is_used() -> None:
    seen: dict[str, str] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        return httpx.Response(200, json={})

    _ = await _client(handler, api_base_url="https://ghe.example.com/api/v3/").request("GET", "/user")

    assert seen["url"] == "https://ghe.example.com/api/v3/user"


@pytest.mark.asyncio
async def test_none_query_params_are_dropped() -> None:
    seen: dict[str, dict[str, str]] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["params"] = dict(request.url.params)
        return httpx.Response(200, json=[])

    _ = await _client(handler).request("GET", "/repos/octo/repo/commits", params={"sha": None, "per_page": 10})

    assert seen["params"] == {"per_page": "10"}


@pytest.mark.asyncio
async def test_error_status_raises_request_error_with_payload() -> None:
    def handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, json={"message": "Not Found", "documentation_url": "https://docs.github.com"})

    with pytest.raises(GitHubRequestError) as exc:
        _ = await _client(handler).request("GET", "/repos/octo/missing")

    assert exc.value.status == 404
    assert exc.value.message == "Not Found"
    assert exc.value.response_data["documentation_url"] == "https://docs.github.com"


@pytest.mark.asyncio
async def test_error_without_json_body_gets_default_message() -> None:
    def handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(502, text="Bad gateway")

    with pytest.raises(GitHubRequestError) as exc:
        _ = await _client(handler).request("GET", "/user")

    assert exc.value.status == 502
    assert exc.value.message == "GitHub API request failed"


@pytest.mark.asyncio
async def test_no_content_returns_none() -> None:
    def handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(204)

    assert await _client(handler).request("DELETE", "/repos/octo/repo") is None


@pytest.mark.asyncio
async def test_text_body_is_returned_as_text() -> None:
    def handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="plain body")

    assert await _client(handler).request("GET", "/octocat") == "plain body"


@pytest.mark.asyncio
async def test_invalid_json_raises_unknown_error() -> None:
    def handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=b"{not json", headers={"content-type": "application/json"})

    with pytest.raises(GitHubAPIError) as exc:
        _ = await _client(handler).request("GET", "/user")

    assert exc.value.code == UNKNOWN_ERROR


@pytest.mark.asyncio
async def test_redirects_are_not_followed_by_plain_requests() -> None:
    def handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(302, headers={"Location": "https://example.com/elsewhere"})

    with pytest.raises(GitHubRequestError) as exc:
        _ = await _client(handler).request("GET", "/repos/octo/repo")

    assert exc.value.status == 302


@pytest.mark.asyncio
async def test_request_redirect_returns_location() -> None:
    def handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(302, headers={"Location": "https://objects.example.com/logs.zip"})

    out = await _client(handler).request_redirect("GET", "/repos/octo/repo/actions/runs/1/logs")

    assert out == {"url": "https://objects.example.com/logs.zip"}


@pytest.mark.asyncio
async def test_request_redirect_propagates_errors() -> None:
    def handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(410, json={"message": "Gone"})

    with pytest.raises(GitHubRequestError) as exc:
        _ = await _client(handler).request_redirect("GET", "/repos/octo/repo/actions/artifacts/1/zip")

    assert exc.value.status == 410
