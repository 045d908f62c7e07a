"""Dispatch server tests.

These use an in-memory client stub; no HTTP is involved.
"""

from __future__ import annotations

import asyncio
from typing import Any

import pytest
from github_rest_mcp.catalog import TOOL_METADATA
from github_rest_mcp.dispatch import DispatchServer, Request, validate_tool_arguments
from github_rest_mcp.errors import VALIDATION_ERROR, GitHubAPIError


class DummyClient:
    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple[Any, ...], dict[str, Any]]] = []

    async def get_repository(self, owner: str, repo: str) -> dict[str, Any]:
        self.calls.append(("get_repository", (owner, repo), {}))
        await asyncio.sleep(0)
        return {"full_name": f"{owner}/{repo}"}

    async def list_labels(self, owner: str, repo: str, **kwargs: Any) -> dict[str, Any]:
        self.calls.append(("list_labels", (owner, repo), kwargs))
        return kwargs

    async def list_workflow_jobs(self, owner: str, repo: str, run_id: int, **kwargs: Any) -> dict[str, Any]:
        return {"run_id": run_id, **kwargs}

    async def get_issue(self, owner: str, repo: str, issue_number: int) -> dict[str, Any]:
        raise GitHubAPIError(message="Not Found", code="HTTP_404", status_code=404, details={"message": "Not Found"})

    async def get_authenticated_user(self) -> dict[str, Any]:
        raise RuntimeError("kaboom")

    async def get_pull_request(self, owner: str, repo: str, pull_number: int) -> dict[str, Any]:
        raise RuntimeError()

    async def check_collaborator(self, owner: str, repo: str, username: str) -> bool:
        return username == "hubot"

    async def delete_label(self, owner: str, repo: str, name: str) -> None:
        return None


def _server() -> tuple[DispatchServer, DummyClient]:
    client = DummyClient()
    return DispatchServer(client=client), client  # type: ignore[arg-type]


@pytest.mark.asyncio
async def test_unknown_method_returns_method_not_found() -> None:
    server, client = _server()

    out = await server.handle_request({"method": "github_does_not_exist", "params": {}})

    assert out == {
        "success": False,
        "error": {"code": "METHOD_NOT_FOUND", "message": "Method 'github_does_not_exist' not found"},
    }
    assert client.calls == []


@pytest.mark.asyncio
async def test_success_wraps_result() -> None:
    server, client = _server()

    out = await server.handle_request({"method": "github_get_repository", "params": {"owner": "octo", "repo": "r"}})

    assert out == {"success": True, "data": {"full_name": "octo/r"}}
    assert client.calls == [("get_repository", ("octo", "r"), {})]


@pytest.mark.asyncio
async def test_request_dataclass_is_accepted() -> None:
    server, _ = _server()

    out = await server.handle_request(Request(method="github_get_repository", params={"owner": "a", "repo": "b"}))

    assert out["success"] is True


@pytest.mark.asyncio
async def test_void_and_boolean_results_are_successes() -> None:
    server, _ = _server()

    deleted = await server.handle_request(
        {"method": "github_delete_label", "params": {"owner": "o", "repo": "r", "name": "bug"}}
    )
    member = await server.handle_request(
        {"method": "github_check_collaborator", "params": {"owner": "o", "repo": "r", "username": "nobody"}}
    )

    assert deleted == {"success": True, "data": None}
    assert member == {"success": True, "data": False}


@pytest.mark.asyncio
async def test_only_supplied_optionals_are_forwarded() -> None:
    server, client = _server()

    out = await server.handle_request(
        {"method": "github_list_labels", "params": {"owner": "o", "repo": "r", "per_page": 50, "page": None}}
    )

    assert out["data"] == {"per_page": 50}
    assert client.calls[0][2] == {"per_page": 50}


@pytest.mark.asyncio
async def test_reserved_parameter_names_are_mapped() -> None:
    server, _ = _server()

    out = await server.handle_request(
        {
            "method": "github_list_workflow_jobs",
            "params": {"owner": "o", "repo": "r", "run_id": 3, "filter": "latest"},
        }
    )

    assert out["data"] == {"run_id": 3, "job_filter": "latest"}


@pytest.mark.asyncio
async def test_typed_failure_keeps_code_and_details() -> None:
    server, _ = _server()

    out = await server.handle_request(
        {"method": "github_get_issue", "params": {"owner": "o", "repo": "r", "issue_number": 1}}
    )

    assert out == {
        "success": False,
        "error": {"code": "HTTP_404", "message": "Not Found", "details": {"message": "Not Found"}},
    }


@pytest.mark.asyncio
async def test_untyped_failure_becomes_internal_error() -> None:
    server, _ = _server()

    out = await server.handle_request({"method": "github_get_authenticated_user", "params": {}})

    assert out == {"success": False, "error": {"code": "INTERNAL_ERROR", "message": "kaboom"}}


@pytest.mark.asyncio
async def test_failure_without_message_gets_default_message() -> None:
    server, _ = _server()

    out = await server.handle_request(
        {"method": "github_get_pull_request", "params": {"owner": "o", "repo": "r", "pull_number": 2}}
    )

    assert out["error"] == {"code": "INTERNAL_ERROR", "message": "An internal error occurred"}


@pytest.mark.asyncio
async def test_missing_required_field_is_a_validation_error() -> None:
    server, client = _server()

    out = await server.handle_request({"method": "github_get_repository", "params": {"owner": "octo"}})

    assert out["success"] is False
    assert out["error"]["code"] == VALIDATION_ERROR
    assert "repo" in out["error"]["message"]
    assert client.calls == []


@pytest.mark.asyncio
async def test_missing_params_key_is_treated_as_empty() -> None:
    server, _ = _server()

    out = await server.handle_request({"method": "github_get_authenticated_user"})

    assert out["error"]["code"] == "INTERNAL_ERROR"


def test_validation_rejects_wrong_types() -> None:
    with pytest.raises(GitHubAPIError) as exc:
        validate_tool_arguments("github_get_issue", {"owner": "o", "repo": "r", "issue_number": "7"})
    assert exc.value.code == VALIDATION_ERROR

    with pytest.raises(GitHubAPIError):
        validate_tool_arguments("github_get_issue", {"owner": "o", "repo": "r", "issue_number": True})

    with pytest.raises(GitHubAPIError):
        validate_tool_arguments("github_create_issue", {"owner": "o", "repo": "r", "title": "t", "labels": "bug"})


def test_validation_checks_enums() -> None:
    with pytest.raises(GitHubAPIError) as exc:
        validate_tool_arguments("github_list_issues", {"owner": "o", "repo": "r", "state": "merged"})

    assert "must be one of" in exc.value.message


def test_validation_accepts_workflow_id_as_string_or_integer() -> None:
    validate_tool_arguments("github_get_workflow", {"owner": "o", "repo": "r", "workflow_id": "ci.yml"})
    validate_tool_arguments("github_get_workflow", {"owner": "o", "repo": "r", "workflow_id": 1234})

    with pytest.raises(GitHubAPIError):
        validate_tool_arguments("github_get_workflow", {"owner": "o", "repo": "r", "workflow_id": [1]})


def test_validation_allows_undeclared_fields() -> None:
    validate_tool_arguments("github_get_repository", {"owner": "o", "repo": "r", "extra": 1})


@pytest.mark.asyncio
async def test_concurrent_requests_are_independent() -> None:
    server, _ = _server()

    results = await asyncio.gather(
        *[
            server.handle_request({"method": "github_get_repository", "params": {"owner": "o", "repo": f"r{i}"}})
            for i in range(10)
        ]
    )

    assert [r["data"]["full_name"] for r in results] == [f"o/r{i}" for i in range(10)]


def test_handler_table_matches_catalog() -> None:
    server, _ = _server()
    assert server.check_catalog_parity() == []


def test_real_client_handler_table_matches_catalog() -> None:
    assert DispatchServer(token="t").check_catalog_parity() == []


def test_get_tools_lists_whole_catalog() -> None:
    server, _ = _server()
    names = [t["name"] for t in server.get_tools()]
    assert names == list(TOOL_METADATA)
