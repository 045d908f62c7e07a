"""Error normalization and envelope helper tests."""

from __future__ import annotations

import logging

import httpx
import pytest
from github_rest_mcp.errors import (
    UNKNOWN_ERROR,
    GitHubAPIError,
    handle_error,
    method_not_found_error,
    to_error_result,
    to_success_result,
)
from github_rest_mcp.rest_client import GitHubRequestError


def test_typed_error_is_returned_unchanged() -> None:
    err = GitHubAPIError(message="nope", code="HTTP_403", status_code=403)
    assert handle_error(err) is err


def test_normalizing_twice_is_the_same_as_once() -> None:
    once = handle_error(ValueError("boom"))
    assert handle_error(once) is once


def test_status_mapping_uses_upstream_message_and_response_data() -> None:
    failure = {"status": 404, "message": "Not Found", "response": {"data": {"message": "Not Found"}}}

    err = handle_error(failure)

    assert err.code == "HTTP_404"
    assert err.status_code == 404
    assert err.message == "Not Found"
    assert err.details == {"message": "Not Found"}


def test_status_mapping_defaults_message() -> None:
    err = handle_error({"status": 500})
    assert err.code == "HTTP_500"
    assert err.message == "GitHub API request failed"
    assert err.details is None


def test_request_error_from_transport_is_mapped_by_status() -> None:
    err = handle_error(GitHubRequestError(status=422, message="Validation Failed", response_data={"errors": []}))

    assert err.code == "HTTP_422"
    assert err.message == "Validation Failed"
    assert err.details == {"errors": []}


def test_httpx_status_error_reads_status_from_response() -> None:
    req = httpx.Request("GET", "https://api.github.com/repos/octo/repo")
    resp = httpx.Response(409, json={"message": "Conflict"}, request=req)

    err = handle_error(httpx.HTTPStatusError("conflict", request=req, response=resp))

    assert err.code == "HTTP_409"
    assert err.status_code == 409
    assert err.details == {"message": "Conflict"}


def test_unknown_failure_keeps_original_as_details() -> None:
    original = ValueError("boom")

    err = handle_error(original)

    assert err.code == UNKNOWN_ERROR
    assert err.message == "boom"
    assert err.status_code is None
    assert err.details is original


def test_unknown_failure_without_message_gets_default() -> None:
    assert handle_error(ValueError()).message == "Unknown error occurred"
    assert handle_error(object()).message == "Unknown error occurred"


def test_boolean_status_is_not_treated_as_http_status() -> None:
    assert handle_error({"status": True, "message": "odd"}).code == UNKNOWN_ERROR


def test_non_positive_status_is_not_treated_as_http_status() -> None:
    assert handle_error({"status": 0, "message": "no response"}).code == UNKNOWN_ERROR
    assert handle_error(GitHubRequestError(-1, "bad")).code == UNKNOWN_ERROR


def test_every_failure_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.ERROR, logger="github_rest_mcp.errors"):
        _ = handle_error(RuntimeError("kaboom"))

    assert any("kaboom" in r.getMessage() for r in caplog.records)


def test_error_str_is_message() -> None:
    assert str(GitHubAPIError(message="bad things", code="HTTP_400")) == "bad things"


def test_envelope_shapes() -> None:
    assert to_success_result([1, 2]) == {"success": True, "data": [1, 2]}
    assert to_error_result(code="X", message="m") == {"success": False, "error": {"code": "X", "message": "m"}}
    assert to_error_result(code="X", message="m", details={"a": 1})["error"]["details"] == {"a": 1}


def test_method_not_found_shape() -> None:
    assert method_not_found_error("github_nope") == {
        "success": False,
        "error": {"code": "METHOD_NOT_FOUND", "message": "Method 'github_nope' not found"},
    }
