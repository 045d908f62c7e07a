"""Resource client operation tests.

Each test drives `GitHubClient` against an `httpx.MockTransport` and checks the
REST call it makes and the shape of what it returns.
"""

from __future__ import annotations

import base64
import json
import logging
from typing import Any

import httpx
import pytest
from github_rest_mcp.client import GitHubClient
from github_rest_mcp.errors import UNKNOWN_ERROR, GitHubAPIError


class Recorder:
    """Collects requests and answers from a route table keyed by (method, path)."""

    def __init__(self, routes: dict[tuple[str, str], httpx.Response]) -> None:
        self.routes = routes
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        key = (request.method, request.url.path)
        if key not in self.routes:
            return httpx.Response(404, json={"message": "Not Found"})
        return self.routes[key]


def _client(recorder: Recorder, **kwargs: Any) -> GitHubClient:
    return GitHubClient("tok", transport=httpx.MockTransport(recorder), **kwargs)


def _body(request: httpx.Request) -> Any:
    return json.loads(request.content)


@pytest.mark.asyncio
async def test_get_repository_returns_upstream_payload() -> None:
    rec = Recorder({("GET", "/repos/octo/repo"): httpx.Response(200, json={"full_name": "octo/repo"})})

    out = await _client(rec).get_repository("octo", "repo")

    assert out == {"full_name": "octo/repo"}


@pytest.mark.asyncio
async def test_not_found_is_normalized() -> None:
    rec = Recorder({})

    with pytest.raises(GitHubAPIError) as exc:
        _ = await _client(rec).get_repository("octo", "missing")

    assert exc.value.code == "HTTP_404"
    assert exc.value.status_code == 404
    assert exc.value.message == "Not Found"
    assert exc.value.details == {"message": "Not Found"}


@pytest.mark.asyncio
async def test_transport_failure_is_normalized_to_unknown_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = GitHubClient("tok", transport=httpx.MockTransport(handler))

    with pytest.raises(GitHubAPIError) as exc:
        _ = await client.get_authenticated_user()

    assert exc.value.code == UNKNOWN_ERROR
    assert exc.value.message == "connection refused"


@pytest.mark.asyncio
async def test_list_repositories_requests_one_hundred_per_page() -> None:
    rec = Recorder({("GET", "/users/octocat/repos"): httpx.Response(200, json=[])})

    _ = await _client(rec).list_repositories("octocat")

    assert rec.requests[0].url.params["per_page"] == "100"


@pytest.mark.asyncio
async def test_list_issues_applies_defaults_and_joins_labels() -> None:
    rec = Recorder({("GET", "/repos/octo/repo/issues"): httpx.Response(200, json=[{"number": 1}])})

    out = await _client(rec).list_issues("octo", "repo", labels=["bug", "ui"])

    params = rec.requests[0].url.params
    assert out == [{"number": 1}]
    assert params["state"] == "open"
    assert params["per_page"] == "30"
    assert params["page"] == "1"
    assert params["labels"] == "bug,ui"
    assert "sort" not in params


@pytest.mark.asyncio
async def test_close_issue_patches_state() -> None:
    rec = Recorder({("PATCH", "/repos/octo/repo/issues/7"): httpx.Response(200, json={"state": "closed"})})

    _ = await _client(rec).close_issue("octo", "repo", 7)

    assert _body(rec.requests[0]) == {"state": "closed"}


@pytest.mark.asyncio
async def test_create_file_base64_encodes_content() -> None:
    rec = Recorder({("PUT", "/repos/octo/repo/contents/docs/readme.md"): httpx.Response(201, json={"content": {}})})

    _ = await _client(rec).create_file("octo", "repo", "docs/readme.md", "add docs", "hello", branch="main")

    body = _body(rec.requests[0])
    assert base64.b64decode(body["content"]) == b"hello"
    assert body["message"] == "add docs"
    assert body["branch"] == "main"
    assert "committer" not in body


@pytest.mark.asyncio
async def test_delete_file_sends_json_body() -> None:
    rec = Recorder({("DELETE", "/repos/octo/repo/contents/a.txt"): httpx.Response(200, json={"commit": {}})})

    _ = await _client(rec).delete_file("octo", "repo", "a.txt", "remove", "abc123")

    assert _body(rec.requests[0]) == {"message": "remove", "sha": "abc123"}


@pytest.mark.asyncio
async def test_label_names_are_percent_encoded() -> None:
    rec = Recorder({("GET", "/repos/octo/repo/labels/good first issue"): httpx.Response(200, json={"name": "x"})})

    _ = await _client(rec).get_label("octo", "repo", "good first issue")

    assert rec.requests[0].url.raw_path == b"/repos/octo/repo/labels/good%20first%20issue"


@pytest.mark.asyncio
async def test_create_branch_uses_explicit_sha() -> None:
    rec = Recorder({("POST", "/repos/octo/repo/git/refs"): httpx.Response(201, json={"ref": "refs/heads/feature"})})

    out = await _client(rec).create_branch("octo", "repo", "feature", sha="abc")

    assert out == {"ref": "refs/heads/feature"}
    assert len(rec.requests) == 1
    assert _body(rec.requests[0]) == {"ref": "refs/heads/feature", "sha": "abc"}


@pytest.mark.asyncio
async def test_create_branch_resolves_source_branch_tip() -> None:
    rec = Recorder(
        {
            ("GET", "/repos/octo/repo/branches/dev"): httpx.Response(200, json={"commit": {"sha": "dev-sha"}}),
            ("POST", "/repos/octo/repo/git/refs"): httpx.Response(201, json={"ref": "refs/heads/feature"}),
        }
    )

    _ = await _client(rec).create_branch("octo", "repo", "feature", from_branch="dev")

    assert [r.method for r in rec.requests] == ["GET", "POST"]
    assert _body(rec.requests[-1])["sha"] == "dev-sha"


@pytest.mark.asyncio
async def test_create_branch_falls_back_to_default_branch() -> None:
    rec = Recorder(
        {
            ("GET", "/repos/octo/repo"): httpx.Response(200, json={"default_branch": "trunk"}),
            ("GET", "/repos/octo/repo/branches/trunk"): httpx.Response(200, json={"commit": {"sha": "trunk-sha"}}),
            ("POST", "/repos/octo/repo/git/refs"): httpx.Response(201, json={"ref": "refs/heads/feature"}),
        }
    )

    _ = await _client(rec).create_branch("octo", "repo", "feature")

    assert [r.url.path for r in rec.requests] == [
        "/repos/octo/repo",
        "/repos/octo/repo/branches/trunk",
        "/repos/octo/repo/git/refs",
    ]
    assert _body(rec.requests[-1]) == {"ref": "refs/heads/feature", "sha": "trunk-sha"}


@pytest.mark.asyncio
async def test_create_branch_missing_source_is_normalized() -> None:
    rec = Recorder({})

    with pytest.raises(GitHubAPIError) as exc:
        _ = await _client(rec).create_branch("octo", "repo", "feature", from_branch="nope")

    assert exc.value.code == "HTTP_404"


@pytest.mark.asyncio
async def test_update_branch_protection_sends_every_rule_key() -> None:
    rec = Recorder({("PUT", "/repos/octo/repo/branches/main/protection"): httpx.Response(200, json={})})

    _ = await _client(rec).update_branch_protection("octo", "repo", "main", enforce_admins=True)

    assert _body(rec.requests[0]) == {
        "required_status_checks": None,
        "enforce_admins": True,
        "required_pull_request_reviews": None,
        "restrictions": None,
    }


@pytest.mark.asyncio
async def test_compare_commits_uses_three_dot_range() -> None:
    rec = Recorder({("GET", "/repos/octo/repo/compare/main...feature"): httpx.Response(200, json={"ahead_by": 2})})

    out = await _client(rec).compare_commits("octo", "repo", "main", "feature")

    assert out == {"ahead_by": 2}


@pytest.mark.asyncio
async def test_list_references_defaults_to_heads_namespace() -> None:
    rec = Recorder({("GET", "/repos/octo/repo/git/matching-refs/heads/"): httpx.Response(200, json=[])})

    _ = await _client(rec).list_references("octo", "repo")

    assert rec.requests[0].url.params["per_page"] == "100"


@pytest.mark.asyncio
async def test_create_tag_maps_object_fields() -> None:
    rec = Recorder({("POST", "/repos/octo/repo/git/tags"): httpx.Response(201, json={"sha": "t"})})

    _ = await _client(rec).create_tag("octo", "repo", "v1", "release", "abc", "commit")

    assert _body(rec.requests[0]) == {"tag": "v1", "message": "release", "object": "abc", "type": "commit"}


@pytest.mark.asyncio
async def test_code_frequency_triples_become_objects() -> None:
    rec = Recorder(
        {("GET", "/repos/octo/repo/stats/code_frequency"): httpx.Response(200, json=[[1700000000, 10, -3]])}
    )

    out = await _client(rec).get_code_frequency_stats("octo", "repo")

    assert out == [{"week": 1700000000, "additions": 10, "deletions": -3}]


@pytest.mark.asyncio
async def test_code_frequency_still_computing_yields_empty_list() -> None:
    rec = Recorder({("GET", "/repos/octo/repo/stats/code_frequency"): httpx.Response(202, json={})})

    assert await _client(rec).get_code_frequency_stats("octo", "repo") == []


@pytest.mark.asyncio
async def test_code_frequency_malformed_rows_are_normalized() -> None:
    rec = Recorder({("GET", "/repos/octo/repo/stats/code_frequency"): httpx.Response(200, json=[[1700000000, 10]])})

    with pytest.raises(GitHubAPIError) as exc:
        _ = await _client(rec).get_code_frequency_stats("octo", "repo")

    assert exc.value.code == UNKNOWN_ERROR


@pytest.mark.asyncio
async def test_list_workflows_returns_inner_list() -> None:
    rec = Recorder(
        {
            ("GET", "/repos/octo/repo/actions/workflows"): httpx.Response(
                200, json={"total_count": 1, "workflows": [{"id": 1}]}
            )
        }
    )

    assert await _client(rec).list_workflows("octo", "repo") == [{"id": 1}]


@pytest.mark.asyncio
async def test_list_workflow_runs_switches_endpoint_on_workflow_id() -> None:
    rec = Recorder(
        {
            ("GET", "/repos/octo/repo/actions/workflows/ci.yml/runs"): httpx.Response(
                200, json={"workflow_runs": [{"id": 5}]}
            ),
            ("GET", "/repos/octo/repo/actions/runs"): httpx.Response(200, json={"workflow_runs": [{"id": 6}]}),
        }
    )
    client = _client(rec)

    assert await client.list_workflow_runs("octo", "repo", workflow_id="ci.yml") == [{"id": 5}]
    assert await client.list_workflow_runs("octo", "repo", branch="main") == [{"id": 6}]
    assert rec.requests[1].url.params["branch"] == "main"


@pytest.mark.asyncio
async def test_list_artifacts_switches_endpoint_on_run_id() -> None:
    rec = Recorder(
        {("GET", "/repos/octo/repo/actions/runs/9/artifacts"): httpx.Response(200, json={"artifacts": [{"id": 3}]})}
    )

    assert await _client(rec).list_artifacts("octo", "repo", run_id=9) == [{"id": 3}]


@pytest.mark.asyncio
async def test_download_artifact_returns_redirect_location() -> None:
    rec = Recorder(
        {
            ("GET", "/repos/octo/repo/actions/artifacts/3/zip"): httpx.Response(
                302, headers={"Location": "https://pipelines.example.com/a.zip"}
            )
        }
    )

    assert await _client(rec).download_artifact("octo", "repo", 3) == {"url": "https://pipelines.example.com/a.zip"}


@pytest.mark.asyncio
async def test_upload_release_asset_targets_uploads_host() -> None:
    rec = Recorder({("POST", "/repos/octo/repo/releases/4/assets"): httpx.Response(201, json={"id": 11})})

    out = await _client(rec).upload_release_asset("octo", "repo", 4, "notes.txt", "hi there", label="Notes")

    req = rec.requests[0]
    assert out == {"id": 11}
    assert req.url.host == "uploads.github.com"
    assert req.url.params["name"] == "notes.txt"
    assert req.url.params["label"] == "Notes"
    assert req.headers["Content-Type"] == "application/octet-stream"
    assert req.content == b"hi there"


@pytest.mark.asyncio
async def test_search_labels_passes_repository_id() -> None:
    rec = Recorder({("GET", "/search/labels"): httpx.Response(200, json={"items": []})})

    _ = await _client(rec).search_labels(42, "bug")

    assert rec.requests[0].url.params["repository_id"] == "42"
    assert rec.requests[0].url.params["q"] == "bug"


@pytest.mark.asyncio
async def test_create_webhook_applies_defaults() -> None:
    rec = Recorder({("POST", "/repos/octo/repo/hooks"): httpx.Response(201, json={"id": 1})})

    _ = await _client(rec).create_webhook("octo", "repo", {"url": "https://hooks.example.com"})

    assert _body(rec.requests[0]) == {
        "name": "web",
        "config": {"url": "https://hooks.example.com"},
        "events": ["push"],
        "active": True,
    }


@pytest.mark.asyncio
async def test_check_collaborator_true_on_no_content() -> None:
    rec = Recorder({("GET", "/repos/octo/repo/collaborators/hubot"): httpx.Response(204)})

    assert await _client(rec).check_collaborator("octo", "repo", "hubot") is True


@pytest.mark.asyncio
async def test_check_collaborator_false_on_not_found() -> None:
    assert await _client(Recorder({})).check_collaborator("octo", "repo", "stranger") is False


@pytest.mark.asyncio
async def test_expected_not_found_answers_are_not_logged_as_errors(caplog: pytest.LogCaptureFixture) -> None:
    client = _client(Recorder({}))

    with caplog.at_level(logging.ERROR, logger="github_rest_mcp.errors"):
        assert await client.check_collaborator("octo", "repo", "stranger") is False
        assert await client.check_team_permission("octo", "repo", "core") is None

    assert not caplog.records


@pytest.mark.asyncio
async def test_check_collaborator_other_failures_propagate() -> None:
    rec = Recorder({("GET", "/repos/octo/repo/collaborators/hubot"): httpx.Response(500, json={"message": "oops"})})

    with pytest.raises(GitHubAPIError) as exc:
        _ = await _client(rec).check_collaborator("octo", "repo", "hubot")

    assert exc.value.code == "HTTP_500"


@pytest.mark.asyncio
async def test_get_collaborator_permission_returns_level() -> None:
    rec = Recorder(
        {
            ("GET", "/repos/octo/repo/collaborators/hubot/permission"): httpx.Response(
                200, json={"permission": "write", "user": {"login": "hubot"}}
            )
        }
    )

    assert await _client(rec).get_collaborator_permission("octo", "repo", "hubot") == "write"


@pytest.mark.asyncio
async def test_check_team_permission_uses_repository_media_type() -> None:
    rec = Recorder(
        {("GET", "/orgs/octo/teams/core/repos/octo/repo"): httpx.Response(200, json={"permissions": {"push": True}})}
    )

    out = await _client(rec).check_team_permission("octo", "repo", "core")

    assert out == {"permissions": {"push": True}}
    assert rec.requests[0].headers["Accept"] == "application/vnd.github.v3.repository+json"


@pytest.mark.asyncio
async def test_check_team_permission_none_when_team_has_no_access() -> None:
    assert await _client(Recorder({})).check_team_permission("octo", "repo", "core") is None


@pytest.mark.asyncio
async def test_security_toggles_use_put_and_delete() -> None:
    rec = Recorder(
        {
            ("PUT", "/repos/octo/repo/vulnerability-alerts"): httpx.Response(204),
            ("DELETE", "/repos/octo/repo/automated-security-fixes"): httpx.Response(204),
        }
    )
    client = _client(rec)

    assert await client.enable_vulnerability_alerts("octo", "repo") is None
    assert await client.disable_automated_security_fixes("octo", "repo") is None


@pytest.mark.asyncio
async def test_update_repository_forwards_only_known_settings() -> None:
    rec = Recorder({("PATCH", "/repos/octo/repo"): httpx.Response(200, json={"archived": True})})

    _ = await _client(rec).update_repository("octo", "repo", archived=True, description=None, bogus="x")

    assert _body(rec.requests[0]) == {"archived": True}


@pytest.mark.asyncio
async def test_enterprise_client_uses_configured_host() -> None:
    rec = Recorder({("GET", "/api/v3/user"): httpx.Response(200, json={"login": "octo"})})

    out = await _client(rec, api_base_url="https://ghe.example.com/api/v3").get_authenticated_user()

    assert out == {"login": "octo"}
    assert rec.requests[0].url.host == "ghe.example.com"
