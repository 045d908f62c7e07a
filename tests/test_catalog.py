"""Tool catalog structure tests."""

from __future__ import annotations

import pytest
from github_rest_mcp.catalog import TOOL_METADATA, get_all
from github_rest_mcp.client import GitHubClient


def test_catalog_names_are_unique_and_prefixed() -> None:
    names = [t["name"] for t in get_all()]
    assert len(names) == len(set(names)) == len(TOOL_METADATA)
    assert all(n.startswith("github_") for n in names)


def test_catalog_covers_every_operation_group() -> None:
    assert len(TOOL_METADATA) == 128
    for name in (
        "github_get_repository",
        "github_merge_pull_request",
        "github_create_branch",
        "github_upload_release_asset",
        "github_download_workflow_run_logs",
        "github_search_labels",
        "github_redeliver_webhook",
        "github_check_team_permission",
        "github_disable_vulnerability_alerts",
    ):
        assert name in TOOL_METADATA


def test_required_fields_are_declared_properties() -> None:
    for tool in get_all():
        params = tool["parameters"]
        assert params["type"] == "object"
        assert set(params["required"]) <= set(params["properties"]), tool["name"]
        assert tool["description"]


def test_update_repository_has_full_settings() -> None:
    props = TOOL_METADATA["github_update_repository"]["parameters"]["properties"]
    assert {"visibility", "allow_auto_merge", "delete_branch_on_merge", "archived"} <= set(props)


def test_every_tool_maps_to_a_client_operation() -> None:
    for name in TOOL_METADATA:
        assert callable(getattr(GitHubClient, name.removeprefix("github_"), None)), name


def test_catalog_cannot_be_mutated() -> None:
    with pytest.raises(TypeError):
        TOOL_METADATA["github_new"] = {}  # type: ignore[index]

    params = TOOL_METADATA["github_get_repository"]["parameters"]
    with pytest.raises(TypeError):
        params["properties"]["owner"] = {}
    with pytest.raises(TypeError):
        params["properties"]["owner"]["type"] = "integer"
    with pytest.raises(AttributeError):
        params["required"].append("bogus")

    assert "bogus" not in params["required"]
    assert params["properties"]["owner"]["type"] == "string"


def test_get_all_returns_copies() -> None:
    first = get_all()
    first[0]["parameters"]["required"].append("bogus")

    assert "bogus" not in get_all()[0]["parameters"]["required"]


def test_get_all_emits_plain_json_values() -> None:
    tool = next(t for t in get_all() if t["name"] == "github_get_workflow")
    params = tool["parameters"]

    assert type(params) is dict
    assert type(params["properties"]) is dict
    assert type(params["required"]) is list
    assert type(params["properties"]["workflow_id"]["oneOf"]) is list


def test_asset_content_description_is_language_neutral() -> None:
    data = TOOL_METADATA["github_upload_release_asset"]["parameters"]["properties"]["data"]
    assert data["description"] == "Asset content (text, sent as UTF-8)"
