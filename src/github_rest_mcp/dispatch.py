"""Request dispatch: method name + parameter bag -> success/error envelope.

The handler table is built once per `DispatchServer` and never mutated. Each
handler is a thin closure that pulls its arguments out of the parameter mapping
and awaits the matching `GitHubClient` operation.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from .catalog import TOOL_METADATA, get_all
from .client import GitHubClient
from .config import ClientConfig
from .errors import (
    INTERNAL_ERROR,
    method_not_found_error,
    to_error_result,
    to_success_result,
    validation_error,
)

logger = logging.getLogger(__name__)

Handler = Callable[[dict[str, Any]], Awaitable[Any]]

_JSON_TYPES: dict[str, tuple[type, ...]] = {
    "string": (str,),
    "integer": (int,),
    "number": (int, float),
    "boolean": (bool,),
    "array": (list, tuple),
    "object": (dict,),
}


@dataclass(frozen=True, slots=True)
class Request:
    """A single dispatch request."""

    method: str
    params: Mapping[str, Any] = field(default_factory=dict)


def _matches_type(value: Any, expected: str) -> bool:
    allowed = _JSON_TYPES.get(expected)
    if allowed is None:
        return True
    # bool is an int subclass but never a JSON number.
    if expected in ("integer", "number") and isinstance(value, bool):
        return False
    return isinstance(value, allowed)


def validate_tool_arguments(tool_name: str, arguments: Mapping[str, Any]) -> None:
    """Validate tool arguments against the tool's declared parameter schema.

    Enforces required fields, basic JSON types (including `oneOf` type unions)
    and `enum` membership for declared properties. Undeclared properties are
    accepted and ignored by the handlers. This is not a full JSON Schema
    implementation.

    Raises:
        GitHubAPIError: With code VALIDATION_ERROR on the first violation.
    """
    schema = TOOL_METADATA[tool_name]["parameters"]
    props: Mapping[str, Any] = schema.get("properties", {})
    required: Sequence[str] = schema.get("required", ())

    for k in required:
        if arguments.get(k) is None:
            raise validation_error(f"Missing required field: {k}")

    for k, spec in props.items():
        v = arguments.get(k)
        if v is None:
            continue

        expected = spec.get("type")
        if expected is not None and not _matches_type(v, expected):
            raise validation_error(f"Field '{k}' must be of type {expected}")

        alternatives = spec.get("oneOf")
        if alternatives and not any(_matches_type(v, alt.get("type", "")) for alt in alternatives):
            allowed = " or ".join(alt.get("type", "?") for alt in alternatives)
            raise validation_error(f"Field '{k}' must be of type {allowed}")

        enum = spec.get("enum")
        if enum is not None and v not in enum:
            raise validation_error(f"Field '{k}' must be one of: {', '.join(map(str, enum))}")


def _pick(params: Mapping[str, Any], *keys: str) -> dict[str, Any]:
    """Optional arguments that were actually supplied."""
    return {k: params[k] for k in keys if params.get(k) is not None}


def _build_handlers(c: GitHubClient) -> Mapping[str, Handler]:
    handlers: dict[str, Handler] = {
        # Repositories
        "github_get_repository": lambda p: c.get_repository(p["owner"], p["repo"]),
        "github_list_repositories": lambda p: c.list_repositories(p["username"]),
        "github_create_repository": lambda p: c.create_repository(
            p["name"],
            **_pick(
                p,
                "description",
                "private",
                "auto_init",
                "gitignore_template",
                "license_template",
                "homepage",
                "has_issues",
                "has_projects",
                "has_wiki",
            ),
        ),
        "github_delete_repository": lambda p: c.delete_repository(p["owner"], p["repo"]),
        "github_update_repository": lambda p: c.update_repository(
            p["owner"], p["repo"], **{k: v for k, v in p.items() if k not in ("owner", "repo")}
        ),
        # Issues
        "github_create_issue": lambda p: c.create_issue(
            p["owner"], p["repo"], p["title"], **_pick(p, "body", "labels", "assignees")
        ),
        "github_list_issues": lambda p: c.list_issues(
            p["owner"], p["repo"], **_pick(p, "state", "labels", "sort", "direction", "per_page", "page")
        ),
        "github_get_issue": lambda p: c.get_issue(p["owner"], p["repo"], p["issue_number"]),
        "github_update_issue": lambda p: c.update_issue(
            p["owner"], p["repo"], p["issue_number"], **_pick(p, "title", "body", "labels", "assignees")
        ),
        "github_close_issue": lambda p: c.close_issue(p["owner"], p["repo"], p["issue_number"]),
        # Pull requests
        "github_create_pull_request": lambda p: c.create_pull_request(
            p["owner"], p["repo"], p["title"], p["head"], p["base"], **_pick(p, "body")
        ),
        "github_list_pull_requests": lambda p: c.list_pull_requests(
            p["owner"], p["repo"], **_pick(p, "state", "sort", "direction", "per_page", "page")
        ),
        "github_get_pull_request": lambda p: c.get_pull_request(p["owner"], p["repo"], p["pull_number"]),
        "github_merge_pull_request": lambda p: c.merge_pull_request(
            p["owner"], p["repo"], p["pull_number"], **_pick(p, "commit_message")
        ),
        # Users
        "github_get_authenticated_user": lambda p: c.get_authenticated_user(),
        # Comments
        "github_list_issue_comments": lambda p: c.list_issue_comments(
            p["owner"], p["repo"], p["issue_number"], **_pick(p, "per_page", "page")
        ),
        "github_create_issue_comment": lambda p: c.create_issue_comment(
            p["owner"], p["repo"], p["issue_number"], p["body"]
        ),
        "github_update_issue_comment": lambda p: c.update_issue_comment(
            p["owner"], p["repo"], p["comment_id"], p["body"]
        ),
        "github_delete_issue_comment": lambda p: c.delete_issue_comment(p["owner"], p["repo"], p["comment_id"]),
        "github_list_pull_request_comments": lambda p: c.list_pull_request_comments(
            p["owner"], p["repo"], p["pull_number"], **_pick(p, "per_page", "page")
        ),
        "github_create_pull_request_comment": lambda p: c.create_pull_request_comment(
            p["owner"], p["repo"], p["pull_number"], p["body"], **_pick(p, "commit_id", "path", "position")
        ),
        # Labels
        "github_list_labels": lambda p: c.list_labels(p["owner"], p["repo"], **_pick(p, "per_page", "page")),
        "github_get_label": lambda p: c.get_label(p["owner"], p["repo"], p["name"]),
        "github_create_label": lambda p: c.create_label(
            p["owner"], p["repo"], p["name"], p["color"], **_pick(p, "description")
        ),
        "github_update_label": lambda p: c.update_label(
            p["owner"], p["repo"], p["name"], **_pick(p, "new_name", "color", "description")
        ),
        "github_delete_label": lambda p: c.delete_label(p["owner"], p["repo"], p["name"]),
        # Milestones
        "github_list_milestones": lambda p: c.list_milestones(
            p["owner"], p["repo"], **_pick(p, "state", "per_page", "page")
        ),
        "github_get_milestone": lambda p: c.get_milestone(p["owner"], p["repo"], p["milestone_number"]),
        "github_create_milestone": lambda p: c.create_milestone(
            p["owner"], p["repo"], p["title"], **_pick(p, "description", "due_on", "state")
        ),
        "github_update_milestone": lambda p: c.update_milestone(
            p["owner"], p["repo"], p["milestone_number"], **_pick(p, "title", "description", "due_on", "state")
        ),
        "github_delete_milestone": lambda p: c.delete_milestone(p["owner"], p["repo"], p["milestone_number"]),
        # Files
        "github_get_file_content": lambda p: c.get_file_content(p["owner"], p["repo"], p["path"], **_pick(p, "ref")),
        "github_get_directory_content": lambda p: c.get_directory_content(
            p["owner"], p["repo"], p["path"], **_pick(p, "ref")
        ),
        "github_create_file": lambda p: c.create_file(
            p["owner"], p["repo"], p["path"], p["message"], p["content"], **_pick(p, "branch", "committer", "author")
        ),
        "github_update_file": lambda p: c.update_file(
            p["owner"],
            p["repo"],
            p["path"],
            p["message"],
            p["content"],
            p["sha"],
            **_pick(p, "branch", "committer", "author"),
        ),
        "github_delete_file": lambda p: c.delete_file(
            p["owner"], p["repo"], p["path"], p["message"], p["sha"], **_pick(p, "branch", "committer", "author")
        ),
        "github_get_repository_tree": lambda p: c.get_repository_tree(
            p["owner"], p["repo"], p["tree_sha"], recursive=bool(p.get("recursive"))
        ),
        "github_download_repository_archive": lambda p: c.download_repository_archive(
            p["owner"], p["repo"], **_pick(p, "archive_format", "ref")
        ),
        # Branches
        "github_list_branches": lambda p: c.list_branches(p["owner"], p["repo"], **_pick(p, "per_page", "page")),
        "github_get_branch": lambda p: c.get_branch(p["owner"], p["repo"], p["branch"]),
        "github_create_branch": lambda p: c.create_branch(
            p["owner"], p["repo"], p["branch"], **_pick(p, "from_branch", "sha")
        ),
        "github_delete_branch": lambda p: c.delete_branch(p["owner"], p["repo"], p["branch"]),
        "github_merge_branch": lambda p: c.merge_branch(
            p["owner"], p["repo"], p["base"], p["head"], **_pick(p, "commit_message")
        ),
        "github_get_branch_protection": lambda p: c.get_branch_protection(p["owner"], p["repo"], p["branch"]),
        "github_update_branch_protection": lambda p: c.update_branch_protection(
            p["owner"],
            p["repo"],
            p["branch"],
            **_pick(p, "required_status_checks", "enforce_admins", "required_pull_request_reviews", "restrictions"),
        ),
        "github_delete_branch_protection": lambda p: c.delete_branch_protection(p["owner"], p["repo"], p["branch"]),
        # Commits
        "github_list_commits": lambda p: c.list_commits(
            p["owner"],
            p["repo"],
            **_pick(p, "sha", "path", "author", "committer", "since", "until", "per_page", "page"),
        ),
        "github_get_commit": lambda p: c.get_commit(p["owner"], p["repo"], p["ref"]),
        "github_compare_commits": lambda p: c.compare_commits(p["owner"], p["repo"], p["base"], p["head"]),
        # Git references
        "github_list_references": lambda p: c.list_references(
            p["owner"], p["repo"], **_pick(p, "namespace", "per_page", "page")
        ),
        "github_get_reference": lambda p: c.get_reference(p["owner"], p["repo"], p["ref"]),
        "github_create_reference": lambda p: c.create_reference(p["owner"], p["repo"], p["ref"], p["sha"]),
        "github_update_reference": lambda p: c.update_reference(
            p["owner"], p["repo"], p["ref"], p["sha"], **_pick(p, "force")
        ),
        "github_delete_reference": lambda p: c.delete_reference(p["owner"], p["repo"], p["ref"]),
        # Tags
        "github_create_tag": lambda p: c.create_tag(
            p["owner"], p["repo"], p["tag"], p["message"], p["object"], p["type"], **_pick(p, "tagger")
        ),
        "github_get_tag": lambda p: c.get_tag(p["owner"], p["repo"], p["tag_sha"]),
        # Releases
        "github_list_releases": lambda p: c.list_releases(p["owner"], p["repo"], **_pick(p, "per_page", "page")),
        "github_get_release": lambda p: c.get_release(p["owner"], p["repo"], p["release_id"]),
        "github_get_release_by_tag": lambda p: c.get_release_by_tag(p["owner"], p["repo"], p["tag"]),
        "github_get_latest_release": lambda p: c.get_latest_release(p["owner"], p["repo"]),
        "github_create_release": lambda p: c.create_release(
            p["owner"],
            p["repo"],
            p["tag_name"],
            **_pick(
                p,
                "target_commitish",
                "name",
                "body",
                "draft",
                "prerelease",
                "discussion_category_name",
                "generate_release_notes",
            ),
        ),
        "github_update_release": lambda p: c.update_release(
            p["owner"],
            p["repo"],
            p["release_id"],
            **_pick(
                p, "tag_name", "target_commitish", "name", "body", "draft", "prerelease", "discussion_category_name"
            ),
        ),
        "github_delete_release": lambda p: c.delete_release(p["owner"], p["repo"], p["release_id"]),
        "github_list_release_assets": lambda p: c.list_release_assets(
            p["owner"], p["repo"], p["release_id"], **_pick(p, "per_page", "page")
        ),
        "github_get_release_asset": lambda p: c.get_release_asset(p["owner"], p["repo"], p["asset_id"]),
        "github_upload_release_asset": lambda p: c.upload_release_asset(
            p["owner"], p["repo"], p["release_id"], p["name"], p["data"], **_pick(p, "label")
        ),
        "github_update_release_asset": lambda p: c.update_release_asset(
            p["owner"], p["repo"], p["asset_id"], **_pick(p, "name", "label")
        ),
        "github_delete_release_asset": lambda p: c.delete_release_asset(p["owner"], p["repo"], p["asset_id"]),
        "github_generate_release_notes": lambda p: c.generate_release_notes(
            p["owner"],
            p["repo"],
            p["tag_name"],
            **_pick(p, "target_commitish", "previous_tag_name", "configuration_file_path"),
        ),
        # Actions
        "github_list_workflows": lambda p: c.list_workflows(p["owner"], p["repo"], **_pick(p, "per_page", "page")),
        "github_get_workflow": lambda p: c.get_workflow(p["owner"], p["repo"], p["workflow_id"]),
        "github_list_workflow_runs": lambda p: c.list_workflow_runs(
            p["owner"],
            p["repo"],
            **_pick(
                p,
                "workflow_id",
                "actor",
                "branch",
                "event",
                "status",
                "per_page",
                "page",
                "created",
                "exclude_pull_requests",
                "check_suite_id",
                "head_sha",
            ),
        ),
        "github_get_workflow_run": lambda p: c.get_workflow_run(p["owner"], p["repo"], p["run_id"]),
        "github_rerun_workflow": lambda p: c.rerun_workflow(p["owner"], p["repo"], p["run_id"]),
        "github_rerun_failed_jobs": lambda p: c.rerun_failed_jobs(p["owner"], p["repo"], p["run_id"]),
        "github_cancel_workflow_run": lambda p: c.cancel_workflow_run(p["owner"], p["repo"], p["run_id"]),
        "github_delete_workflow_run": lambda p: c.delete_workflow_run(p["owner"], p["repo"], p["run_id"]),
        "github_list_workflow_jobs": lambda p: c.list_workflow_jobs(
            p["owner"], p["repo"], p["run_id"], job_filter=p.get("filter"), **_pick(p, "per_page", "page")
        ),
        "github_get_workflow_job": lambda p: c.get_workflow_job(p["owner"], p["repo"], p["job_id"]),
        "github_download_job_logs": lambda p: c.download_job_logs(p["owner"], p["repo"], p["job_id"]),
        "github_download_workflow_run_logs": lambda p: c.download_workflow_run_logs(
            p["owner"], p["repo"], p["run_id"]
        ),
        "github_delete_workflow_run_logs": lambda p: c.delete_workflow_run_logs(p["owner"], p["repo"], p["run_id"]),
        "github_list_artifacts": lambda p: c.list_artifacts(
            p["owner"], p["repo"], **_pick(p, "run_id", "per_page", "page", "name")
        ),
        "github_get_artifact": lambda p: c.get_artifact(p["owner"], p["repo"], p["artifact_id"]),
        "github_download_artifact": lambda p: c.download_artifact(p["owner"], p["repo"], p["artifact_id"]),
        "github_delete_artifact": lambda p: c.delete_artifact(p["owner"], p["repo"], p["artifact_id"]),
        "github_create_workflow_dispatch": lambda p: c.create_workflow_dispatch(
            p["owner"], p["repo"], p["workflow_id"], p["ref"], **_pick(p, "inputs")
        ),
        "github_get_workflow_usage": lambda p: c.get_workflow_usage(p["owner"], p["repo"], p["workflow_id"]),
        "github_get_workflow_run_usage": lambda p: c.get_workflow_run_usage(p["owner"], p["repo"], p["run_id"]),
        # Search
        "github_search_repositories": lambda p: c.search_repositories(
            p["q"], **_pick(p, "sort", "order", "per_page", "page")
        ),
        "github_search_code": lambda p: c.search_code(p["q"], **_pick(p, "sort", "order", "per_page", "page")),
        "github_search_commits": lambda p: c.search_commits(p["q"], **_pick(p, "sort", "order", "per_page", "page")),
        "github_search_issues": lambda p: c.search_issues(p["q"], **_pick(p, "sort", "order", "per_page", "page")),
        "github_search_users": lambda p: c.search_users(p["q"], **_pick(p, "sort", "order", "per_page", "page")),
        "github_search_topics": lambda p: c.search_topics(p["q"], **_pick(p, "per_page", "page")),
        "github_search_labels": lambda p: c.search_labels(
            p["repository_id"], p["q"], **_pick(p, "sort", "order", "per_page", "page")
        ),
        # Webhooks
        "github_list_webhooks": lambda p: c.list_webhooks(p["owner"], p["repo"], **_pick(p, "per_page", "page")),
        "github_get_webhook": lambda p: c.get_webhook(p["owner"], p["repo"], p["hook_id"]),
        "github_create_webhook": lambda p: c.create_webhook(
            p["owner"], p["repo"], p["config"], **_pick(p, "events", "active")
        ),
        "github_update_webhook": lambda p: c.update_webhook(
            p["owner"], p["repo"], p["hook_id"], **_pick(p, "config", "events", "active", "add_events", "remove_events")
        ),
        "github_delete_webhook": lambda p: c.delete_webhook(p["owner"], p["repo"], p["hook_id"]),
        "github_ping_webhook": lambda p: c.ping_webhook(p["owner"], p["repo"], p["hook_id"]),
        "github_test_webhook": lambda p: c.test_webhook(p["owner"], p["repo"], p["hook_id"]),
        "github_list_webhook_deliveries": lambda p: c.list_webhook_deliveries(
            p["owner"], p["repo"], p["hook_id"], **_pick(p, "per_page", "cursor", "redelivery")
        ),
        "github_get_webhook_delivery": lambda p: c.get_webhook_delivery(
            p["owner"], p["repo"], p["hook_id"], p["delivery_id"]
        ),
        "github_redeliver_webhook": lambda p: c.redeliver_webhook(
            p["owner"], p["repo"], p["hook_id"], p["delivery_id"]
        ),
        # Topics
        "github_get_repository_topics": lambda p: c.get_repository_topics(p["owner"], p["repo"]),
        "github_replace_repository_topics": lambda p: c.replace_repository_topics(p["owner"], p["repo"], p["topics"]),
        # Collaborators
        "github_list_collaborators": lambda p: c.list_collaborators(
            p["owner"], p["repo"], **_pick(p, "affiliation", "permission", "per_page", "page")
        ),
        "github_check_collaborator": lambda p: c.check_collaborator(p["owner"], p["repo"], p["username"]),
        "github_add_collaborator": lambda p: c.add_collaborator(
            p["owner"], p["repo"], p["username"], **_pick(p, "permission")
        ),
        "github_remove_collaborator": lambda p: c.remove_collaborator(p["owner"], p["repo"], p["username"]),
        "github_get_collaborator_permission": lambda p: c.get_collaborator_permission(
            p["owner"], p["repo"], p["username"]
        ),
        "github_list_repository_invitations": lambda p: c.list_repository_invitations(
            p["owner"], p["repo"], **_pick(p, "per_page", "page")
        ),
        "github_delete_repository_invitation": lambda p: c.delete_repository_invitation(
            p["owner"], p["repo"], p["invitation_id"]
        ),
        # Statistics
        "github_get_repository_languages": lambda p: c.get_repository_languages(p["owner"], p["repo"]),
        "github_get_code_frequency_stats": lambda p: c.get_code_frequency_stats(p["owner"], p["repo"]),
        "github_get_contributors_stats": lambda p: c.get_contributors_stats(p["owner"], p["repo"]),
        "github_get_participation_stats": lambda p: c.get_participation_stats(p["owner"], p["repo"]),
        "github_transfer_repository": lambda p: c.transfer_repository(
            p["owner"], p["repo"], p["new_owner"], **_pick(p, "team_ids")
        ),
        # Teams
        "github_list_repository_teams": lambda p: c.list_repository_teams(
            p["owner"], p["repo"], **_pick(p, "per_page", "page")
        ),
        "github_check_team_permission": lambda p: c.check_team_permission(p["owner"], p["repo"], p["team_slug"]),
        "github_add_repository_team": lambda p: c.add_repository_team(
            p["owner"], p["repo"], p["team_slug"], **_pick(p, "permission")
        ),
        "github_remove_repository_team": lambda p: c.remove_repository_team(p["owner"], p["repo"], p["team_slug"]),
        # Security
        "github_enable_automated_security_fixes": lambda p: c.enable_automated_security_fixes(p["owner"], p["repo"]),
        "github_disable_automated_security_fixes": lambda p: c.disable_automated_security_fixes(p["owner"], p["repo"]),
        "github_enable_vulnerability_alerts": lambda p: c.enable_vulnerability_alerts(p["owner"], p["repo"]),
        "github_disable_vulnerability_alerts": lambda p: c.disable_vulnerability_alerts(p["owner"], p["repo"]),
    }
    return MappingProxyType(handlers)


def _error_envelope(exc: Exception) -> dict[str, Any]:
    code = getattr(exc, "code", None)
    message = getattr(exc, "message", None)
    if not isinstance(message, str) or not message:
        message = str(exc)
    return to_error_result(
        code=code if isinstance(code, str) and code else INTERNAL_ERROR,
        message=message or "An internal error occurred",
        details=getattr(exc, "details", None),
    )


class DispatchServer:
    """Routes `{method, params}` requests to `GitHubClient` operations."""

    def __init__(
        self,
        token: str | None = None,
        *,
        api_base_url: str | None = None,
        config: ClientConfig | None = None,
        client: GitHubClient | None = None,
    ) -> None:
        """Create a dispatch server.

        Args:
            token: Bearer token used when no client/config is given.
            api_base_url: Alternate API root for GitHub Enterprise Server.
            config: Full client configuration (token or GitHub App).
            client: Pre-built client; takes precedence over every other argument.
        """
        self._client = client or GitHubClient(token, api_base_url=api_base_url, config=config)
        self._handlers = _build_handlers(self._client)

    @property
    def client(self) -> GitHubClient:
        return self._client

    def get_tools(self) -> list[dict[str, Any]]:
        """Tool descriptors for every dispatchable operation."""
        return get_all()

    def check_catalog_parity(self) -> list[str]:
        """Names present in exactly one of the catalog and the handler table."""
        return sorted(set(TOOL_METADATA) ^ set(self._handlers))

    async def handle_request(self, request: Request | Mapping[str, Any]) -> dict[str, Any]:
        """Dispatch a request and always return an envelope.

        Unknown methods yield METHOD_NOT_FOUND; parameter problems yield
        VALIDATION_ERROR; any failure raised by the operation is reported with its
        own code (or INTERNAL_ERROR when it has none).
        """
        if not isinstance(request, Request):
            request = Request(method=str(request.get("method", "")), params=request.get("params") or {})

        logger.info("Handling request: %s", request.method)

        handler = self._handlers.get(request.method)
        if handler is None:
            logger.warning("Unknown method requested: %s", request.method)
            return method_not_found_error(request.method)

        try:
            params = dict(request.params)
            validate_tool_arguments(request.method, params)
            result = await handler(params)
        except Exception as exc:  # pylint: disable=broad-exception-caught
            logger.error("Error handling request %s: %s", request.method, exc)
            return _error_envelope(exc)

        return to_success_result(result)
