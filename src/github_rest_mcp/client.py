"""GitHub resource client.

One coroutine per supported GitHub operation. Every operation logs what it is
about to do, performs exactly one REST call (branch creation may first resolve
its starting commit), returns the upstream payload, and re-raises any failure as a
normalized `GitHubAPIError`.
"""

from __future__ import annotations

import base64
import logging
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

import httpx

from .auth import build_token_provider
from .config import DEFAULT_API_BASE_URL, ClientConfig
from .errors import handle_error
from .rest_client import GitHubRequestError, GitHubRestClient

logger = logging.getLogger(__name__)

JSON = dict[str, Any]

_RAISE = object()
_NOT_FOUND = object()

_REPOSITORY_SETTINGS: tuple[str, ...] = (
    "name",
    "description",
    "homepage",
    "private",
    "visibility",
    "has_issues",
    "has_projects",
    "has_wiki",
    "has_downloads",
    "is_template",
    "default_branch",
    "allow_squash_merge",
    "allow_merge_commit",
    "allow_rebase_merge",
    "allow_auto_merge",
    "delete_branch_on_merge",
    "allow_update_branch",
    "use_squash_pr_title_as_default",
    "squash_merge_commit_title",
    "squash_merge_commit_message",
    "merge_commit_title",
    "merge_commit_message",
    "archived",
    "allow_forking",
    "web_commit_signoff_required",
)


def _seg(value: object, *, keep_slashes: bool = False) -> str:
    """Percent-encode a path segment."""
    return quote(str(value), safe="/" if keep_slashes else "")


def _compact(body: Mapping[str, Any]) -> JSON:
    """Drop unset (None) fields from a request body."""
    return {k: v for k, v in body.items() if v is not None}


def _b64(text: str) -> str:
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def _unwrap_list(data: Any, key: str) -> list[Any]:
    if isinstance(data, dict) and isinstance(data.get(key), list):
        return data[key]
    return []


class GitHubClient:
    """Async client exposing GitHub repository, issue, CI and admin operations."""

    def __init__(
        self,
        token: str | None = None,
        *,
        api_base_url: str | None = None,
        config: ClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Create a client from a bearer token or a full `ClientConfig`.

        Args:
            token: Personal access / installation token.
            api_base_url: Alternate API root for GitHub Enterprise Server.
            config: Explicit configuration; takes precedence over token/api_base_url.
            transport: Optional httpx transport for tests.
        """
        if config is None:
            config = ClientConfig(token=token, api_base_url=api_base_url or DEFAULT_API_BASE_URL)
        self._config = config
        self._rest = GitHubRestClient(
            token_provider=build_token_provider(config, transport),
            limits=config.limits,
            api_base_url=config.api_base_url,
            transport=transport,
        )
        logger.info("GitHub client initialized for %s", config.api_base_url)

    @property
    def config(self) -> ClientConfig:
        return self._config

    async def _call(self, method: str, path: str, *, not_found: Any = _RAISE, **kwargs: Any) -> Any:
        """Perform one REST call, normalizing failures.

        When `not_found` is given, a 404 answer returns it instead of raising.
        """
        try:
            return await self._rest.request(method, path, **kwargs)
        except GitHubRequestError as exc:
            if exc.status == 404 and not_found is not _RAISE:
                return not_found
            raise handle_error(exc) from exc
        except Exception as exc:  # pylint: disable=broad-exception-caught
            err = handle_error(exc)
            if err is exc:
                raise
            raise err from exc

    async def _download(self, path: str, params: dict[str, Any] | None = None) -> Any:
        try:
            return await self._rest.request_redirect("GET", path, params=params)
        except Exception as exc:  # pylint: disable=broad-exception-caught
            err = handle_error(exc)
            if err is exc:
                raise
            raise err from exc

    @staticmethod
    def _repo_path(owner: str, repo: str) -> str:
        return f"/repos/{_seg(owner)}/{_seg(repo)}"

    # Repositories

    async def get_repository(self, owner: str, repo: str) -> JSON:
        logger.info("Fetching repository: %s/%s", owner, repo)
        return await self._call("GET", self._repo_path(owner, repo))

    async def list_repositories(self, username: str) -> list[JSON]:
        logger.info("Listing repositories for user: %s", username)
        return await self._call("GET", f"/users/{_seg(username)}/repos", params={"per_page": 100})

    async def create_repository(
        self,
        name: str,
        *,
        description: str | None = None,
        private: bool | None = None,
        auto_init: bool | None = None,
        gitignore_template: str | None = None,
        license_template: str | None = None,
        homepage: str | None = None,
        has_issues: bool | None = None,
        has_projects: bool | None = None,
        has_wiki: bool | None = None,
    ) -> JSON:
        logger.info("Creating repository: %s", name)
        body = {
            "name": name,
            "description": description,
            "private": private,
            "auto_init": auto_init,
            "gitignore_template": gitignore_template,
            "license_template": license_template,
            "homepage": homepage,
            "has_issues": has_issues,
            "has_projects": has_projects,
            "has_wiki": has_wiki,
        }
        return await self._call("POST", "/user/repos", json_body=_compact(body))

    async def delete_repository(self, owner: str, repo: str) -> None:
        logger.info("Deleting repository: %s/%s", owner, repo)
        return await self._call("DELETE", self._repo_path(owner, repo))

    async def update_repository(self, owner: str, repo: str, **settings: Any) -> JSON:
        """Update repository settings.

        Only the documented repository settings are forwarded; anything else in
        `settings` is ignored.
        """
        logger.info("Updating repository %s/%s", owner, repo)
        body = {k: settings.get(k) for k in _REPOSITORY_SETTINGS}
        return await self._call("PATCH", self._repo_path(owner, repo), json_body=_compact(body))

    async def get_repository_topics(self, owner: str, repo: str) -> JSON:
        logger.info("Getting topics for %s/%s", owner, repo)
        return await self._call("GET", f"{self._repo_path(owner, repo)}/topics")

    async def replace_repository_topics(self, owner: str, repo: str, topics: list[str]) -> JSON:
        logger.info("Replacing topics for %s/%s", owner, repo)
        return await self._call("PUT", f"{self._repo_path(owner, repo)}/topics", json_body={"names": topics})

    async def get_repository_languages(self, owner: str, repo: str) -> dict[str, int]:
        logger.info("Getting languages for %s/%s", owner, repo)
        return await self._call("GET", f"{self._repo_path(owner, repo)}/languages")

    async def get_code_frequency_stats(self, owner: str, repo: str) -> list[JSON]:
        """Weekly additions/deletions.

        GitHub returns `[week, additions, deletions]` triples; they are reshaped
        into objects. While GitHub is still computing the statistics it answers
        with an empty body, which yields an empty list.
        """
        logger.info("Getting code frequency stats for %s/%s", owner, repo)
        data = await self._call("GET", f"{self._repo_path(owner, repo)}/stats/code_frequency")
        if not isinstance(data, list):
            return []
        try:
            return [
                {"week": week, "additions": additions, "deletions": deletions} for week, additions, deletions in data
            ]
        except (TypeError, ValueError) as exc:
            raise handle_error(exc) from exc

    async def get_contributors_stats(self, owner: str, repo: str) -> list[JSON]:
        logger.info("Getting contributor stats for %s/%s", owner, repo)
        return await self._call("GET", f"{self._repo_path(owner, repo)}/stats/contributors")

    async def get_participation_stats(self, owner: str, repo: str) -> JSON:
        logger.info("Getting participation stats for %s/%s", owner, repo)
        return await self._call("GET", f"{self._repo_path(owner, repo)}/stats/participation")

    async def transfer_repository(
        self, owner: str, repo: str, new_owner: str, *, team_ids: list[int] | None = None
    ) -> JSON:
        logger.info("Transferring %s/%s to %s", owner, repo, new_owner)
        body = _compact({"new_owner": new_owner, "team_ids": team_ids})
        return await self._call("POST", f"{self._repo_path(owner, repo)}/transfer", json_body=body)

    # Issues

    async def create_issue(
        self,
        owner: str,
        repo: str,
        title: str,
        *,
        body: str | None = None,
        labels: list[str] | None = None,
        assignees: list[str] | None = None,
    ) -> JSON:
        logger.info("Creating issue in %s/%s", owner, repo)
        payload = _compact({"title": title, "body": body, "labels": labels, "assignees": assignees})
        return await self._call("POST", f"{self._repo_path(owner, repo)}/issues", json_body=payload)

    async def list_issues(
        self,
        owner: str,
        repo: str,
        *,
        state: str | None = None,
        labels: list[str] | None = None,
        sort: str | None = None,
        direction: str | None = None,
        per_page: int | None = None,
        page: int | None = None,
    ) -> list[JSON]:
        logger.info("Listing issues for %s/%s", owner, repo)
        params = {
            "state": state or "open",
            "labels": ",".join(labels) if labels else None,
            "sort": sort,
            "direction": direction,
            "per_page": per_page or 30,
            "page": page or 1,
        }
        return await self._call("GET", f"{self._repo_path(owner, repo)}/issues", params=params)

    async def get_issue(self, owner: str, repo: str, issue_number: int) -> JSON:
        logger.info("Fetching issue #%s from %s/%s", issue_number, owner, repo)
        return await self._call("GET", f"{self._repo_path(owner, repo)}/issues/{issue_number}")

    async def update_issue(
        self,
        owner: str,
        repo: str,
        issue_number: int,
        *,
        title: str | None = None,
        body: str | None = None,
        labels: list[str] | None = None,
        assignees: list[str] | None = None,
    ) -> JSON:
        logger.info("Updating issue #%s in %s/%s", issue_number, owner, repo)
        payload = _compact({"title": title, "body": body, "labels": labels, "assignees": assignees})
        return await self._call("PATCH", f"{self._repo_path(owner, repo)}/issues/{issue_number}", json_body=payload)

    async def close_issue(self, owner: str, repo: str, issue_number: int) -> JSON:
        logger.info("Closing issue #%s in %s/%s", issue_number, owner, repo)
        return await self._call(
            "PATCH", f"{self._repo_path(owner, repo)}/issues/{issue_number}", json_body={"state": "closed"}
        )

    # Pull requests

    async def create_pull_request(
        self, owner: str, repo: str, title: str, head: str, base: str, *, body: str | None = None
    ) -> JSON:
        logger.info("Creating pull request in %s/%s", owner, repo)
        payload = _compact({"title": title, "body": body, "head": head, "base": base})
        return await self._call("POST", f"{self._repo_path(owner, repo)}/pulls", json_body=payload)

    async def list_pull_requests(
        self,
        owner: str,
        repo: str,
        *,
        state: str | None = None,
        sort: str | None = None,
        direction: str | None = None,
        per_page: int | None = None,
        page: int | None = None,
    ) -> list[JSON]:
        logger.info("Listing pull requests for %s/%s", owner, repo)
        params = {
            "state": state or "open",
            "sort": sort,
            "direction": direction,
            "per_page": per_page or 30,
            "page": page or 1,
        }
        return await self._call("GET", f"{self._repo_path(owner, repo)}/pulls", params=params)

    async def get_pull_request(self, owner: str, repo: str, pull_number: int) -> JSON:
        logger.info("Fetching pull request #%s from %s/%s", pull_number, owner, repo)
        return await self._call("GET", f"{self._repo_path(owner, repo)}/pulls/{pull_number}")

    async def merge_pull_request(
        self, owner: str, repo: str, pull_number: int, *, commit_message: str | None = None
    ) -> JSON:
        logger.info("Merging pull request #%s in %s/%s", pull_number, owner, repo)
        return await self._call(
            "PUT",
            f"{self._repo_path(owner, repo)}/pulls/{pull_number}/merge",
            json_body=_compact({"commit_message": commit_message}),
        )

    # Users

    async def get_authenticated_user(self) -> JSON:
        logger.info("Fetching authenticated user")
        return await self._call("GET", "/user")

    # Comments

    async def list_issue_comments(
        self, owner: str, repo: str, issue_number: int, *, per_page: int = 30, page: int = 1
    ) -> list[JSON]:
        logger.info("Listing comments for issue #%s in %s/%s", issue_number, owner, repo)
        return await self._call(
            "GET",
            f"{self._repo_path(owner, repo)}/issues/{issue_number}/comments",
            params={"per_page": per_page, "page": page},
        )

    async def create_issue_comment(self, owner: str, repo: str, issue_number: int, body: str) -> JSON:
        logger.info("Creating comment on issue #%s in %s/%s", issue_number, owner, repo)
        return await self._call(
            "POST", f"{self._repo_path(owner, repo)}/issues/{issue_number}/comments", json_body={"body": body}
        )

    async def update_issue_comment(self, owner: str, repo: str, comment_id: int, body: str) -> JSON:
        logger.info("Updating comment #%s in %s/%s", comment_id, owner, repo)
        return await self._call(
            "PATCH", f"{self._repo_path(owner, repo)}/issues/comments/{comment_id}", json_body={"body": body}
        )

    async def delete_issue_comment(self, owner: str, repo: str, comment_id: int) -> None:
        logger.info("Deleting comment #%s in %s/%s", comment_id, owner, repo)
        return await self._call("DELETE", f"{self._repo_path(owner, repo)}/issues/comments/{comment_id}")

    async def list_pull_request_comments(
        self, owner: str, repo: str, pull_number: int, *, per_page: int = 30, page: int = 1
    ) -> list[JSON]:
        logger.info("Listing comments for pull request #%s in %s/%s", pull_number, owner, repo)
        return await self._call(
            "GET",
            f"{self._repo_path(owner, repo)}/pulls/{pull_number}/comments",
            params={"per_page": per_page, "page": page},
        )

    async def create_pull_request_comment(
        self,
        owner: str,
        repo: str,
        pull_number: int,
        body: str,
        *,
        commit_id: str | None = None,
        path: str | None = None,
        position: int | None = None,
    ) -> JSON:
        logger.info("Creating comment on pull request #%s in %s/%s", pull_number, owner, repo)
        payload = _compact({"body": body, "commit_id": commit_id, "path": path, "position": position})
        return await self._call(
            "POST", f"{self._repo_path(owner, repo)}/pulls/{pull_number}/comments", json_body=payload
        )

    # Labels

    async def list_labels(self, owner: str, repo: str, *, per_page: int = 100, page: int = 1) -> list[JSON]:
        logger.info("Listing labels for %s/%s", owner, repo)
        return await self._call(
            "GET", f"{self._repo_path(owner, repo)}/labels", params={"per_page": per_page, "page": page}
        )

    async def get_label(self, owner: str, repo: str, name: str) -> JSON:
        logger.info("Fetching label '%s' from %s/%s", name, owner, repo)
        return await self._call("GET", f"{self._repo_path(owner, repo)}/labels/{_seg(name)}")

    async def create_label(
        self, owner: str, repo: str, name: str, color: str, *, description: str | None = None
    ) -> JSON:
        logger.info("Creating label '%s' in %s/%s", name, owner, repo)
        payload = _compact({"name": name, "color": color, "description": description})
        return await self._call("POST", f"{self._repo_path(owner, repo)}/labels", json_body=payload)

    async def update_label(
        self,
        owner: str,
        repo: str,
        name: str,
        *,
        new_name: str | None = None,
        color: str | None = None,
        description: str | None = None,
    ) -> JSON:
        logger.info("Updating label '%s' in %s/%s", name, owner, repo)
        payload = _compact({"new_name": new_name, "color": color, "description": description})
        return await self._call("PATCH", f"{self._repo_path(owner, repo)}/labels/{_seg(name)}", json_body=payload)

    async def delete_label(self, owner: str, repo: str, name: str) -> None:
        logger.info("Deleting label '%s' from %s/%s", name, owner, repo)
        return await self._call("DELETE", f"{self._repo_path(owner, repo)}/labels/{_seg(name)}")

    # Milestones

    async def list_milestones(
        self, owner: str, repo: str, *, state: str = "open", per_page: int = 30, page: int = 1
    ) -> list[JSON]:
        logger.info("Listing milestones for %s/%s", owner, repo)
        return await self._call(
            "GET",
            f"{self._repo_path(owner, repo)}/milestones",
            params={"state": state, "per_page": per_page, "page": page},
        )

    async def get_milestone(self, owner: str, repo: str, milestone_number: int) -> JSON:
        logger.info("Fetching milestone #%s from %s/%s", milestone_number, owner, repo)
        return await self._call("GET", f"{self._repo_path(owner, repo)}/milestones/{milestone_number}")

    async def create_milestone(
        self,
        owner: str,
        repo: str,
        title: str,
        *,
        description: str | None = None,
        due_on: str | None = None,
        state: str | None = None,
    ) -> JSON:
        logger.info("Creating milestone '%s' in %s/%s", title, owner, repo)
        payload = _compact({"title": title, "description": description, "due_on": due_on, "state": state})
        return await self._call("POST", f"{self._repo_path(owner, repo)}/milestones", json_body=payload)

    async def update_milestone(
        self,
        owner: str,
        repo: str,
        milestone_number: int,
        *,
        title: str | None = None,
        description: str | None = None,
        due_on: str | None = None,
        state: str | None = None,
    ) -> JSON:
        logger.info("Updating milestone #%s in %s/%s", milestone_number, owner, repo)
        payload = _compact({"title": title, "description": description, "due_on": due_on, "state": state})
        return await self._call(
            "PATCH", f"{self._repo_path(owner, repo)}/milestones/{milestone_number}", json_body=payload
        )

    async def delete_milestone(self, owner: str, repo: str, milestone_number: int) -> None:
        logger.info("Deleting milestone #%s from %s/%s", milestone_number, owner, repo)
        return await self._call("DELETE", f"{self._repo_path(owner, repo)}/milestones/{milestone_number}")

    # Files

    async def get_file_content(self, owner: str, repo: str, path: str, *, ref: str | None = None) -> JSON:
        logger.info("Fetching file content: %s from %s/%s", path, owner, repo)
        return await self._call(
            "GET", f"{self._repo_path(owner, repo)}/contents/{_seg(path, keep_slashes=True)}", params={"ref": ref}
        )

    async def get_directory_content(self, owner: str, repo: str, path: str, *, ref: str | None = None) -> list[JSON]:
        logger.info("Fetching directory content: %s from %s/%s", path, owner, repo)
        return await self._call(
            "GET", f"{self._repo_path(owner, repo)}/contents/{_seg(path, keep_slashes=True)}", params={"ref": ref}
        )

    async def create_file(
        self,
        owner: str,
        repo: str,
        path: str,
        message: str,
        content: str,
        *,
        branch: str | None = None,
        committer: JSON | None = None,
        author: JSON | None = None,
    ) -> JSON:
        logger.info("Creating file: %s in %s/%s", path, owner, repo)
        payload = _compact(
            {
                "message": message,
                "content": _b64(content),
                "branch": branch,
                "committer": committer,
                "author": author,
            }
        )
        return await self._call(
            "PUT", f"{self._repo_path(owner, repo)}/contents/{_seg(path, keep_slashes=True)}", json_body=payload
        )

    async def update_file(
        self,
        owner: str,
        repo: str,
        path: str,
        message: str,
        content: str,
        sha: str,
        *,
        branch: str | None = None,
        committer: JSON | None = None,
        author: JSON | None = None,
    ) -> JSON:
        logger.info("Updating file: %s in %s/%s", path, owner, repo)
        payload = _compact(
            {
                "message": message,
                "content": _b64(content),
                "sha": sha,
                "branch": branch,
                "committer": committer,
                "author": author,
            }
        )
        return await self._call(
            "PUT", f"{self._repo_path(owner, repo)}/contents/{_seg(path, keep_slashes=True)}", json_body=payload
        )

    async def delete_file(
        self,
        owner: str,
        repo: str,
        path: str,
        message: str,
        sha: str,
        *,
        branch: str | None = None,
        committer: JSON | None = None,
        author: JSON | None = None,
    ) -> JSON:
        logger.info("Deleting file: %s from %s/%s", path, owner, repo)
        payload = _compact(
            {"message": message, "sha": sha, "branch": branch, "committer": committer, "author": author}
        )
        return await self._call(
            "DELETE", f"{self._repo_path(owner, repo)}/contents/{_seg(path, keep_slashes=True)}", json_body=payload
        )

    async def get_repository_tree(self, owner: str, repo: str, tree_sha: str, *, recursive: bool = False) -> JSON:
        logger.info("Fetching repository tree: %s from %s/%s", tree_sha, owner, repo)
        return await self._call(
            "GET",
            f"{self._repo_path(owner, repo)}/git/trees/{_seg(tree_sha, keep_slashes=True)}",
            params={"recursive": "true" if recursive else None},
        )

    async def download_repository_archive(
        self, owner: str, repo: str, *, archive_format: str = "zipball", ref: str | None = None
    ) -> JSON:
        logger.info("Downloading repository archive: %s/%s as %s", owner, repo, archive_format)
        return await self._download(
            f"{self._repo_path(owner, repo)}/{_seg(archive_format)}/{_seg(ref or 'HEAD', keep_slashes=True)}"
        )

    # Branches

    async def list_branches(self, owner: str, repo: str, *, per_page: int = 100, page: int = 1) -> list[JSON]:
        logger.info("Listing branches for %s/%s", owner, repo)
        return await self._call(
            "GET", f"{self._repo_path(owner, repo)}/branches", params={"per_page": per_page, "page": page}
        )

    async def get_branch(self, owner: str, repo: str, branch: str) -> JSON:
        logger.info("Fetching branch '%s' from %s/%s", branch, owner, repo)
        return await self._call("GET", f"{self._repo_path(owner, repo)}/branches/{_seg(branch, keep_slashes=True)}")

    async def create_branch(
        self,
        owner: str,
        repo: str,
        branch: str,
        *,
        from_branch: str | None = None,
        sha: str | None = None,
    ) -> JSON:
        """Create `branch` pointing at a resolved commit.

        The starting commit is `sha` when given, else the tip of `from_branch`,
        else the tip of the repository's default branch.
        """
        try:
            logger.info("Creating branch '%s' in %s/%s", branch, owner, repo)

            if not sha and from_branch:
                source = await self.get_branch(owner, repo, from_branch)
                sha = source["commit"]["sha"]

            if not sha:
                repository = await self.get_repository(owner, repo)
                default = await self.get_branch(owner, repo, repository["default_branch"])
                sha = default["commit"]["sha"]

            return await self._call(
                "POST",
                f"{self._repo_path(owner, repo)}/git/refs",
                json_body={"ref": f"refs/heads/{branch}", "sha": sha},
            )
        except Exception as exc:  # pylint: disable=broad-exception-caught
            err = handle_error(exc)
            if err is exc:
                raise
            raise err from exc

    async def delete_branch(self, owner: str, repo: str, branch: str) -> None:
        logger.info("Deleting branch '%s' from %s/%s", branch, owner, repo)
        return await self._call(
            "DELETE", f"{self._repo_path(owner, repo)}/git/refs/heads/{_seg(branch, keep_slashes=True)}"
        )

    async def merge_branch(
        self, owner: str, repo: str, base: str, head: str, *, commit_message: str | None = None
    ) -> JSON | None:
        logger.info("Merging branch '%s' into '%s' in %s/%s", head, base, owner, repo)
        payload = _compact({"base": base, "head": head, "commit_message": commit_message})
        return await self._call("POST", f"{self._repo_path(owner, repo)}/merges", json_body=payload)

    async def get_branch_protection(self, owner: str, repo: str, branch: str) -> JSON:
        logger.info("Fetching branch protection for '%s' in %s/%s", branch, owner, repo)
        return await self._call(
            "GET", f"{self._repo_path(owner, repo)}/branches/{_seg(branch, keep_slashes=True)}/protection"
        )

    async def update_branch_protection(
        self,
        owner: str,
        repo: str,
        branch: str,
        *,
        required_status_checks: JSON | None = None,
        enforce_admins: bool | None = None,
        required_pull_request_reviews: JSON | None = None,
        restrictions: JSON | None = None,
    ) -> JSON:
        logger.info("Updating branch protection for '%s' in %s/%s", branch, owner, repo)
        # All four keys are mandatory upstream; null disables the rule.
        payload = {
            "required_status_checks": required_status_checks,
            "enforce_admins": enforce_admins,
            "required_pull_request_reviews": required_pull_request_reviews,
            "restrictions": restrictions,
        }
        return await self._call(
            "PUT",
            f"{self._repo_path(owner, repo)}/branches/{_seg(branch, keep_slashes=True)}/protection",
            json_body=payload,
        )

    async def delete_branch_protection(self, owner: str, repo: str, branch: str) -> None:
        logger.info("Deleting branch protection for '%s' in %s/%s", branch, owner, repo)
        return await self._call(
            "DELETE", f"{self._repo_path(owner, repo)}/branches/{_seg(branch, keep_slashes=True)}/protection"
        )

    # Commits

    async def list_commits(
        self,
        owner: str,
        repo: str,
        *,
        sha: str | None = None,
        path: str | None = None,
        author: str | None = None,
        committer: str | None = None,
        since: str | None = None,
        until: str | None = None,
        per_page: int | None = None,
        page: int | None = None,
    ) -> list[JSON]:
        logger.info("Listing commits for %s/%s", owner, repo)
        params = {
            "sha": sha,
            "path": path,
            "author": author,
            "committer": committer,
            "since": since,
            "until": until,
            "per_page": per_page,
            "page": page,
        }
        return await self._call("GET", f"{self._repo_path(owner, repo)}/commits", params=params)

    async def get_commit(self, owner: str, repo: str, ref: str) -> JSON:
        logger.info("Fetching commit %s from %s/%s", ref, owner, repo)
        return await self._call("GET", f"{self._repo_path(owner, repo)}/commits/{_seg(ref, keep_slashes=True)}")

    async def compare_commits(self, owner: str, repo: str, base: str, head: str) -> JSON:
        logger.info("Comparing commits %s...%s in %s/%s", base, head, owner, repo)
        basehead = f"{_seg(base, keep_slashes=True)}...{_seg(head, keep_slashes=True)}"
        return await self._call("GET", f"{self._repo_path(owner, repo)}/compare/{basehead}")

    # Git references

    async def list_references(
        self, owner: str, repo: str, *, namespace: str | None = None, per_page: int = 100, page: int = 1
    ) -> list[JSON]:
        logger.info("Listing git references (%s) for %s/%s", namespace or "heads/", owner, repo)
        return await self._call(
            "GET",
            f"{self._repo_path(owner, repo)}/git/matching-refs/{_seg(namespace or 'heads/', keep_slashes=True)}",
            params={"per_page": per_page, "page": page},
        )

    async def get_reference(self, owner: str, repo: str, ref: str) -> JSON:
        logger.info("Fetching git reference '%s' from %s/%s", ref, owner, repo)
        return await self._call("GET", f"{self._repo_path(owner, repo)}/git/ref/{_seg(ref, keep_slashes=True)}")

    async def create_reference(self, owner: str, repo: str, ref: str, sha: str) -> JSON:
        logger.info("Creating git reference '%s' in %s/%s", ref, owner, repo)
        return await self._call("POST", f"{self._repo_path(owner, repo)}/git/refs", json_body={"ref": ref, "sha": sha})

    async def update_reference(self, owner: str, repo: str, ref: str, sha: str, *, force: bool | None = None) -> JSON:
        logger.info("Updating git reference '%s' in %s/%s", ref, owner, repo)
        return await self._call(
            "PATCH",
            f"{self._repo_path(owner, repo)}/git/refs/{_seg(ref, keep_slashes=True)}",
            json_body=_compact({"sha": sha, "force": force}),
        )

    async def delete_reference(self, owner: str, repo: str, ref: str) -> None:
        logger.info("Deleting git reference '%s' from %s/%s", ref, owner, repo)
        return await self._call("DELETE", f"{self._repo_path(owner, repo)}/git/refs/{_seg(ref, keep_slashes=True)}")

    # Tags

    async def create_tag(
        self,
        owner: str,
        repo: str,
        tag: str,
        message: str,
        object_sha: str,
        object_type: str,
        *,
        tagger: JSON | None = None,
    ) -> JSON:
        logger.info("Creating tag '%s' in %s/%s", tag, owner, repo)
        payload = _compact(
            {"tag": tag, "message": message, "object": object_sha, "type": object_type, "tagger": tagger}
        )
        return await self._call("POST", f"{self._repo_path(owner, repo)}/git/tags", json_body=payload)

    async def get_tag(self, owner: str, repo: str, tag_sha: str) -> JSON:
        logger.info("Fetching tag %s from %s/%s", tag_sha, owner, repo)
        return await self._call("GET", f"{self._repo_path(owner, repo)}/git/tags/{_seg(tag_sha)}")

    # Releases

    async def list_releases(
        self, owner: str, repo: str, *, per_page: int | None = None, page: int | None = None
    ) -> list[JSON]:
        logger.info("Listing releases for %s/%s", owner, repo)
        return await self._call(
            "GET", f"{self._repo_path(owner, repo)}/releases", params={"per_page": per_page, "page": page}
        )

    async def get_release(self, owner: str, repo: str, release_id: int) -> JSON:
        logger.info("Fetching release %s from %s/%s", release_id, owner, repo)
        return await self._call("GET", f"{self._repo_path(owner, repo)}/releases/{release_id}")

    async def get_release_by_tag(self, owner: str, repo: str, tag: str) -> JSON:
        logger.info("Fetching release by tag '%s' from %s/%s", tag, owner, repo)
        return await self._call("GET", f"{self._repo_path(owner, repo)}/releases/tags/{_seg(tag)}")

    async def get_latest_release(self, owner: str, repo: str) -> JSON:
        logger.info("Fetching latest release from %s/%s", owner, repo)
        return await self._call("GET", f"{self._repo_path(owner, repo)}/releases/latest")

    async def create_release(
        self,
        owner: str,
        repo: str,
        tag_name: str,
        *,
        target_commitish: str | None = None,
        name: str | None = None,
        body: str | None = None,
        draft: bool | None = None,
        prerelease: bool | None = None,
        discussion_category_name: str | None = None,
        generate_release_notes: bool | None = None,
    ) -> JSON:
        logger.info("Creating release '%s' in %s/%s", tag_name, owner, repo)
        payload = _compact(
            {
                "tag_name": tag_name,
                "target_commitish": target_commitish,
                "name": name,
                "body": body,
                "draft": draft,
                "prerelease": prerelease,
                "discussion_category_name": discussion_category_name,
                "generate_release_notes": generate_release_notes,
            }
        )
        return await self._call("POST", f"{self._repo_path(owner, repo)}/releases", json_body=payload)

    async def update_release(
        self,
        owner: str,
        repo: str,
        release_id: int,
        *,
        tag_name: str | None = None,
        target_commitish: str | None = None,
        name: str | None = None,
        body: str | None = None,
        draft: bool | None = None,
        prerelease: bool | None = None,
        discussion_category_name: str | None = None,
    ) -> JSON:
        logger.info("Updating release %s in %s/%s", release_id, owner, repo)
        payload = _compact(
            {
                "tag_name": tag_name,
                "target_commitish": target_commitish,
                "name": name,
                "body": body,
                "draft": draft,
                "prerelease": prerelease,
                "discussion_category_name": discussion_category_name,
            }
        )
        return await self._call("PATCH", f"{self._repo_path(owner, repo)}/releases/{release_id}", json_body=payload)

    async def delete_release(self, owner: str, repo: str, release_id: int) -> None:
        logger.info("Deleting release %s from %s/%s", release_id, owner, repo)
        return await self._call("DELETE", f"{self._repo_path(owner, repo)}/releases/{release_id}")

    async def list_release_assets(
        self, owner: str, repo: str, release_id: int, *, per_page: int = 30, page: int = 1
    ) -> list[JSON]:
        logger.info("Listing assets for release %s in %s/%s", release_id, owner, repo)
        return await self._call(
            "GET",
            f"{self._repo_path(owner, repo)}/releases/{release_id}/assets",
            params={"per_page": per_page, "page": page},
        )

    async def get_release_asset(self, owner: str, repo: str, asset_id: int) -> JSON:
        logger.info("Fetching asset %s from %s/%s", asset_id, owner, repo)
        return await self._call("GET", f"{self._repo_path(owner, repo)}/releases/assets/{asset_id}")

    async def upload_release_asset(
        self,
        owner: str,
        repo: str,
        release_id: int,
        name: str,
        data: str | bytes,
        *,
        label: str | None = None,
    ) -> JSON:
        """Upload an asset; text data is sent as UTF-8 bytes to the uploads host."""
        logger.info("Uploading asset '%s' to release %s in %s/%s", name, release_id, owner, repo)
        content = data.encode("utf-8") if isinstance(data, str) else data
        return await self._call(
            "POST",
            f"{self._repo_path(owner, repo)}/releases/{release_id}/assets",
            params={"name": name, "label": label},
            content=content,
            content_type="application/octet-stream",
            base_url=self._config.uploads_base_url,
        )

    async def update_release_asset(
        self, owner: str, repo: str, asset_id: int, *, name: str | None = None, label: str | None = None
    ) -> JSON:
        logger.info("Updating asset %s in %s/%s", asset_id, owner, repo)
        return await self._call(
            "PATCH",
            f"{self._repo_path(owner, repo)}/releases/assets/{asset_id}",
            json_body=_compact({"name": name, "label": label}),
        )

    async def delete_release_asset(self, owner: str, repo: str, asset_id: int) -> None:
        logger.info("Deleting asset %s from %s/%s", asset_id, owner, repo)
        return await self._call("DELETE", f"{self._repo_path(owner, repo)}/releases/assets/{asset_id}")

    async def generate_release_notes(
        self,
        owner: str,
        repo: str,
        tag_name: str,
        *,
        target_commitish: str | None = None,
        previous_tag_name: str | None = None,
        configuration_file_path: str | None = None,
    ) -> JSON:
        logger.info("Generating release notes for tag '%s' in %s/%s", tag_name, owner, repo)
        payload = _compact(
            {
                "tag_name": tag_name,
                "target_commitish": target_commitish,
                "previous_tag_name": previous_tag_name,
                "configuration_file_path": configuration_file_path,
            }
        )
        return await self._call("POST", f"{self._repo_path(owner, repo)}/releases/generate-notes", json_body=payload)

    # Actions: workflows and runs

    async def list_workflows(
        self, owner: str, repo: str, *, per_page: int | None = None, page: int | None = None
    ) -> list[JSON]:
        logger.info("Listing workflows for %s/%s", owner, repo)
        data = await self._call(
            "GET", f"{self._repo_path(owner, repo)}/actions/workflows", params={"per_page": per_page, "page": page}
        )
        return _unwrap_list(data, "workflows")

    async def get_workflow(self, owner: str, repo: str, workflow_id: int | str) -> JSON:
        logger.info("Fetching workflow %s from %s/%s", workflow_id, owner, repo)
        return await self._call("GET", f"{self._repo_path(owner, repo)}/actions/workflows/{_seg(workflow_id)}")

    async def list_workflow_runs(
        self,
        owner: str,
        repo: str,
        *,
        workflow_id: int | str | None = None,
        actor: str | None = None,
        branch: str | None = None,
        event: str | None = None,
        status: str | None = None,
        per_page: int | None = None,
        page: int | None = None,
        created: str | None = None,
        exclude_pull_requests: bool | None = None,
        check_suite_id: int | None = None,
        head_sha: str | None = None,
    ) -> list[JSON]:
        """List runs for one workflow when `workflow_id` is given, else for the repository."""
        logger.info("Listing workflow runs for %s/%s", owner, repo)
        params = {
            "actor": actor or None,
            "branch": branch or None,
            "event": event or None,
            "status": status or None,
            "per_page": per_page,
            "page": page,
            "created": created or None,
            "exclude_pull_requests": exclude_pull_requests,
            "check_suite_id": check_suite_id or None,
            "head_sha": head_sha or None,
        }
        if workflow_id:
            path = f"{self._repo_path(owner, repo)}/actions/workflows/{_seg(workflow_id)}/runs"
        else:
            path = f"{self._repo_path(owner, repo)}/actions/runs"
        data = await self._call("GET", path, params=params)
        return _unwrap_list(data, "workflow_runs")

    async def get_workflow_run(self, owner: str, repo: str, run_id: int) -> JSON:
        logger.info("Fetching workflow run %s from %s/%s", run_id, owner, repo)
        return await self._call("GET", f"{self._repo_path(owner, repo)}/actions/runs/{run_id}")

    async def rerun_workflow(self, owner: str, repo: str, run_id: int) -> Any:
        logger.info("Re-running workflow %s in %s/%s", run_id, owner, repo)
        return await self._call("POST", f"{self._repo_path(owner, repo)}/actions/runs/{run_id}/rerun")

    async def rerun_failed_jobs(self, owner: str, repo: str, run_id: int) -> Any:
        logger.info("Re-running failed jobs for workflow %s in %s/%s", run_id, owner, repo)
        return await self._call("POST", f"{self._repo_path(owner, repo)}/actions/runs/{run_id}/rerun-failed-jobs")

    async def cancel_workflow_run(self, owner: str, repo: str, run_id: int) -> Any:
        logger.info("Cancelling workflow run %s in %s/%s", run_id, owner, repo)
        return await self._call("POST", f"{self._repo_path(owner, repo)}/actions/runs/{run_id}/cancel")

    async def delete_workflow_run(self, owner: str, repo: str, run_id: int) -> None:
        logger.info("Deleting workflow run %s from %s/%s", run_id, owner, repo)
        return await self._call("DELETE", f"{self._repo_path(owner, repo)}/actions/runs/{run_id}")

    async def list_workflow_jobs(
        self,
        owner: str,
        repo: str,
        run_id: int,
        *,
        job_filter: str | None = None,
        per_page: int | None = None,
        page: int | None = None,
    ) -> list[JSON]:
        logger.info("Listing jobs for workflow run %s in %s/%s", run_id, owner, repo)
        data = await self._call(
            "GET",
            f"{self._repo_path(owner, repo)}/actions/runs/{run_id}/jobs",
            params={"filter": job_filter, "per_page": per_page, "page": page},
        )
        return _unwrap_list(data, "jobs")

    async def get_workflow_job(self, owner: str, repo: str, job_id: int) -> JSON:
        logger.info("Fetching job %s from %s/%s", job_id, owner, repo)
        return await self._call("GET", f"{self._repo_path(owner, repo)}/actions/jobs/{job_id}")

    async def download_job_logs(self, owner: str, repo: str, job_id: int) -> Any:
        logger.info("Downloading logs for job %s from %s/%s", job_id, owner, repo)
        return await self._download(f"{self._repo_path(owner, repo)}/actions/jobs/{job_id}/logs")

    async def download_workflow_run_logs(self, owner: str, repo: str, run_id: int) -> Any:
        logger.info("Downloading logs for workflow run %s from %s/%s", run_id, owner, repo)
        return await self._download(f"{self._repo_path(owner, repo)}/actions/runs/{run_id}/logs")

    async def delete_workflow_run_logs(self, owner: str, repo: str, run_id: int) -> None:
        logger.info("Deleting logs for workflow run %s from %s/%s", run_id, owner, repo)
        return await self._call("DELETE", f"{self._repo_path(owner, repo)}/actions/runs/{run_id}/logs")

    # Actions: artifacts, dispatch, usage

    async def list_artifacts(
        self,
        owner: str,
        repo: str,
        *,
        run_id: int | None = None,
        per_page: int | None = None,
        page: int | None = None,
        name: str | None = None,
    ) -> list[JSON]:
        """List artifacts of one run when `run_id` is given, else of the repository."""
        logger.info("Listing artifacts for %s/%s", owner, repo)
        if run_id:
            path = f"{self._repo_path(owner, repo)}/actions/runs/{run_id}/artifacts"
        else:
            path = f"{self._repo_path(owner, repo)}/actions/artifacts"
        data = await self._call("GET", path, params={"per_page": per_page, "page": page, "name": name})
        return _unwrap_list(data, "artifacts")

    async def get_artifact(self, owner: str, repo: str, artifact_id: int) -> JSON:
        logger.info("Fetching artifact %s from %s/%s", artifact_id, owner, repo)
        return await self._call("GET", f"{self._repo_path(owner, repo)}/actions/artifacts/{artifact_id}")

    async def download_artifact(self, owner: str, repo: str, artifact_id: int) -> Any:
        logger.info("Downloading artifact %s from %s/%s", artifact_id, owner, repo)
        return await self._download(f"{self._repo_path(owner, repo)}/actions/artifacts/{artifact_id}/zip")

    async def delete_artifact(self, owner: str, repo: str, artifact_id: int) -> None:
        logger.info("Deleting artifact %s from %s/%s", artifact_id, owner, repo)
        return await self._call("DELETE", f"{self._repo_path(owner, repo)}/actions/artifacts/{artifact_id}")

    async def create_workflow_dispatch(
        self, owner: str, repo: str, workflow_id: int | str, ref: str, *, inputs: JSON | None = None
    ) -> None:
        logger.info("Triggering workflow %s in %s/%s", workflow_id, owner, repo)
        return await self._call(
            "POST",
            f"{self._repo_path(owner, repo)}/actions/workflows/{_seg(workflow_id)}/dispatches",
            json_body=_compact({"ref": ref, "inputs": inputs}),
        )

    async def get_workflow_usage(self, owner: str, repo: str, workflow_id: int | str) -> JSON:
        logger.info("Fetching usage for workflow %s in %s/%s", workflow_id, owner, repo)
        return await self._call(
            "GET", f"{self._repo_path(owner, repo)}/actions/workflows/{_seg(workflow_id)}/timing"
        )

    async def get_workflow_run_usage(self, owner: str, repo: str, run_id: int) -> JSON:
        logger.info("Fetching usage for workflow run %s in %s/%s", run_id, owner, repo)
        return await self._call("GET", f"{self._repo_path(owner, repo)}/actions/runs/{run_id}/timing")

    # Search

    async def _search(self, kind: str, params: dict[str, Any]) -> JSON:
        return await self._call("GET", f"/search/{kind}", params=params)

    async def search_repositories(
        self,
        q: str,
        *,
        sort: str | None = None,
        order: str | None = None,
        per_page: int | None = None,
        page: int | None = None,
    ) -> JSON:
        logger.info("Searching repositories with query: %s", q)
        return await self._search(
            "repositories", {"q": q, "sort": sort, "order": order, "per_page": per_page, "page": page}
        )

    async def search_code(
        self,
        q: str,
        *,
        sort: str | None = None,
        order: str | None = None,
        per_page: int | None = None,
        page: int | None = None,
    ) -> JSON:
        logger.info("Searching code with query: %s", q)
        return await self._search("code", {"q": q, "sort": sort, "order": order, "per_page": per_page, "page": page})

    async def search_commits(
        self,
        q: str,
        *,
        sort: str | None = None,
        order: str | None = None,
        per_page: int | None = None,
        page: int | None = None,
    ) -> JSON:
        logger.info("Searching commits with query: %s", q)
        return await self._search(
            "commits", {"q": q, "sort": sort, "order": order, "per_page": per_page, "page": page}
        )

    async def search_issues(
        self,
        q: str,
        *,
        sort: str | None = None,
        order: str | None = None,
        per_page: int | None = None,
        page: int | None = None,
    ) -> JSON:
        logger.info("Searching issues/PRs with query: %s", q)
        return await self._search("issues", {"q": q, "sort": sort, "order": order, "per_page": per_page, "page": page})

    async def search_users(
        self,
        q: str,
        *,
        sort: str | None = None,
        order: str | None = None,
        per_page: int | None = None,
        page: int | None = None,
    ) -> JSON:
        logger.info("Searching users with query: %s", q)
        return await self._search("users", {"q": q, "sort": sort, "order": order, "per_page": per_page, "page": page})

    async def search_topics(self, q: str, *, per_page: int | None = None, page: int | None = None) -> JSON:
        logger.info("Searching topics with query: %s", q)
        return await self._search("topics", {"q": q, "per_page": per_page, "page": page})

    async def search_labels(
        self,
        repository_id: int,
        q: str,
        *,
        sort: str | None = None,
        order: str | None = None,
        per_page: int | None = None,
        page: int | None = None,
    ) -> JSON:
        logger.info("Searching labels in repository %s with query: %s", repository_id, q)
        return await self._search(
            "labels",
            {
                "repository_id": repository_id,
                "q": q,
                "sort": sort,
                "order": order,
                "per_page": per_page,
                "page": page,
            },
        )

    # Webhooks

    def _hook_path(self, owner: str, repo: str, hook_id: int) -> str:
        return f"{self._repo_path(owner, repo)}/hooks/{hook_id}"

    async def list_webhooks(
        self, owner: str, repo: str, *, per_page: int | None = None, page: int | None = None
    ) -> list[JSON]:
        logger.info("Listing webhooks for %s/%s", owner, repo)
        return await self._call(
            "GET", f"{self._repo_path(owner, repo)}/hooks", params={"per_page": per_page, "page": page}
        )

    async def get_webhook(self, owner: str, repo: str, hook_id: int) -> JSON:
        logger.info("Getting webhook %s for %s/%s", hook_id, owner, repo)
        return await self._call("GET", self._hook_path(owner, repo, hook_id))

    async def create_webhook(
        self,
        owner: str,
        repo: str,
        config: JSON,
        *,
        events: list[str] | None = None,
        active: bool | None = None,
    ) -> JSON:
        logger.info("Creating webhook for %s/%s", owner, repo)
        payload = {
            "name": "web",
            "config": config,
            "events": events or ["push"],
            "active": True if active is None else active,
        }
        return await self._call("POST", f"{self._repo_path(owner, repo)}/hooks", json_body=payload)

    async def update_webhook(
        self,
        owner: str,
        repo: str,
        hook_id: int,
        *,
        config: JSON | None = None,
        events: list[str] | None = None,
        active: bool | None = None,
        add_events: list[str] | None = None,
        remove_events: list[str] | None = None,
    ) -> JSON:
        logger.info("Updating webhook %s for %s/%s", hook_id, owner, repo)
        payload = _compact(
            {
                "config": config,
                "events": events,
                "active": active,
                "add_events": add_events,
                "remove_events": remove_events,
            }
        )
        return await self._call("PATCH", self._hook_path(owner, repo, hook_id), json_body=payload)

    async def delete_webhook(self, owner: str, repo: str, hook_id: int) -> None:
        logger.info("Deleting webhook %s for %s/%s", hook_id, owner, repo)
        return await self._call("DELETE", self._hook_path(owner, repo, hook_id))

    async def ping_webhook(self, owner: str, repo: str, hook_id: int) -> None:
        logger.info("Pinging webhook %s for %s/%s", hook_id, owner, repo)
        return await self._call("POST", f"{self._hook_path(owner, repo, hook_id)}/pings")

    async def test_webhook(self, owner: str, repo: str, hook_id: int) -> None:
        logger.info("Testing webhook %s for %s/%s", hook_id, owner, repo)
        return await self._call("POST", f"{self._hook_path(owner, repo, hook_id)}/tests")

    async def list_webhook_deliveries(
        self,
        owner: str,
        repo: str,
        hook_id: int,
        *,
        per_page: int | None = None,
        cursor: str | None = None,
        redelivery: bool | None = None,
    ) -> list[JSON]:
        logger.info("Listing deliveries for webhook %s in %s/%s", hook_id, owner, repo)
        return await self._call(
            "GET",
            f"{self._hook_path(owner, repo, hook_id)}/deliveries",
            params={"per_page": per_page, "cursor": cursor, "redelivery": redelivery},
        )

    async def get_webhook_delivery(self, owner: str, repo: str, hook_id: int, delivery_id: int) -> JSON:
        logger.info("Getting delivery %s for webhook %s in %s/%s", delivery_id, hook_id, owner, repo)
        return await self._call("GET", f"{self._hook_path(owner, repo, hook_id)}/deliveries/{delivery_id}")

    async def redeliver_webhook(self, owner: str, repo: str, hook_id: int, delivery_id: int) -> Any:
        logger.info("Redelivering webhook %s delivery %s for %s/%s", hook_id, delivery_id, owner, repo)
        return await self._call("POST", f"{self._hook_path(owner, repo, hook_id)}/deliveries/{delivery_id}/attempts")

    # Collaborators and invitations

    async def list_collaborators(
        self,
        owner: str,
        repo: str,
        *,
        affiliation: str | None = None,
        permission: str | None = None,
        per_page: int | None = None,
        page: int | None = None,
    ) -> list[JSON]:
        logger.info("Listing collaborators for %s/%s", owner, repo)
        params = {"affiliation": affiliation, "permission": permission, "per_page": per_page, "page": page}
        return await self._call("GET", f"{self._repo_path(owner, repo)}/collaborators", params=params)

    async def check_collaborator(self, owner: str, repo: str, username: str) -> bool:
        """Return whether `username` is a collaborator.

        GitHub answers 204 for members and 404 for non-members; only the 404 is
        translated, every other failure propagates.
        """
        logger.info("Checking if %s is a collaborator on %s/%s", username, owner, repo)
        result = await self._call(
            "GET", f"{self._repo_path(owner, repo)}/collaborators/{_seg(username)}", not_found=_NOT_FOUND
        )
        return result is not _NOT_FOUND

    async def add_collaborator(
        self, owner: str, repo: str, username: str, *, permission: str | None = None
    ) -> JSON | None:
        """Invite or add a collaborator.

        Returns the created invitation, or None when the user already had access.
        """
        logger.info("Adding %s as collaborator to %s/%s", username, owner, repo)
        return await self._call(
            "PUT",
            f"{self._repo_path(owner, repo)}/collaborators/{_seg(username)}",
            json_body=_compact({"permission": permission}),
        )

    async def remove_collaborator(self, owner: str, repo: str, username: str) -> None:
        logger.info("Removing %s from %s/%s", username, owner, repo)
        return await self._call("DELETE", f"{self._repo_path(owner, repo)}/collaborators/{_seg(username)}")

    async def get_collaborator_permission(self, owner: str, repo: str, username: str) -> str | None:
        logger.info("Getting permission level for %s on %s/%s", username, owner, repo)
        data = await self._call("GET", f"{self._repo_path(owner, repo)}/collaborators/{_seg(username)}/permission")
        return data.get("permission") if isinstance(data, dict) else None

    async def list_repository_invitations(
        self, owner: str, repo: str, *, per_page: int = 30, page: int = 1
    ) -> list[JSON]:
        logger.info("Listing invitations for %s/%s", owner, repo)
        return await self._call(
            "GET", f"{self._repo_path(owner, repo)}/invitations", params={"per_page": per_page, "page": page}
        )

    async def delete_repository_invitation(self, owner: str, repo: str, invitation_id: int) -> None:
        logger.info("Deleting invitation %s for %s/%s", invitation_id, owner, repo)
        return await self._call("DELETE", f"{self._repo_path(owner, repo)}/invitations/{invitation_id}")

    # Teams

    def _team_repo_path(self, owner: str, repo: str, team_slug: str) -> str:
        # Team endpoints are org-scoped; the repository owner is the org.
        return f"/orgs/{_seg(owner)}/teams/{_seg(team_slug)}/repos/{_seg(owner)}/{_seg(repo)}"

    async def list_repository_teams(self, owner: str, repo: str, *, per_page: int = 30, page: int = 1) -> list[JSON]:
        logger.info("Listing teams for %s/%s", owner, repo)
        return await self._call(
            "GET", f"{self._repo_path(owner, repo)}/teams", params={"per_page": per_page, "page": page}
        )

    async def check_team_permission(self, owner: str, repo: str, team_slug: str) -> JSON | None:
        """Return the team's repository access, or None when the team has none (404)."""
        logger.info("Checking team %s permission for %s/%s", team_slug, owner, repo)
        return await self._call(
            "GET",
            self._team_repo_path(owner, repo, team_slug),
            not_found=None,
            accept="application/vnd.github.v3.repository+json",
        )

    async def add_repository_team(
        self, owner: str, repo: str, team_slug: str, *, permission: str | None = None
    ) -> None:
        logger.info("Adding team %s to %s/%s", team_slug, owner, repo)
        return await self._call(
            "PUT", self._team_repo_path(owner, repo, team_slug), json_body=_compact({"permission": permission})
        )

    async def remove_repository_team(self, owner: str, repo: str, team_slug: str) -> None:
        logger.info("Removing team %s from %s/%s", team_slug, owner, repo)
        return await self._call("DELETE", self._team_repo_path(owner, repo, team_slug))

    # Security features

    async def enable_automated_security_fixes(self, owner: str, repo: str) -> None:
        logger.info("Enabling automated security fixes for %s/%s", owner, repo)
        return await self._call("PUT", f"{self._repo_path(owner, repo)}/automated-security-fixes")

    async def disable_automated_security_fixes(self, owner: str, repo: str) -> None:
        logger.info("Disabling automated security fixes for %s/%s", owner, repo)
        return await self._call("DELETE", f"{self._repo_path(owner, repo)}/automated-security-fixes")

    async def enable_vulnerability_alerts(self, owner: str, repo: str) -> None:
        logger.info("Enabling vulnerability alerts for %s/%s", owner, repo)
        return await self._call("PUT", f"{self._repo_path(owner, repo)}/vulnerability-alerts")

    async def disable_vulnerability_alerts(self, owner: str, repo: str) -> None:
        logger.info("Disabling vulnerability alerts for %s/%s", owner, repo)
        return await self._call("DELETE", f"{self._repo_path(owner, repo)}/vulnerability-alerts")
