"""Configuration for github-rest-mcp.

Library callers construct `ClientConfig` directly from a token and an optional
enterprise API URL. The stdio entry point loads the same structure from the host
environment. Tokens and private key paths are secrets and are never echoed in
error messages or logs.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from .errors import CONFIG_ERROR, GitHubAPIError

DEFAULT_API_BASE_URL = "https://api.github.com"
DEFAULT_UPLOADS_BASE_URL = "https://uploads.github.com"
DEFAULT_TOTAL_TIMEOUT_S = 60.0


@dataclass(frozen=True, slots=True)
class LimitsConfig:
    """Network timeouts handed to the HTTP transport."""

    total_timeout_s: float = DEFAULT_TOTAL_TIMEOUT_S
    connect_timeout_s: float = 5.0
    read_timeout_s: float = 30.0


@dataclass(frozen=True, slots=True)
class GitHubAppCredentials:
    """GitHub App installation binding."""

    app_id: int
    installation_id: int
    private_key_path: Path


@dataclass(frozen=True, slots=True)
class ClientConfig:
    """Credential and endpoint configuration for a client instance."""

    token: str | None = None
    app: GitHubAppCredentials | None = None
    api_base_url: str = DEFAULT_API_BASE_URL
    limits: LimitsConfig = field(default_factory=LimitsConfig)

    def __post_init__(self) -> None:
        object.__setattr__(self, "api_base_url", normalize_base_url(self.api_base_url))
        if not self.token and self.app is None:
            raise GitHubAPIError(message="A GitHub token or GitHub App credentials are required", code=CONFIG_ERROR)

    @property
    def uploads_base_url(self) -> str:
        return uploads_url_for(self.api_base_url)


def normalize_base_url(url: str | None) -> str:
    if not url:
        return DEFAULT_API_BASE_URL
    url = url.strip().rstrip("/")
    if not url.startswith(("https://", "http://")):
        raise GitHubAPIError(message="GitHub API URL must be an http(s) URL", code=CONFIG_ERROR)
    return url


def uploads_url_for(api_base_url: str) -> str:
    """Derive the release-asset upload host for an API base URL.

    github.com uploads live on a separate host; GitHub Enterprise Server serves
    them under `/api/uploads` next to `/api/v3`.
    """
    if api_base_url == DEFAULT_API_BASE_URL:
        return DEFAULT_UPLOADS_BASE_URL
    if api_base_url.endswith("/api/v3"):
        return api_base_url[: -len("/api/v3")] + "/api/uploads"
    return api_base_url


def _parse_positive_float(value: str | None, *, name: str, default: float) -> float:
    if value is None or not value.strip():
        return default
    try:
        parsed = float(value)
    except ValueError as exc:
        raise GitHubAPIError(message=f"{name} must be a number", code=CONFIG_ERROR) from exc
    if parsed <= 0:
        raise GitHubAPIError(message=f"{name} must be positive", code=CONFIG_ERROR)
    return parsed


def _load_app_credentials() -> GitHubAppCredentials | None:
    app_id_raw = os.getenv("GITHUB_APP_ID")
    installation_id_raw = os.getenv("GITHUB_APP_INSTALLATION_ID")
    private_key_path_raw = os.getenv("GITHUB_APP_PRIVATE_KEY_PATH")

    if not (app_id_raw or installation_id_raw or private_key_path_raw):
        return None
    if not app_id_raw or not installation_id_raw or not private_key_path_raw:
        raise GitHubAPIError(
            message="Incomplete GitHub App configuration (GITHUB_APP_ID, GITHUB_APP_INSTALLATION_ID, GITHUB_APP_PRIVATE_KEY_PATH)",
            code=CONFIG_ERROR,
        )

    try:
        app_id = int(app_id_raw)
        installation_id = int(installation_id_raw)
    except ValueError as exc:
        raise GitHubAPIError(
            message="GITHUB_APP_ID and GITHUB_APP_INSTALLATION_ID must be integers", code=CONFIG_ERROR
        ) from exc

    key_path = Path(private_key_path_raw)
    if not key_path.is_absolute():
        raise GitHubAPIError(message="GITHUB_APP_PRIVATE_KEY_PATH must be an absolute path", code=CONFIG_ERROR)
    # Fail fast if unreadable; never echo the path.
    if not key_path.is_file():
        raise GitHubAPIError(message="GitHub App private key file is missing or not a file", code=CONFIG_ERROR)

    return GitHubAppCredentials(app_id=app_id, installation_id=installation_id, private_key_path=key_path)


def load_config_from_env() -> ClientConfig:
    """Load and validate configuration from environment variables.

    A personal/installation token (`GITHUB_TOKEN` or `GITHUB_PERSONAL_ACCESS_TOKEN`)
    takes precedence over GitHub App credentials.

    Raises:
        GitHubAPIError: With code CONFIG_ERROR if configuration is missing/invalid.
    """
    token = os.getenv("GITHUB_TOKEN") or os.getenv("GITHUB_PERSONAL_ACCESS_TOKEN")
    app = None if token else _load_app_credentials()

    if not token and app is None:
        raise GitHubAPIError(
            message="Missing credentials: set GITHUB_TOKEN or the GITHUB_APP_* variables",
            code=CONFIG_ERROR,
        )

    timeout = _parse_positive_float(
        os.getenv("GITHUB_MCP_TIMEOUT_S"),
        name="GITHUB_MCP_TIMEOUT_S",
        default=DEFAULT_TOTAL_TIMEOUT_S,
    )

    return ClientConfig(
        token=token,
        app=app,
        api_base_url=normalize_base_url(os.getenv("GITHUB_API_URL")),
        limits=LimitsConfig(total_timeout_s=timeout),
    )
