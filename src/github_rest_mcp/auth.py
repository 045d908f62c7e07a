"""Bearer-token providers.

A provider is an async callable returning the token for the next request. Two are
available: a static token (personal access token, Actions token) and a GitHub App
installation token that is minted from an App JWT and cached until near expiry.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

import httpx
import jwt

from .config import ClientConfig, GitHubAppCredentials
from .errors import CONFIG_ERROR, UNKNOWN_ERROR, GitHubAPIError

TokenProvider = Callable[[], Awaitable[str]]

_REFRESH_MARGIN_S = 30


class StaticTokenProvider:
    """Returns the same token on every call."""

    def __init__(self, token: str) -> None:
        self._token = token

    async def __call__(self) -> str:
        return self._token


@dataclass(frozen=True, slots=True)
class InstallationToken:
    """Cached installation access token + expiry."""

    token: str
    expires_at: datetime


class GitHubAppAuth:
    """Manages GitHub App JWT creation and installation token caching."""

    def __init__(
        self,
        *,
        credentials: GitHubAppCredentials,
        api_base_url: str,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._credentials = credentials
        self._api_base_url = api_base_url.rstrip("/")
        self._transport = transport
        self._lock = asyncio.Lock()
        self._cached: InstallationToken | None = None

    def _build_app_jwt(self) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            # Backdated to tolerate clock drift between us and GitHub.
            "iat": int((now - timedelta(seconds=60)).timestamp()),
            "exp": int((now + timedelta(minutes=9)).timestamp()),
            "iss": str(self._credentials.app_id),
        }
        private_key_pem = self._credentials.private_key_path.read_text(encoding="utf-8")
        return jwt.encode(payload, private_key_pem, algorithm="RS256")

    async def __call__(self) -> str:
        return await self.get_installation_token()

    async def get_installation_token(self) -> str:
        """Get a valid installation access token (refreshing if needed)."""
        async with self._lock:
            if self._cached is not None:
                remaining = (self._cached.expires_at - datetime.now(timezone.utc)).total_seconds()
                if remaining > _REFRESH_MARGIN_S:
                    return self._cached.token

            headers = {
                "Authorization": f"Bearer {self._build_app_jwt()}",
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": "2022-11-28",
            }
            url = f"{self._api_base_url}/app/installations/{self._credentials.installation_id}/access_tokens"
            async with httpx.AsyncClient(follow_redirects=False, timeout=30.0, transport=self._transport) as client:
                resp = await client.post(url, headers=headers, json={})

            if resp.status_code >= 400:
                raise GitHubAPIError(
                    message="Failed to obtain GitHub App installation token",
                    code=f"HTTP_{resp.status_code}",
                    status_code=resp.status_code,
                )

            data = resp.json()
            token = data.get("token") if isinstance(data, dict) else None
            expires_at_raw = data.get("expires_at") if isinstance(data, dict) else None
            if not token or not expires_at_raw:
                raise GitHubAPIError(
                    message="GitHub token response missing required fields",
                    code=UNKNOWN_ERROR,
                )

            # RFC3339 timestamp like 2025-01-01T00:00:00Z
            expires_at = datetime.fromisoformat(expires_at_raw.replace("Z", "+00:00")).astimezone(timezone.utc)
            self._cached = InstallationToken(token=token, expires_at=expires_at)
            return token


def build_token_provider(config: ClientConfig, transport: httpx.AsyncBaseTransport | None = None) -> TokenProvider:
    """Pick the token provider matching the configured credential."""
    if config.token:
        return StaticTokenProvider(config.token)
    if config.app is None:
        raise GitHubAPIError(message="No GitHub credentials configured", code=CONFIG_ERROR)
    return GitHubAppAuth(credentials=config.app, api_base_url=config.api_base_url, transport=transport)
