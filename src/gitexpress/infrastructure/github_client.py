"""GitHub REST API client."""

import base64
from typing import Any, Optional
from urllib.parse import quote

from loguru import logger

from .errors import GitHubError, HTTPClientError
from .http_client import AsyncHTTPClient
from .parsers.interfaces import HTTPClientProtocol

GITHUB_API_URL = "https://api.github.com"


class GitHubApiClient:
    """Minimal GitHub client: identity, repositories and file contents."""

    def __init__(self, token: str, http_client: Optional[HTTPClientProtocol] = None):
        self.token = token
        self.http_client = http_client or AsyncHTTPClient(impersonate=None)

    @property
    def headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.token}",
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
        }

    async def get_authenticated_user(self) -> dict[str, Any]:
        """Return the user owning the token (``login`` at least)."""
        try:
            return await self.http_client.get_json(f"{GITHUB_API_URL}/user", headers=self.headers)
        except HTTPClientError as e:
            raise GitHubError(f"Failed to get authenticated user: {e}", e.status_code) from e

    async def get_repository(self, owner: str, name: str) -> Optional[dict[str, Any]]:
        """Return repository data, or None if it does not exist."""
        url = f"{GITHUB_API_URL}/repos/{owner}/{name}"
        try:
            return await self.http_client.get_json(url, headers=self.headers)
        except HTTPClientError as e:
            if e.is_not_found:
                logger.debug(f"Repository {owner}/{name} not found")
                return None
            raise GitHubError(f"Failed to get repository {owner}/{name}: {e}", e.status_code) from e

    async def create_repository(
        self, name: str, private: bool = True, description: Optional[str] = None
    ) -> dict[str, Any]:
        payload: dict[str, Any] = {"name": name, "private": private}
        if description:
            payload["description"] = description

        try:
            return await self.http_client.post_json(
                f"{GITHUB_API_URL}/user/repos", payload, headers=self.headers
            )
        except HTTPClientError as e:
            raise GitHubError(f"Failed to create repository {name}: {e}", e.status_code) from e

    async def create_file(
        self,
        owner: str,
        repo: str,
        path: str,
        message: str,
        content: str,
    ) -> dict[str, Any]:
        """Commit ``content`` (UTF-8 text) as a new file at ``path``."""
        payload = {"message": message, "content": encode_content(content)}

        url = f"{GITHUB_API_URL}/repos/{owner}/{repo}/contents/{quote(path)}"
        try:
            return await self.http_client.put_json(url, payload, headers=self.headers)
        except HTTPClientError as e:
            raise GitHubError(f"Failed to commit {path} to {owner}/{repo}: {e}", e.status_code) from e


def encode_content(content: str) -> str:
    """Base64 of the UTF-8 bytes of ``content``."""
    return base64.b64encode(content.encode("utf-8")).decode("ascii")
