"""GitHub adapter implementing the git data port over the REST API."""

from __future__ import annotations

from typing import Any, Optional, Sequence

import httpx

from gloss_export.core.exceptions import GitHubAPIError
from gloss_export.core.logging import get_logger
from gloss_export.core.models import TreeItem
from gloss_export.core.ports import GitHubPort

logger = get_logger(__name__)

GITHUB_API_VERSION = "2022-11-28"
REQUEST_TIMEOUT_SECONDS = 60.0


class GitHubAdapter(GitHubPort):
    """Git data operations scoped to a single owner/repository.

    The underlying ``httpx.AsyncClient`` is created on first use and reused
    for the lifetime of the adapter.
    """

    def __init__(
        self,
        *,
        token: str,
        owner: str,
        repo: str,
        api_url: str = "https://api.github.com",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._token = token
        self._owner = owner
        self._repo = repo
        self._api_url = api_url.rstrip("/")
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=f"{self._api_url}/repos/{self._owner}/{self._repo}",
                headers={
                    "Authorization": f"Bearer {self._token}",
                    "Accept": "application/vnd.github+json",
                    "X-GitHub-Api-Version": GITHUB_API_VERSION,
                    "User-Agent": "gloss-export",
                },
                timeout=REQUEST_TIMEOUT_SECONDS,
                transport=self._transport,
            )
        return self._client

    async def _request(
        self, method: str, path: str, payload: Optional[dict[str, Any]] = None
    ) -> dict[str, Any]:
        client = self._get_client()
        response = await client.request(method, path, json=payload)
        if response.status_code >= 400:
            logger.error(
                "GitHub %s %s failed with %s: %s",
                method,
                path,
                response.status_code,
                response.text,
            )
            raise GitHubAPIError(response.status_code, method, path, response.text)
        return response.json()

    async def create_blob(self, content: str, encoding: str = "utf-8") -> str:
        data = await self._request(
            "POST", "/git/blobs", {"content": content, "encoding": encoding}
        )
        return data["sha"]

    async def get_tree(self, tree_sha: str) -> str:
        data = await self._request("GET", f"/git/trees/{tree_sha}")
        return data["sha"]

    async def create_tree(self, base_tree: str, tree: Sequence[TreeItem]) -> str:
        data = await self._request(
            "POST",
            "/git/trees",
            {"base_tree": base_tree, "tree": [item.to_payload() for item in tree]},
        )
        return data["sha"]

    async def get_ref(self, ref: str) -> str:
        data = await self._request("GET", f"/git/ref/{ref}")
        return data["object"]["sha"]

    async def create_commit(self, tree: str, message: str, parents: Sequence[str]) -> str:
        data = await self._request(
            "POST",
            "/git/commits",
            {"message": message, "tree": tree, "parents": list(parents)},
        )
        return data["sha"]

    async def update_ref(self, ref: str, sha: str) -> None:
        await self._request("PATCH", f"/git/refs/{ref}", {"sha": sha})

    async def aclose(self) -> None:
        """Close the HTTP client if it was ever opened."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None


__all__ = ["GitHubAdapter", "GITHUB_API_VERSION"]
