"""Protocol definitions for infrastructure adapters."""

# pylint: disable=unnecessary-ellipsis

from __future__ import annotations

from typing import Any, AsyncGenerator, Mapping, Protocol, Sequence

from gloss_export.core.models import TreeItem


class DatabasePort(Protocol):
    """Port exposing read-only queries against the translation database."""

    async def query(self, text: str, *params: Any) -> list[Mapping[str, Any]]:
        """Run ``text`` and return every row."""
        ...

    def query_cursor(
        self, text: str, *params: Any, batch_size: int = 1
    ) -> AsyncGenerator[Mapping[str, Any], None]:
        """Yield rows of ``text`` lazily, fetching ``batch_size`` rows at a time."""
        ...


class GitHubPort(Protocol):
    """Port exposing the git data operations of the target repository."""

    async def create_blob(self, content: str, encoding: str = "utf-8") -> str:
        """Create a blob and return its sha."""
        ...

    async def get_tree(self, tree_sha: str) -> str:
        """Return the sha of the tree identified by ``tree_sha`` (a sha or branch name)."""
        ...

    async def create_tree(self, base_tree: str, tree: Sequence[TreeItem]) -> str:
        """Create a tree overlaying ``tree`` onto ``base_tree`` and return its sha."""
        ...

    async def get_ref(self, ref: str) -> str:
        """Return the sha ``ref`` (e.g. ``heads/main``) points at."""
        ...

    async def create_commit(self, tree: str, message: str, parents: Sequence[str]) -> str:
        """Create a commit and return its sha."""
        ...

    async def update_ref(self, ref: str, sha: str) -> None:
        """Move ``ref`` to ``sha``."""
        ...


class QueuePort(Protocol):
    """Port exposing the export work queue."""

    async def send_export_requests(self, language_codes: Sequence[str]) -> None:
        """Enqueue one export request per language code."""
        ...


__all__ = ["DatabasePort", "GitHubPort", "QueuePort"]
