"""Core exception types shared across layers."""

from __future__ import annotations

from typing import Any, Sequence


class GitHubAPIError(Exception):
    """Raised when the GitHub API answers a request with an error status."""

    def __init__(self, status_code: int, method: str, path: str, detail: str) -> None:
        super().__init__(f"GitHub {method} {path} failed with {status_code}: {detail}")
        self.status_code = status_code
        self.method = method
        self.path = path
        self.detail = detail


class QueueSendError(Exception):
    """Raised when the queue rejects one or more entries of a batch send."""

    def __init__(self, failed: Sequence[dict[str, Any]]) -> None:
        ids = ", ".join(str(entry.get("Id")) for entry in failed)
        super().__init__(f"Failed to queue {len(failed)} message(s): {ids}")
        self.failed = list(failed)


class MalformedMessageError(ValueError):
    """Raised when a queue message body cannot be parsed into an export request."""


__all__ = [
    "GitHubAPIError",
    "MalformedMessageError",
    "QueueSendError",
]
