"""Infrastructure adapter exports."""

from gloss_export.core.exceptions import (  # noqa: F401
    GitHubAPIError,
    QueueSendError,
)

from .database import DatabaseAdapter
from .github import GitHubAdapter
from .queue import QueueAdapter

__all__ = [
    "DatabaseAdapter",
    "GitHubAdapter",
    "QueueAdapter",
    "GitHubAPIError",
    "QueueSendError",
]
