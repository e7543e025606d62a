"""Application service layer scaffolding for the export pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from gloss_export.core.ports import DatabasePort, GitHubPort, QueuePort


@dataclass(slots=True)
class ServiceContainer:
    """Aggregate of infrastructure ports available to the pipeline."""

    database: Optional[DatabasePort] = None
    github: Optional[GitHubPort] = None
    queue: Optional[QueuePort] = None

    def require_database(self) -> DatabasePort:
        """Return the database port or raise if it was not wired."""
        if self.database is None:
            raise RuntimeError("Database port has not been configured.")
        return self.database

    def require_github(self) -> GitHubPort:
        """Return the GitHub port or raise if it was not wired."""
        if self.github is None:
            raise RuntimeError("GitHub port has not been configured.")
        return self.github

    def require_queue(self) -> QueuePort:
        """Return the queue port or raise if it was not wired."""
        if self.queue is None:
            raise RuntimeError("Queue port has not been configured.")
        return self.queue


def build_default_services(
    *,
    database_port: Optional[DatabasePort] = None,
    github_port: Optional[GitHubPort] = None,
    queue_port: Optional[QueuePort] = None,
) -> ServiceContainer:
    """Return a service container wired with the given ports."""

    return ServiceContainer(database=database_port, github=github_port, queue=queue_port)


__all__ = ["ServiceContainer", "build_default_services"]
