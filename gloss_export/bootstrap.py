"""Application bootstrap helpers for assembling the service container."""

from __future__ import annotations

from gloss_export.adapters.database import DatabaseAdapter
from gloss_export.adapters.github import GitHubAdapter
from gloss_export.adapters.queue import QueueAdapter
from gloss_export.core.config import settings
from gloss_export.services import ServiceContainer, build_default_services


def build_default_service_container() -> ServiceContainer:
    """Return the default service container wired to production adapters."""

    return build_default_services(
        database_port=DatabaseAdapter(settings.DATABASE_URL, max_size=1),
        github_port=GitHubAdapter(
            token=settings.GITHUB_TOKEN,
            owner=settings.GITHUB_OWNER,
            repo=settings.GITHUB_REPO,
            api_url=settings.GITHUB_API_URL,
        ),
        queue_port=QueueAdapter(
            queue_url=settings.GITHUB_EXPORT_QUEUE_URL,
            group_id=settings.EXPORT_MESSAGE_GROUP_ID,
            region_name=settings.AWS_REGION,
        ),
    )


__all__ = ["build_default_service_container"]
