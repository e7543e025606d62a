"""Host entry point dispatching schedule ticks and queue messages.

A schedule tick (an event carrying ``detail-type``) detects changed languages
and fans out one queue message per language. A queue delivery (an event
carrying ``Records``) exports the language named in its first record.
"""

from __future__ import annotations

import asyncio
from typing import Any, Coroutine, Mapping, Optional, TypeVar

from gloss_export.bootstrap import build_default_service_container
from gloss_export.core.logging import correlation_id_context, get_logger
from gloss_export.core.models import ExportRequest, ExportResult
from gloss_export.services import ServiceContainer, runtime
from gloss_export.services.change_detector import queue_languages
from gloss_export.services.exporter import export_language

logger = get_logger(__name__)

T = TypeVar("T")

# Reused across invocations so the pooled DB connection and HTTP client, which
# are bound to the loop they were opened on, survive between calls.
_loop: Optional[asyncio.AbstractEventLoop] = None


def _get_loop() -> asyncio.AbstractEventLoop:
    global _loop  # pylint: disable=global-statement
    if _loop is None or _loop.is_closed():
        _loop = asyncio.new_event_loop()
    return _loop


def run(coro: Coroutine[Any, Any, T]) -> T:
    """Drive ``coro`` to completion on the process-wide event loop."""
    return _get_loop().run_until_complete(coro)


def get_or_build_services() -> ServiceContainer:
    """Return the registered services, wiring production adapters on first use."""
    if not runtime.has_services():
        runtime.set_services(build_default_service_container())
    return runtime.get_services()


def is_queue_event(event: Mapping[str, Any]) -> bool:
    """Return whether ``event`` is a queue delivery."""
    return "Records" in event


def is_scheduled_event(event: Mapping[str, Any]) -> bool:
    """Return whether ``event`` is a schedule tick."""
    return "detail-type" in event


async def dispatch(
    event: Mapping[str, Any], services: ServiceContainer
) -> ExportResult | list[str] | None:
    """Route ``event`` to the export or fan-out path."""
    if is_queue_event(event):
        # Only the first record is handled; the queue trigger delivers one at a time.
        request = ExportRequest.from_body(event["Records"][0]["body"])
        return await export_language(
            request.code,
            database=services.require_database(),
            github=services.require_github(),
        )
    if is_scheduled_event(event):
        return await queue_languages(services.require_database(), services.require_queue())

    logger.warning("Ignoring unrecognized event with keys: %s", sorted(event))
    return None


def handler(event: Mapping[str, Any], context: Any = None) -> None:
    """Synchronous entry point invoked by the host for every trigger."""
    request_id = getattr(context, "aws_request_id", None)
    with correlation_id_context(request_id):
        services = get_or_build_services()
        run(dispatch(event, services))


__all__ = ["dispatch", "get_or_build_services", "handler", "run"]
