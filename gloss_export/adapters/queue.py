"""SQS adapter implementing the export queue port with boto3."""

from __future__ import annotations

import asyncio
from typing import Any, Optional, Sequence

import boto3

from gloss_export.core.exceptions import QueueSendError
from gloss_export.core.logging import get_logger
from gloss_export.core.models import ExportRequest
from gloss_export.core.ports import QueuePort

logger = get_logger(__name__)

# SQS accepts at most ten entries per SendMessageBatch call
MAX_BATCH_ENTRIES = 10


def build_batch_entries(language_codes: Sequence[str], group_id: str) -> list[dict[str, str]]:
    """Return one SendMessageBatch entry per language code."""
    return [
        {
            "Id": code,
            "MessageBody": ExportRequest(code=code).to_body(),
            "MessageGroupId": group_id,
            "MessageDeduplicationId": code,
        }
        for code in language_codes
    ]


class QueueAdapter(QueuePort):
    """Send export requests to a FIFO queue."""

    def __init__(
        self,
        *,
        queue_url: str,
        group_id: str,
        region_name: Optional[str] = None,
        client: Any = None,
    ) -> None:
        self._queue_url = queue_url
        self._group_id = group_id
        self._region_name = region_name
        self._client = client

    def _get_client(self) -> Any:
        if self._client is None:
            self._client = boto3.client("sqs", region_name=self._region_name)
        return self._client

    def _send_batch(self, entries: list[dict[str, str]]) -> None:
        response = self._get_client().send_message_batch(
            QueueUrl=self._queue_url, Entries=entries
        )
        failed = response.get("Failed") or []
        if failed:
            logger.error("Queue rejected entries: %s", failed)
            raise QueueSendError(failed)

    async def send_export_requests(self, language_codes: Sequence[str]) -> None:
        entries = build_batch_entries(language_codes, self._group_id)
        loop = asyncio.get_running_loop()
        for start in range(0, len(entries), MAX_BATCH_ENTRIES):
            batch = entries[start : start + MAX_BATCH_ENTRIES]
            await loop.run_in_executor(None, self._send_batch, batch)


__all__ = ["MAX_BATCH_ENTRIES", "QueueAdapter", "build_batch_entries"]
