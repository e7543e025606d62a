"""Detect languages with recent gloss changes and enqueue their exports."""

from __future__ import annotations

from gloss_export.core.logging import get_logger
from gloss_export.core.ports import DatabasePort, QueuePort

logger = get_logger(__name__)

# Fixed 8-day trailing window; the query takes no parameters.
UPDATED_LANGUAGES_QUERY = """
    SELECT DISTINCT lang.code FROM gloss
    JOIN phrase ph ON ph.id = gloss.phrase_id
    JOIN language lang ON lang.id = ph.language_id
    WHERE gloss.updated_at >= NOW() - INTERVAL '8 days'
        OR ph.deleted_at >= NOW() - INTERVAL '8 days'
    ORDER BY lang.code
"""


async def fetch_updated_languages(database: DatabasePort) -> list[str]:
    """Return codes of languages changed within the trailing window, ascending."""
    rows = await database.query(UPDATED_LANGUAGES_QUERY)
    return [row["code"] for row in rows]


async def queue_languages(database: DatabasePort, queue: QueuePort) -> list[str]:
    """Enqueue one export request per changed language and return the codes."""
    codes = await fetch_updated_languages(database)
    if not codes:
        logger.info("No languages to export to GitHub")
        return []

    await queue.send_export_requests(codes)

    logger.info(
        "Queued the following languages for export to GitHub:\n%s",
        "\n".join(codes),
        extra={"languages": codes},
    )
    return codes


__all__ = ["UPDATED_LANGUAGES_QUERY", "fetch_updated_languages", "queue_languages"]
