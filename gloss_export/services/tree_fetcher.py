"""Stream a language's books with their nested chapter/verse/word trees."""

from __future__ import annotations

from contextlib import aclosing
from typing import AsyncGenerator, Optional

from gloss_export.core.config import settings
from gloss_export.core.logging import get_logger
from gloss_export.core.models import Book
from gloss_export.core.ports import DatabasePort

logger = get_logger(__name__)

# One row per book. Every aggregation level sorts before aggregating, since
# consumers diff the exported files across commits.
LANGUAGE_TREE_QUERY = """
    SELECT
        book.id,
        book.name,
        JSON_AGG(JSON_BUILD_OBJECT(
            'id', book_chapters.chapter,
            'verses', book_chapters.verses
        ) ORDER BY book_chapters.chapter) AS chapters
    FROM book
    JOIN (
        SELECT
            verse.book_id,
            verse.chapter,
            JSON_AGG(JSON_BUILD_OBJECT(
                'id', verse.id,
                'words', verse_words.words
            ) ORDER BY verse.id) AS verses
        FROM verse
        JOIN (
            SELECT
                word.verse_id,
                JSON_AGG(JSON_BUILD_OBJECT(
                    'id', word.id,
                    'gloss', gloss.gloss
                ) ORDER BY word.id) AS words
            FROM word
            LEFT JOIN LATERAL (
                SELECT gloss.gloss FROM gloss
                WHERE gloss.state = 'APPROVED'
                    AND EXISTS (
                        SELECT FROM phrase_word
                        JOIN phrase ON phrase_word.phrase_id = phrase.id
                        WHERE phrase.language_id = (SELECT id FROM language WHERE code = $1)
                            AND phrase.deleted_at IS NULL
                            AND phrase_word.word_id = word.id
                            AND gloss.phrase_id = phrase.id
                    )
            ) gloss ON true
            GROUP BY word.verse_id
        ) verse_words ON verse.id = verse_words.verse_id
        GROUP BY verse.book_id, verse.chapter
    ) book_chapters ON book_chapters.book_id = book.id
    GROUP BY book.id
    ORDER BY book.id
"""


async def stream_books(
    database: DatabasePort,
    language_code: str,
    *,
    batch_size: Optional[int] = None,
) -> AsyncGenerator[Book, None]:
    """Yield each book of ``language_code`` as its row arrives from the cursor."""
    size = batch_size or settings.EXPORT_BATCH_SIZE
    logger.debug("Streaming books for %s in batches of %d", language_code, size)
    rows = database.query_cursor(LANGUAGE_TREE_QUERY, language_code, batch_size=size)
    async with aclosing(rows):
        async for row in rows:
            yield Book.from_row(row)


__all__ = ["LANGUAGE_TREE_QUERY", "stream_books"]
