"""Commit a language's book documents to the GitHub data repository.

Each export is a strict sequence: one blob per book, one tree overlaying all of
them on the branch tip, one commit on top of the tip, then the branch ref is
moved. Nothing is retried or rolled back; blobs and trees created before a
failure stay orphaned in the remote store.
"""

from __future__ import annotations

from contextlib import aclosing
from typing import Optional, Sequence

from gloss_export.core.config import settings
from gloss_export.core.logging import get_logger, language_code_context
from gloss_export.core.models import Book, ExportResult, TreeItem
from gloss_export.core.ports import DatabasePort, GitHubPort
from gloss_export.services.tree_fetcher import stream_books

logger = get_logger(__name__)


def commit_message(language_code: str) -> str:
    """Return the commit message for an export of ``language_code``."""
    return f"Export from {settings.EXPORT_SYSTEM_NAME} for {language_code}"


async def create_blob_for_book(github: GitHubPort, language_code: str, book: Book) -> TreeItem:
    """Upload ``book`` as a blob and return the tree entry that references it."""
    sha = await github.create_blob(book.to_json(), "utf-8")
    return TreeItem(path=book.export_path(language_code), mode="100644", type="blob", sha=sha)


async def create_tree(
    github: GitHubPort, items: Sequence[TreeItem], *, branch: Optional[str] = None
) -> str:
    """Create a tree with ``items`` overlaid on the branch tip's tree."""
    base_tree = await github.get_tree(branch or settings.GITHUB_BRANCH)
    return await github.create_tree(base_tree, items)


async def create_commit(
    github: GitHubPort, language_code: str, tree_sha: str, *, branch: Optional[str] = None
) -> str:
    """Commit ``tree_sha`` on top of the branch tip and move the branch to it."""
    ref = f"heads/{branch or settings.GITHUB_BRANCH}"
    parent_sha = await github.get_ref(ref)
    commit_sha = await github.create_commit(
        tree_sha, commit_message(language_code), [parent_sha]
    )
    await github.update_ref(ref, commit_sha)
    return commit_sha


async def export_language(
    language_code: str,
    *,
    database: DatabasePort,
    github: GitHubPort,
    batch_size: Optional[int] = None,
) -> ExportResult:
    """Export every book of ``language_code`` as a single commit."""
    with language_code_context(language_code):
        logger.info("Starting export of language %s", language_code)

        logger.info("Creating blob for each book")
        tree_items: list[TreeItem] = []
        async with aclosing(
            stream_books(database, language_code, batch_size=batch_size)
        ) as books:
            async for book in books:
                tree_items.append(await create_blob_for_book(github, language_code, book))
        logger.info("Created %d blobs", len(tree_items))

        logger.info("Creating tree")
        tree_sha = await create_tree(github, tree_items)

        logger.info("Creating commit")
        commit_sha = await create_commit(github, language_code, tree_sha)

        logger.info("Export complete", extra={"commit_sha": commit_sha})
        return ExportResult(
            language_code=language_code,
            book_count=len(tree_items),
            tree_sha=tree_sha,
            commit_sha=commit_sha,
        )


__all__ = [
    "commit_message",
    "create_blob_for_book",
    "create_commit",
    "create_tree",
    "export_language",
]
