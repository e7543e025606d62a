"""Core data transfer objects shared across layers."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, List, Literal, Mapping, Optional

from pydantic import BaseModel, ValidationError

from gloss_export.core.exceptions import MalformedMessageError

TreeMode = Literal["100644", "100755", "040000", "160000", "120000"]
TreeType = Literal["blob", "tree", "commit"]


class Word(BaseModel):
    """A single word of the source text and its approved gloss, if any."""

    id: str
    gloss: Optional[str] = None


class Verse(BaseModel):
    """A verse and its words ordered by word id."""

    id: str
    words: List[Word]


class Chapter(BaseModel):
    """A chapter and its verses ordered by verse id."""

    id: int
    verses: List[Verse]


class Book(BaseModel):
    """One exported document: a book with its full chapter/verse/word tree."""

    id: int
    name: str
    chapters: List[Chapter]

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Book":
        """Build a Book from a language tree query row.

        ``chapters`` arrives as JSON text unless a json codec is registered on
        the connection, in which case it is already decoded.
        """
        chapters = row["chapters"]
        if isinstance(chapters, (str, bytes)):
            chapters = json.loads(chapters)
        return cls(id=row["id"], name=row["name"], chapters=chapters)

    def to_json(self) -> str:
        """Return the document pretty-printed with two-space indentation."""
        return json.dumps(self.model_dump(), indent=2, ensure_ascii=False)

    def export_path(self, language_code: str) -> str:
        """Return the repository path of this book's document for ``language_code``."""
        return f"{language_code}/{self.id:02d}-{self.name}.json"


class ExportRequest(BaseModel):
    """Queue message body requesting the export of one language."""

    code: str

    @classmethod
    def from_body(cls, body: str) -> "ExportRequest":
        """Parse a raw queue message body."""
        try:
            return cls.model_validate_json(body)
        except ValidationError as exc:
            raise MalformedMessageError(f"invalid export request body: {body!r}") from exc

    def to_body(self) -> str:
        """Serialize to the queue message body format."""
        return json.dumps({"code": self.code})


@dataclass(slots=True)
class TreeItem:
    """One entry to add to a remote git tree object."""

    path: str
    mode: TreeMode = "100644"
    type: TreeType = "blob"
    sha: Optional[str] = None
    content: Optional[str] = None

    def to_payload(self) -> dict[str, Any]:
        """Return the API payload, omitting unset fields.

        An explicit ``"sha": null`` deletes the path on GitHub.
        """
        payload: dict[str, Any] = {"path": self.path, "mode": self.mode, "type": self.type}
        if self.sha is not None:
            payload["sha"] = self.sha
        if self.content is not None:
            payload["content"] = self.content
        return payload


@dataclass(slots=True)
class ExportResult:
    """Outcome of one language export."""

    language_code: str
    book_count: int
    tree_sha: str
    commit_sha: str


__all__ = [
    "Book",
    "Chapter",
    "ExportRequest",
    "ExportResult",
    "TreeItem",
    "TreeMode",
    "TreeType",
    "Verse",
    "Word",
]
