"""Tests for core data models."""

from __future__ import annotations

import json

import pytest

from gloss_export.core import models
from gloss_export.core.exceptions import MalformedMessageError

GENESIS_CHAPTERS = [
    {
        "id": 1,
        "verses": [
            {
                "id": "01001001",
                "words": [
                    {"id": "0100100101", "gloss": "In"},
                    {"id": "0100100102", "gloss": None},
                ],
            }
        ],
    }
]


def test_book_from_row_decodes_json_text() -> None:
    """Rows carry ``chapters`` as JSON text when no codec is registered."""
    row = {"id": 1, "name": "Genesis", "chapters": json.dumps(GENESIS_CHAPTERS)}
    book = models.Book.from_row(row)
    assert book.id == 1
    assert book.chapters[0].verses[0].words[0].gloss == "In"
    assert book.chapters[0].verses[0].words[1].gloss is None


def test_book_from_row_accepts_decoded_chapters() -> None:
    row = {"id": 1, "name": "Genesis", "chapters": GENESIS_CHAPTERS}
    assert models.Book.from_row(row).model_dump()["chapters"] == GENESIS_CHAPTERS


def test_book_to_json_mirrors_nesting_with_two_space_indent() -> None:
    """The exported document holds exactly the book/chapter/verse/word fields."""
    book = models.Book.from_row({"id": 1, "name": "Genesis", "chapters": GENESIS_CHAPTERS})
    text = book.to_json()

    assert json.loads(text) == {"id": 1, "name": "Genesis", "chapters": GENESIS_CHAPTERS}
    assert text.splitlines()[1] == '  "id": 1,'
    assert list(json.loads(text)) == ["id", "name", "chapters"]
    assert '"gloss": null' in text


def test_book_to_json_keeps_non_ascii_literal() -> None:
    words = [{"id": "w", "gloss": "Au commencement, Dieu créa"}]
    chapters = [{"id": 1, "verses": [{"id": "v", "words": words}]}]
    book = models.Book(id=1, name="Genèse", chapters=chapters)
    assert "créa" in book.to_json()


def test_book_to_json_preserves_row_order() -> None:
    """Ordering comes from the query and is reproduced exactly."""
    chapters = [
        {"id": 1, "verses": [{"id": "01001001", "words": [{"id": "a"}, {"id": "b"}]}]},
        {"id": 2, "verses": [{"id": "01002001", "words": [{"id": "c"}]}]},
    ]
    book = models.Book(id=1, name="Genesis", chapters=chapters)
    dumped = json.loads(book.to_json())
    assert [chapter["id"] for chapter in dumped["chapters"]] == [1, 2]
    assert [w["id"] for w in dumped["chapters"][0]["verses"][0]["words"]] == ["a", "b"]


@pytest.mark.parametrize(
    ("book_id", "name", "expected"),
    [
        (1, "Genesis", "eng/01-Genesis.json"),
        (40, "Matthew", "eng/40-Matthew.json"),
    ],
)
def test_book_export_path_zero_pads_id(book_id: int, name: str, expected: str) -> None:
    book = models.Book(id=book_id, name=name, chapters=[])
    assert book.export_path("eng") == expected


def test_export_request_parses_body() -> None:
    request = models.ExportRequest.from_body('{"code": "fra"}')
    assert request.code == "fra"
    assert json.loads(request.to_body()) == {"code": "fra"}


@pytest.mark.parametrize("body", ["not json", "{}", '{"language": "fra"}'])
def test_export_request_rejects_malformed_body(body: str) -> None:
    with pytest.raises(MalformedMessageError):
        models.ExportRequest.from_body(body)


def test_malformed_message_error_is_value_error() -> None:
    assert issubclass(MalformedMessageError, ValueError)


def test_tree_item_payload_omits_unset_fields() -> None:
    """An explicit null sha would delete the path, so it is never sent."""
    item = models.TreeItem(path="eng/01-Genesis.json", sha="abc123")
    assert item.to_payload() == {
        "path": "eng/01-Genesis.json",
        "mode": "100644",
        "type": "blob",
        "sha": "abc123",
    }

    inline = models.TreeItem(path="README.md", content="hello")
    assert "sha" not in inline.to_payload()
    assert inline.to_payload()["content"] == "hello"
