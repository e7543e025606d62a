"""Tests for the gloss-export CLI."""

from __future__ import annotations

from typer.testing import CliRunner

from gloss_export.cli import main_app

runner = CliRunner()


def test_changed_lists_languages(services, fake_database, fake_queue) -> None:
    fake_database.rows = [{"code": "eng"}, {"code": "fra"}]

    result = runner.invoke(main_app, ["changed"])

    assert result.exit_code == 0, result.output
    assert "eng" in result.output
    assert "fra" in result.output
    assert fake_queue.sent == []


def test_changed_reports_empty_set(services) -> None:
    result = runner.invoke(main_app, ["changed"])
    assert result.exit_code == 0
    assert "No languages to export" in result.output


def test_queue_sends_changed_languages(services, fake_database, fake_queue) -> None:
    fake_database.rows = [{"code": "spa"}]

    result = runner.invoke(main_app, ["queue"])

    assert result.exit_code == 0, result.output
    assert fake_queue.sent == [["spa"]]
    assert "Queued 1 language(s)" in result.output


def test_export_prints_commit(services, fake_database, fake_github) -> None:
    fake_database.cursor_rows = [{"id": 1, "name": "Genesis", "chapters": "[]"}]

    result = runner.invoke(main_app, ["export", "eng", "--batch-size", "3"])

    assert result.exit_code == 0, result.output
    assert "Exported 1 book(s) for eng" in result.output
    assert "commit-1" in result.output
    assert fake_database.cursor_calls[0][2] == 3


def test_export_rejects_zero_batch_size(services) -> None:
    result = runner.invoke(main_app, ["export", "eng", "--batch-size", "0"])
    assert result.exit_code != 0
