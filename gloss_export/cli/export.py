"""CLI commands for running the export pipeline by hand."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from gloss_export.apps.handler import get_or_build_services, run
from gloss_export.core.exceptions import GitHubAPIError, QueueSendError
from gloss_export.services.change_detector import fetch_updated_languages, queue_languages
from gloss_export.services.exporter import export_language

console = Console()


def list_changed() -> None:
    """List languages changed within the trailing window without queueing them."""
    services = get_or_build_services()
    codes = run(fetch_updated_languages(services.require_database()))

    if not codes:
        console.print("[dim]No languages to export.[/dim]")
        return

    table = Table(title="Changed Languages")
    table.add_column("Code", style="cyan")
    for code in codes:
        table.add_row(code)
    console.print(table)


def queue_changed() -> None:
    """Detect changed languages and queue one export request for each."""
    services = get_or_build_services()
    try:
        codes = run(queue_languages(services.require_database(), services.require_queue()))
    except QueueSendError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e

    if not codes:
        console.print("[dim]No languages to export.[/dim]")
        return
    console.print(f"[green]Queued {len(codes)} language(s):[/green] {', '.join(codes)}")


def export_one(
    code: str = typer.Argument(..., help="Language code to export, e.g. 'eng'"),
    batch_size: int | None = typer.Option(
        None, "--batch-size", "-b", min=1, help="Books fetched per cursor read"
    ),
) -> None:
    """Export a single language and commit it to the data repository."""
    services = get_or_build_services()
    try:
        result = run(
            export_language(
                code,
                database=services.require_database(),
                github=services.require_github(),
                batch_size=batch_size,
            )
        )
    except GitHubAPIError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e

    console.print(f"\n[green]Exported {result.book_count} book(s) for {code}[/green]")
    console.print(f"[bold]Tree:[/bold] {result.tree_sha}")
    console.print(f"[bold]Commit:[/bold] {result.commit_sha}\n")


__all__ = ["export_one", "list_changed", "queue_changed"]
