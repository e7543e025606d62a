"""CLI commands for gloss-export."""

import typer

from gloss_export.cli.export import export_one, list_changed, queue_changed

main_app = typer.Typer(
    name="gloss-export",
    help="Export approved glosses to the GitHub data repository",
    no_args_is_help=True,
)
main_app.command("changed")(list_changed)
main_app.command("queue")(queue_changed)
main_app.command("export")(export_one)


def main() -> None:
    """Entry point for the CLI."""
    main_app()


__all__ = ["main", "main_app"]
