"""CLI commands for book-concierge."""

import typer

from book_concierge.cli.intents import app as intents_app
from book_concierge.cli.server import serve

main_app = typer.Typer(
    name="book-concierge",
    help="Book Concierge fulfillment CLI",
    no_args_is_help=True,
)
main_app.command("serve")(serve)
main_app.add_typer(intents_app, name="intents")


def main() -> None:
    """Entry point for the CLI."""
    main_app()


__all__ = ["main", "main_app"]
