"""CLI entry point."""

import typer

app = typer.Typer(
    name="client-manager",
    help="Client Manager - create, list, show and edit clients interactively",
    add_completion=False,
    rich_markup_mode="rich",
)


# Import the root callback to register it
from .main import main as _main_callback  # noqa: F401, E402
