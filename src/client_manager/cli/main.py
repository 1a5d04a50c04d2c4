"""Root command: load settings, configure logging, run the interactive shell."""

from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape

from ..config import load_config
from ..exceptions import ConfigurationError
from ..infrastructure.memory import InMemoryClientRepository
from ..logging_config import setup_logging
from ..presentation.shell import ClientShell
from . import app
from ._common import ExitCode, console


@app.callback(invoke_without_command=True, no_args_is_help=False)
def main(
    sample: Optional[bool] = typer.Option(
        None,
        "--sample/--no-sample",
        help="Start with example clients already stored",
        show_default=False,
    ),
    config: Optional[Path] = typer.Option(
        None,
        "-c",
        "--config",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log repository and handler activity",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only log errors",
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Also append log records to this file",
        dir_okay=False,
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
    ),
):
    """
    Manage clients from an interactive menu.

    Clients live in memory only and are gone when the session ends.

    [bold cyan]Examples:[/bold cyan]

      client-manager

      client-manager --sample

      client-manager --config client-manager.toml --verbose
    """
    from .. import __version__

    if version:
        console.print(f"[bold cyan]Client Manager[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit(ExitCode.SUCCESS)

    try:
        settings = load_config(
            config_file=config,
            sample=sample,
            verbose=verbose,
            quiet=quiet,
            log_file=str(log_file) if log_file else None,
        )
    except ConfigurationError as e:
        console.print(f"[red]Configuration error:[/red] {escape(str(e))}")
        raise typer.Exit(ExitCode.CONFIG_ERROR)

    logger = setup_logging(settings.verbosity, log_file=settings.log_file)

    if settings.sample:
        repository = InMemoryClientRepository.with_sample_clients(settings.samples)
    else:
        repository = InMemoryClientRepository()
    logger.debug("Starting shell with %d stored clients", len(repository))

    ClientShell.for_repository(repository, console=console).run()
