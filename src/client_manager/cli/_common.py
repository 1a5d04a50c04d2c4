"""Shared CLI helpers."""

from rich.console import Console

console = Console()


class ExitCode:
    """Process exit codes.

    Ranges:
      0: Success
      80-89: User errors (bad input)
    """

    SUCCESS = 0
    CONFIG_ERROR = 81
