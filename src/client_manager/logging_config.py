"""
Logging configuration for Client Manager.

Log records go to stderr through rich so they never interleave with the
menu on stdout. The verbosity names are the ones ``ShellConfig`` accepts.
"""

import logging
from typing import Literal, Optional

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "client_manager"

Verbosity = Literal["quiet", "normal", "verbose"]

LEVELS: dict[str, int] = {
    "quiet": logging.ERROR,
    "normal": logging.WARNING,
    "verbose": logging.DEBUG,
}

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    verbosity: Verbosity = "normal", log_file: Optional[str] = None
) -> logging.Logger:
    """
    Route client_manager records to the terminal and, optionally, a file.

    Args:
        verbosity: quiet (errors only), normal (warnings) or verbose (debug,
                   with record paths and locals in tracebacks)
        log_file: Optional file that also receives every record, appended

    Returns:
        The client_manager package logger
    """
    try:
        level = LEVELS[verbosity]
    except KeyError:
        raise ValueError(f"Unknown verbosity: {verbosity!r}")
    verbose = verbosity == "verbose"

    # Client names are user input; never render them as rich markup.
    handlers: list[logging.Handler] = [
        RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            tracebacks_show_locals=verbose,
            markup=False,
            show_path=verbose,
        )
    ]

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        handlers.append(file_handler)

    # force=True: a second session in one process replaces the old handlers
    logging.basicConfig(
        level=level, format="%(message)s", datefmt="[%X]", handlers=handlers, force=True
    )

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger under the client_manager namespace; ``None`` gives the package logger."""
    if name is None:
        return logging.getLogger(LOGGER_NAME)
    if not name.startswith(LOGGER_NAME):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)
