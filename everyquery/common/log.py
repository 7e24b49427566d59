"""Logging setup for the command-line entry point."""

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(level: str | int = logging.WARNING, console: Console | None = None) -> None:
    """Route log records to stderr through rich.

    The library itself only creates module loggers; handlers are installed here, by the CLI.
    """
    handler = RichHandler(console=console or Console(stderr=True), show_path=False, rich_tracebacks=True)
    logging.basicConfig(level=level, format="%(message)s", datefmt="[%X]", handlers=[handler], force=True)
