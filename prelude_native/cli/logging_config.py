"""Console logger construction for the CLI."""

from __future__ import annotations

from rich.console import Console

from ..infrastructure.logging.console_logger import ConsoleLogger

__all__ = ["create_logger"]


def create_logger(console: Console | None = None, verbosity: int = 0) -> ConsoleLogger:
    """Create the logger a CLI command reports through.

    Args:
        console: Rich console for output (stderr when omitted)
        verbosity: Verbosity level

    Returns:
        The new logger instance
    """
    return ConsoleLogger(console, verbosity)
