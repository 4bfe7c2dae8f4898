"""Shared console and logging helpers."""

import logging

from rich.console import Console
from rich.logging import RichHandler

__all__ = ("LOGGER_NAME", "configure_logging", "console")

LOGGER_NAME = "apprun_cli"

console = Console(soft_wrap=True, highlight=False)
"""Console used for all user-facing output. Long paths are never wrapped."""


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Attach a rich handler to the package logger.

    Args:
        verbose: Log at DEBUG level instead of WARNING.

    Returns:
        The package logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        logger.addHandler(RichHandler(console=console, show_path=False, markup=False))
    return logger
