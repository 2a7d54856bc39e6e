"""Logging configuration.

Log records go through Rich so they share the console with the rest of the
CLI output. Modules get their loggers with `logging.getLogger(__name__)`.
"""

from __future__ import annotations

import logging

from rich.logging import RichHandler

LOGGER_NAME = "moyu"


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Configure the package logger with a Rich console handler.

    Args:
        verbose: Log DEBUG records when True, otherwise INFO and above.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    # Repeated calls (tests, wizard re-entry) must not stack handlers
    logger.handlers.clear()

    handler = RichHandler(show_path=verbose, rich_tracebacks=True, markup=False)
    handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger

