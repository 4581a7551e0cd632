"""Logging configuration for the tgeo command."""

import logging

from rich.logging import RichHandler

from .config import LoggingConfig


def setup_logging(config: LoggingConfig) -> None:
    """
    Configure the root logger with a rich console handler.

    Raises:
        ValueError: If the configured level is not a known logging level
    """
    level = str(config.level).upper()
    if level not in logging.getLevelNamesMapping():
        raise ValueError(f"Invalid logging level: {config.level!r}")

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=config.rich_tracebacks, show_path=False)],
        force=True,
    )
