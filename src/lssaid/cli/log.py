"""loguru configuration for the CLI entry point."""

from __future__ import annotations

import sys

from loguru import logger

_FORMAT: str = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - "
    "<level>{message}</level>"
)


def configure_logging(verbose: bool = False) -> None:
    """Route loguru output to stderr.

    Debug records are shown only with ``--verbose``; otherwise only
    warnings and above get through.
    """
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING", format=_FORMAT)
