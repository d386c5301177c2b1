"""Minimal logging utilities for Langue.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from langue.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Compiling definition")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "langue." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'langue.mymodule'
    """
    if not (name == "langue" or name.startswith("langue.")):
        name = f"langue.{name}"
    return logging.getLogger(name)
