"""Minimal logging utilities for scsstags.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from scsstags.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Scanning stylesheet")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "scsstags." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("scanner")
        >>> logger.name
        'scsstags.scanner'
    """
    if not (name == "scsstags" or name.startswith("scsstags.")):
        name = f"scsstags.{name}"
    return logging.getLogger(name)
