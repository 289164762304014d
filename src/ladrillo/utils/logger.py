"""Minimal logging utilities for Ladrillo.

Example:
    >>> from ladrillo.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Building selector")
"""

from __future__ import annotations

import logging

_ROOT = "ladrillo"


def get_logger(name: str) -> logging.Logger:
    """Get a standard library logger namespaced under "ladrillo.".

    Args:
        name: Logger name (typically __name__)

    Example:
        >>> get_logger("shapes").name
        'ladrillo.shapes'
    """
    if not (name == _ROOT or name.startswith(f"{_ROOT}.")):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)
