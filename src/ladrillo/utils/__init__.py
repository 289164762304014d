"""Utility modules for Ladrillo.

Provides:
- logger: get_logger for logging
"""

from ladrillo.utils.logger import get_logger

__all__ = [
    "get_logger",
]
