"""Utility modules for Langue.

Provides:
- logger: get_logger for logging
"""

from langue.utils.logger import get_logger

__all__ = [
    "get_logger",
]
