"""Utility modules for scsstags.

Provides:
- logger: get_logger for logging
"""

from scsstags.utils.logger import get_logger

__all__ = ["get_logger"]
