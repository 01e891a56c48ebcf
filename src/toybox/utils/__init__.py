"""Utility modules for Toybox.

Provides:
- logger: get_logger for logging
"""

from toybox.utils.logger import get_logger

__all__ = ["get_logger"]
