"""Utility modules for delimark.

Provides:
- logger: get_logger for logging
"""

from delimark.utils.logger import get_logger

__all__ = ["get_logger"]
