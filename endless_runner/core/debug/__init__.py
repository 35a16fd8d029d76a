"""
Debug exports.

Provides the category-filtered console logger used by every system.
"""

from endless_runner.core.debug.debug_logger import DebugLogger, LoggerConfig

__all__ = [
    'DebugLogger',
    'LoggerConfig',
]
