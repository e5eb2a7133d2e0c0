#!/usr/bin/env python3
"""
extrestore Utilities
"""

from .error_handler import get_error_stats, log_error, reset_error_stats
from .logger import get_logger, setup_logger

__all__ = [
    "get_logger",
    "setup_logger",
    "log_error",
    "get_error_stats",
    "reset_error_stats",
]
