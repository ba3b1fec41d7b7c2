"""Utility functions for shapeclip.

This module provides logging setup and operation statistics.
"""

from shapeclip.utils.logging import (
    OperationLogger,
    OperationStats,
    configure_logging,
)

__all__ = [
    "OperationLogger",
    "OperationStats",
    "configure_logging",
]
