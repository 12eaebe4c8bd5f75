"""
Utilities module - Logging helpers.
"""

from .logger import (
    setup_logging,
    get_logger,
    is_configured,
    log_operation,
)

__all__ = [
    'setup_logging',
    'get_logger',
    'is_configured',
    'log_operation',
]
