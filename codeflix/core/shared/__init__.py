"""
Shared utilities used across layers.
"""

from codeflix.core.shared.logger import (
    ContextLogger,
    configure_logging,
    get_api_logger,
    get_logger,
)

__all__ = [
    "ContextLogger",
    "configure_logging",
    "get_logger",
    "get_api_logger",
]
