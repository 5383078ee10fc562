"""Shared utility functions.

This subpackage provides common utility functions used across
the application with no dependencies on other subpackages.

Key modules:
    - text: BOM stripping, comment removal and newline helpers
    - logging: Logging configuration
    - protocols: Protocol definitions for engines and excerpt hooks
"""

from .text import (
    strip_bom,
    ensure_newline,
    strip_comments,
    first_line,
)
from .logging import configure_logging, get_logger
from .protocols import Engine, ExcerptStrategy

__all__ = [
    # text
    "strip_bom",
    "ensure_newline",
    "strip_comments",
    "first_line",
    # logging
    "configure_logging",
    "get_logger",
    # protocols
    "Engine",
    "ExcerptStrategy",
]
