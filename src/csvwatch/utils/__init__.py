"""Utility functions for csvwatch."""

from .path_utils import (
    bytes_to_string,
    resolve_path,
    normalize_path,
)
from .logging_utils import setup_logger, get_logger

__all__ = [
    # Path utilities
    'bytes_to_string',
    'resolve_path',
    'normalize_path',
    # Logging utilities
    'setup_logger',
    'get_logger',
]
