"""
Path utilities for csvwatch
"""

import os
from pathlib import Path
from typing import Any, Union


def bytes_to_string(data: Any) -> str:
    """Convert bytes to string with minimal processing.

    Watchdog may report paths as bytes depending on how the watch was
    scheduled.
    """
    if isinstance(data, bytes):
        return os.fsdecode(data)
    return str(data)


def resolve_path(path: str) -> Path:
    """Resolve a path to an absolute Path object."""
    return Path(path).resolve()


def normalize_path(path: Union[str, Path]) -> str:
    """Absolute, case-normalized form of a path for equality checks."""
    return os.path.normcase(os.path.abspath(str(path)))
