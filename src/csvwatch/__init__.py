"""
csvwatch - Serve a CSV file as a live-reloading HTML table
"""

__version__ = "0.1.0"
__description__ = "Serve a single CSV file as an HTML table that refreshes when the file changes."

from .core.config import ServerConfig, load_config
from .core.loader import load_records
from .core.query import parse_filter_query
from .core.watcher import ChangeNotifier

__all__ = [
    'ServerConfig',
    'load_config',
    'load_records',
    'parse_filter_query',
    'ChangeNotifier',
]
