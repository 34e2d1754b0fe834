"""Core functionality for csvwatch."""

from .config import ServerConfig, load_config
from .errors import CsvWatchError, ConfigError, DataFileError, InvalidQueryError, WatchPathError
from .loader import load_records
from .query import parse_filter_query
from .render import RenderResult, render_result, DEFAULT_CSS
from .watcher import ChangeNotifier

__all__ = [
    'ServerConfig', 'load_config',
    'CsvWatchError', 'ConfigError', 'DataFileError', 'InvalidQueryError', 'WatchPathError',
    'load_records',
    'parse_filter_query',
    'RenderResult', 'render_result', 'DEFAULT_CSS',
    'ChangeNotifier',
]
