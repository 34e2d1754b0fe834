"""
Exception types raised by csvwatch
"""


class CsvWatchError(Exception):
    """Base class for csvwatch errors"""


class ConfigError(CsvWatchError):
    """Configuration could not be loaded or is invalid"""


class DataFileError(CsvWatchError):
    """The data file could not be opened or parsed"""


class InvalidQueryError(CsvWatchError):
    """The filter query contained something other than ASCII letters"""

    def __init__(self, query: str):
        self.query = query
        super().__init__(f"Invalid Query: {query}")


class WatchPathError(CsvWatchError):
    """The directory holding the data file cannot be watched"""
