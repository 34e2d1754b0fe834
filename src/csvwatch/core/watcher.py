"""
File watcher that turns writes to the data file into live-reload signals
"""

import sys
from pathlib import Path
from typing import Callable, Optional

from watchdog.observers import Observer
from watchdog.events import DirDeletedEvent, FileSystemEventHandler, FileModifiedEvent

from .errors import WatchPathError
from ..utils import path_utils
from ..utils.logging_utils import get_logger

logger = get_logger(__name__)

ReloadPolicy = Callable[[str], bool]


def forward_any_write(path: str) -> bool:
    """Policy forwarding every write in the watched directory"""
    return True


def forward_exact_path(target: Path) -> ReloadPolicy:
    """Policy forwarding only writes to ``target`` itself"""
    target_key = path_utils.normalize_path(target)

    def should_forward(path: str) -> bool:
        return path_utils.normalize_path(path) == target_key

    return should_forward


def forward_nothing(path: str) -> bool:
    return False


def make_reload_policy(name: str, target: Path, platform: Optional[str] = None) -> ReloadPolicy:
    """Build the should-forward predicate for a policy name.

    ``legacy`` mirrors the historical behaviour: every write on Linux, only
    the data file on Windows, and no reloads on other platforms.
    """
    if name == 'exact':
        return forward_exact_path(target)
    if name == 'any':
        return forward_any_write
    if name == 'legacy':
        platform = platform or sys.platform
        if platform.startswith('linux'):
            return forward_any_write
        if platform == 'win32':
            return forward_exact_path(target)
        return forward_nothing
    raise ValueError(f"Unknown reload policy: {name}")


class ReloadForwardingHandler(FileSystemEventHandler):
    """Event handler forwarding file writes to the live-reload server"""

    def __init__(self, reloader, should_forward: ReloadPolicy, watch_path: Optional[Path] = None):
        super().__init__()
        self.reloader = reloader
        self.should_forward = should_forward
        self.watch_key = path_utils.normalize_path(watch_path) if watch_path else None

    def on_any_event(self, event):
        logger.debug(f"{event.event_type} {event.src_path}")

    def on_modified(self, event):
        """Handle write events"""
        if not isinstance(event, FileModifiedEvent):
            return

        # Convert paths to strings to handle bytes/str type issues
        path = path_utils.bytes_to_string(event.src_path)
        if not self.should_forward(path):
            return

        try:
            self.reloader.reload(path)
        except Exception as e:
            logger.error(f"Failed to forward reload for {path}: {e}")
        else:
            logger.info(f"Reload: {path}")

    def on_deleted(self, event):
        """Warn when the watched directory itself goes away"""
        if not isinstance(event, DirDeletedEvent) or self.watch_key is None:
            return

        path = path_utils.bytes_to_string(event.src_path)
        if path_utils.normalize_path(path) == self.watch_key:
            logger.warning(f"Watched directory {path} was removed; no further reloads will be sent")


class ChangeNotifier:
    """Watches the directory holding the data file and forwards reloads"""

    def __init__(self, target: Path, reloader, should_forward: Optional[ReloadPolicy] = None):
        """Initialize the notifier

        Args:
            target: Data file whose directory gets watched
            reloader: Object with a ``reload(path)`` method
            should_forward: Predicate deciding which written paths trigger a reload
                (defaults to the data file only)
        """
        self.target = path_utils.resolve_path(str(target))
        self.watch_path = self.target.parent
        self.should_forward = should_forward or forward_exact_path(self.target)

        self.observer = Observer()
        self.event_handler = ReloadForwardingHandler(reloader, self.should_forward, self.watch_path)

    def start(self):
        """Start watching for file changes"""
        if not self.watch_path.is_dir():
            raise WatchPathError(f"Cannot watch {self.watch_path}: not a directory")

        try:
            self.observer.schedule(
                self.event_handler,
                path=str(self.watch_path),
                recursive=False
            )
            self.observer.start()
        except OSError as e:
            raise WatchPathError(f"Cannot watch {self.watch_path}: {e}") from e
        logger.info(f"Watching {self.watch_path} for changes to {self.target.name}")

    def stop(self):
        """Stop watching for file changes"""
        if self.observer.is_alive():
            self.observer.stop()
            self.observer.join()

    def is_alive(self) -> bool:
        """Check if the notifier is currently running"""
        return self.observer.is_alive()
