"""
Live-reload server: speaks the LiveReload protocol to open result pages
"""

import asyncio
import threading
from typing import Optional

from livereload.handlers import ForceReloadHandler, LiveReloadHandler, LiveReloadJSHandler
from livereload.watcher import Watcher
from tornado import web
from tornado.httpserver import HTTPServer
from tornado.ioloop import IOLoop
from tornado.netutil import bind_sockets

from ..utils.logging_utils import get_logger

logger = get_logger(__name__)


def create_livereload_app() -> web.Application:
    """Tornado app exposing livereload's websocket, script and force-reload handlers.

    Changes are detected by the watchdog notifier, so livereload's own
    watcher is never started; the handler only reads its ``filepath``.
    """
    LiveReloadHandler.watcher = Watcher()
    LiveReloadHandler.live_css = True
    return web.Application(handlers=[
        (r'/livereload', LiveReloadHandler),
        (r'/forcereload', ForceReloadHandler),
        (r'/livereload.js', LiveReloadJSHandler),
    ])


class LiveReloadServer:
    """Runs the live-reload app on its own port in a background thread"""

    def __init__(self, host: str = '0.0.0.0', port: int = 35729):
        self.host = host
        self.port = port
        self.app = create_livereload_app()
        self._loop: Optional[IOLoop] = None
        self._shutdown: Optional[asyncio.Event] = None
        self._ready = threading.Event()
        self._thread: Optional[threading.Thread] = None

    def start(self):
        """Bind the listener socket and start serving.

        Raises OSError when the port is unavailable.
        """
        sockets = bind_sockets(self.port, address=self.host)
        self.port = sockets[0].getsockname()[1]
        self._ready.clear()
        self._thread = threading.Thread(
            target=asyncio.run,
            args=(self._serve(sockets),),
            name='csvwatch-livereload',
            daemon=True
        )
        self._thread.start()
        if not self._ready.wait(timeout=10):
            raise RuntimeError("Live-reload server failed to start")
        logger.info(f"Live-reload listening on {self.host}:{self.port}")

    async def _serve(self, sockets):
        self._loop = IOLoop.current()
        self._shutdown = asyncio.Event()
        http_server = HTTPServer(self.app)
        http_server.add_sockets(sockets)
        self._ready.set()
        try:
            await self._shutdown.wait()
        finally:
            for waiter in list(LiveReloadHandler.waiters):
                waiter.close()
            http_server.stop()
            self._loop = None

    def reload(self, path: str) -> None:
        """Tell every connected browser that ``path`` changed.

        Safe to call from any thread; delivery happens on the server loop.
        """
        loop = self._loop
        if loop is None:
            logger.debug(f"Live-reload not running, dropping reload for {path}")
            return
        loop.add_callback(LiveReloadHandler.reload_waiters, path)

    def stop(self):
        loop = self._loop
        if loop is not None:
            loop.add_callback(self._shutdown.set)
        if self._thread is not None:
            self._thread.join(timeout=5)
            self._thread = None

    def is_alive(self) -> bool:
        return self._thread is not None and self._thread.is_alive()
