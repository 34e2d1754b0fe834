"""HTTP side of csvwatch: the result server and the live-reload server."""

from .app import create_app, build_result
from .livereload import LiveReloadServer, create_livereload_app
from .serving import bind_server

__all__ = [
    'create_app', 'build_result',
    'LiveReloadServer', 'create_livereload_app',
    'bind_server',
]
