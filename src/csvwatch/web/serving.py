"""
Werkzeug server construction shared by the result and live-reload servers
"""

from werkzeug.serving import BaseWSGIServer, make_server


def bind_server(host: str, port: int, app) -> BaseWSGIServer:
    """Create a threaded WSGI server listening on ``host:port``.

    Raises:
        OSError: if the address cannot be bound
    """
    try:
        return make_server(host, port, app, threaded=True)
    except SystemExit as e:
        # werkzeug prints the bind failure itself and exits
        raise OSError(f"Could not listen on {host}:{port}") from e
