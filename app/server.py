"""
HTTP Front Door Module

This module owns the process listener. A ``FrontDoor`` wraps a WSGI
application and binds it exactly once; the resulting ``ListenerHandle``
is passed to whatever code manages the lifecycle (serving, shutdown).
"""

import socket
import threading
from typing import Callable, Optional

from werkzeug.serving import BaseWSGIServer, make_server

from .exceptions import BindError
from .logging_config import get_logger

logger = get_logger(__name__)


def _address_family(host: str) -> socket.AddressFamily:
    if ":" in host and socket.has_ipv6:
        return socket.AF_INET6
    return socket.AF_INET


class ListenerHandle:
    """A bound listener serving one WSGI application."""

    def __init__(self, server: BaseWSGIServer, host: str) -> None:
        self._server = server
        self._lock = threading.Lock()
        self._serving = False
        self._closed = False
        self.host = host
        # Read back from the socket so port 0 reports the assigned port
        self.port: int = server.socket.getsockname()[1]

    @property
    def url(self) -> str:
        host = self.host
        if host in ("0.0.0.0", "::", ""):
            host = "127.0.0.1"
        elif ":" in host:
            host = f"[{host}]"
        return f"http://{host}:{self.port}"

    @property
    def closed(self) -> bool:
        return self._closed

    def serve_forever(self) -> None:
        """Dispatch requests until ``shutdown`` is called."""
        with self._lock:
            if self._closed:
                raise RuntimeError("Listener has been shut down")
            self._serving = True
        self._server.serve_forever()

    def serve_in_background(self) -> threading.Thread:
        """Run ``serve_forever`` on a daemon thread and return the thread."""
        with self._lock:
            if self._closed:
                raise RuntimeError("Listener has been shut down")
            self._serving = True
        thread = threading.Thread(
            target=self._server.serve_forever,
            name=f"front-door-{self.port}",
            daemon=True,
        )
        thread.start()
        return thread

    def shutdown(self) -> None:
        """Stop serving and release the socket. Safe to call twice."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
            serving = self._serving
        if serving:
            self._server.shutdown()
        self._server.server_close()
        logger.info("Listener on port %s closed", self.port)


class FrontDoor:
    """
    The single entry point accepting inbound HTTP connections.

    States are ``Unbound`` until ``start`` succeeds and ``Listening``
    afterwards; a front door is never rebound.
    """

    def __init__(self, app: Callable, host: str = "0.0.0.0") -> None:
        self.app = app
        self.host = host
        self.listener: Optional[ListenerHandle] = None

    @property
    def state(self) -> str:
        return "Listening" if self.listener is not None else "Unbound"

    def start(self, port: int) -> ListenerHandle:
        """
        Bind a plain HTTP listener on ``port``.

        Args:
            port (int): TCP port, or 0 for an ephemeral port

        Returns:
            ListenerHandle: Handle for the bound listener

        Raises:
            BindError: If the address is unavailable or already bound
        """
        if self.listener is not None:
            raise BindError(
                self.host, port, f"Front door already listening on port {self.listener.port}"
            )

        try:
            sock = socket.create_server(
                (self.host, port), family=_address_family(self.host), backlog=128
            )
        except OSError as e:
            logger.error("Could not bind %s:%s: %s", self.host, port, e.strerror or e)
            raise BindError(self.host, port, f"Could not bind {self.host}:{port}: {e}") from e

        # Werkzeug exits the process on its own bind failures, so hand it a bound socket
        try:
            server = make_server(self.host, port, self.app, threaded=True, fd=sock.fileno())
        finally:
            sock.close()

        self.listener = ListenerHandle(server, self.host)
        logger.info("The application started on port %s", self.listener.port)
        return self.listener
