"""A minimal listening TCP server on the loopback interface."""

from __future__ import annotations

import socket
from typing import Optional


class LocalTcpServer:
    """Listens on 127.0.0.1:port without ever accepting connections.

    Port 0 asks the system for a free port; after start() the port attribute
    holds the one actually bound.
    """

    def __init__(self, port: int) -> None:
        self.port = port
        self._socket: Optional[socket.socket] = None

    def start(self) -> None:
        """Bind to the loopback address and start listening."""
        try:
            sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        except OSError as exc:
            raise RuntimeError("Error establishing server socket") from exc
        try:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        except OSError:
            pass
        try:
            sock.bind(("127.0.0.1", self.port))
        except OSError as exc:
            sock.close()
            raise RuntimeError(
                f"Error binding socket to local address: {exc.strerror or exc}"
            ) from exc
        sock.listen(3)
        self.port = sock.getsockname()[1]
        self._socket = sock

    def stop(self) -> None:
        """Stop listening and close the socket; safe to call more than once."""
        if self._socket is None:
            return
        try:
            self._socket.shutdown(socket.SHUT_RDWR)
        except OSError:
            pass
        self._socket.close()
        self._socket = None

    def __enter__(self) -> "LocalTcpServer":
        self.start()
        return self

    def __exit__(self, *args: object) -> None:
        self.stop()

    def __del__(self) -> None:
        self.stop()