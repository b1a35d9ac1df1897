"""TCP connection to an EtherNet/IP node for explicit messaging."""

from __future__ import annotations

import socket

from .base_socket import BaseSocket
from .endpoint import EndPoint
from .logger import LogLevel, log


class TCPSocket(BaseSocket):
    """A connected TCP socket.

    Connecting fails with TimeoutError if it takes longer than
    ``conn_timeout`` seconds, and with OSError on any other failure.
    """

    _kind = "TCP"

    def __init__(self, end_point: EndPoint, conn_timeout: float = 1.0) -> None:
        super().__init__(end_point)
        self._socket = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        log(LogLevel.DEBUG, f"Opened TCP socket fd={self._socket.fileno()}")
        log(LogLevel.DEBUG, f"Connecting to {self._remote_end_point}")
        try:
            self._socket.settimeout(max(0.0, conn_timeout))
            self._socket.connect(self._remote_end_point.sockaddr)
            self._apply_recv_timeout()
        except BaseException:
            self._socket.close()
            self._socket = None
            raise

    def _connected(self) -> socket.socket:
        if self._socket is None:
            raise OSError("socket is closed")
        return self._socket

    def send(self, data: bytes) -> None:
        sock = self._connected()
        data = bytes(data)
        log(LogLevel.TRACE, f"Send {len(data)} bytes from TCP socket #{sock.fileno()}.")
        sock.sendall(data)

    def receive(self, size: int) -> bytes:
        """Read ``size`` bytes; if the peer closes early the rest is zero-filled."""
        sock = self._connected()
        received = bytearray()
        while len(received) < size:
            chunk = sock.recv(size - len(received))
            log(LogLevel.TRACE, f"Received {len(chunk)} bytes from TCP socket #{sock.fileno()}.")
            if not chunk:
                break
            received += chunk

        if len(received) != size:
            log(
                LogLevel.WARNING,
                f"Received from {self._remote_end_point} {len(received)} of {size}",
            )
        return bytes(received.ljust(size, b"\0"))