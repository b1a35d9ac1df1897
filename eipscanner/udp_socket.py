"""UDP sockets for implicit messaging and discovery."""

from __future__ import annotations

import socket

from .base_socket import BaseSocket
from .endpoint import EndPoint
from .logger import LogLevel, log


class UDPSocket(BaseSocket):
    """A UDP socket that sends datagrams to its remote end point."""

    _kind = "UDP"

    def __init__(self, end_point: EndPoint) -> None:
        super().__init__(end_point)
        self._socket = socket.socket(socket.AF_INET, socket.SOCK_DGRAM, socket.IPPROTO_UDP)
        log(LogLevel.DEBUG, f"Opened UDP socket fd={self._socket.fileno()}")

    def _open(self) -> socket.socket:
        if self._socket is None:
            raise OSError("socket is closed")
        return self._socket

    def send(self, data: bytes) -> None:
        sock = self._open()
        data = bytes(data)
        log(LogLevel.TRACE, f"Send {len(data)} bytes from UDP socket #{sock.fileno()}.")
        count = sock.sendto(data, self._remote_end_point.sockaddr)
        if count < len(data):
            raise OSError(f"sent only {count} of {len(data)} bytes")

    def receive(self, size: int) -> bytes:
        """Receive one datagram into a ``size``-byte, zero-filled block."""
        data, _ = self.receive_from(size)
        return data

    def receive_from(self, size: int) -> tuple[bytes, EndPoint]:
        """Receive one datagram and the end point it came from."""
        sock = self._open()
        data, address = sock.recvfrom(size)
        log(LogLevel.TRACE, f"Received {len(data)} bytes from UDP socket #{sock.fileno()}.")
        return data.ljust(size, b"\0"), EndPoint.from_sockaddr(address)


class UDPBoundSocket(UDPSocket):
    """A UDP socket bound to the end point's port on every local interface."""

    def __init__(self, end_point: EndPoint) -> None:
        super().__init__(end_point)
        sock = self._open()
        try:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            sock.bind(("", self._remote_end_point.port))
        except BaseException:
            sock.close()
            self._socket = None
            raise