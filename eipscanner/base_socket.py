"""Common behaviour of the sockets used to talk to EtherNet/IP nodes."""

from __future__ import annotations

import select
import socket
import time
from abc import ABC, abstractmethod
from typing import Callable, Iterable, Optional

from .endpoint import EndPoint
from .logger import LogLevel, log

BeginReceiveHandler = Callable[["BaseSocket"], None]


class BaseSocket(ABC):
    """A socket bound to one remote end point.

    Subclasses create the underlying socket object and implement ``send``
    and ``receive``. A receive handler may be registered; it is called by
    ``select_sockets`` whenever the socket has data to read.
    """

    _kind = "base"

    def __init__(self, end_point: EndPoint) -> None:
        self._remote_end_point = end_point
        self._recv_timeout = 0.0
        self._begin_receive_handler: Optional[BeginReceiveHandler] = None
        self._socket: Optional[socket.socket] = None

    @abstractmethod
    def send(self, data: bytes) -> None:
        """Send all of ``data`` to the remote end point."""

    @abstractmethod
    def receive(self, size: int) -> bytes:
        """Receive up to ``size`` bytes."""

    def fileno(self) -> int:
        """The descriptor of the underlying socket, or -1 when there is none."""
        if self._socket is None:
            return -1
        return self._socket.fileno()

    @property
    def remote_end_point(self) -> EndPoint:
        return self._remote_end_point

    @property
    def recv_timeout(self) -> float:
        """Receive timeout in seconds; 0 means wait without limit."""
        return self._recv_timeout

    @recv_timeout.setter
    def recv_timeout(self, value: float) -> None:
        self._recv_timeout = max(0.0, float(value))
        self._apply_recv_timeout()

    def _apply_recv_timeout(self) -> None:
        if self._socket is not None:
            self._socket.settimeout(self._recv_timeout or None)

    def set_begin_receive_handler(self, handler: BeginReceiveHandler) -> None:
        """Register the callable invoked when data is ready to be read."""
        self._begin_receive_handler = handler

    def begin_receive(self) -> None:
        """Invoke the registered receive handler with this socket."""
        if self._begin_receive_handler is None:
            raise RuntimeError("no receive handler is set")
        self._begin_receive_handler(self)

    def close(self) -> None:
        """Shut the socket down and release it; closing twice is harmless."""
        if self._socket is None:
            return
        log(LogLevel.DEBUG, f"Close {self._kind} socket fd={self._socket.fileno()}")
        try:
            self._socket.shutdown(socket.SHUT_RDWR)
        except OSError:
            pass
        self._socket.close()
        self._socket = None

    def __enter__(self) -> "BaseSocket":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def select_sockets(sockets: Iterable[BaseSocket], timeout: float) -> None:
    """Dispatch readable sockets to their receive handlers until ``timeout`` passes.

    Waiting repeats while any socket is readable; it stops at the first wait
    in which none is, which happens at the latest once the deadline is reached.
    """
    sockets = list(sockets)
    if not sockets:
        raise ValueError("no sockets to select from")

    stop_time = time.monotonic() + max(0.0, timeout)
    while True:
        remaining = max(0.0, stop_time - time.monotonic())
        ready, _, _ = select.select(sockets, [], [], remaining)
        for sock in ready:
            sock.begin_receive()
        if not ready:
            break