"""IPv4 address and port of a remote EtherNet/IP node."""

from __future__ import annotations

import socket

DEFAULT_EXPLICIT_PORT = 44818
DEFAULT_IMPLICIT_PORT = 2222


class EndPoint:
    """An IPv4 host and port.

    A host that cannot be parsed as an IPv4 address is kept as given, with
    an all-zero packed address.
    """

    __slots__ = ("_host", "_port", "_packed")

    def __init__(self, host: str, port: int) -> None:
        self._host = host
        self._port = port
        try:
            self._packed = socket.inet_aton(host)
        except (OSError, ValueError):
            self._packed = bytes(4)

    @classmethod
    def from_sockaddr(cls, sockaddr: tuple) -> "EndPoint":
        """Build an end point from a (host, port) socket address."""
        return cls(sockaddr[0], sockaddr[1])

    @property
    def host(self) -> str:
        return self._host

    @property
    def port(self) -> int:
        return self._port

    @property
    def sockaddr(self) -> tuple[str, int]:
        """The (address, port) tuple usable with the socket module."""
        return socket.inet_ntoa(self._packed), self._port

    @property
    def packed_address(self) -> bytes:
        """The four address bytes in network order."""
        return self._packed

    def __str__(self) -> str:
        return f"{self._host}:{self._port}"

    def __repr__(self) -> str:
        return f"EndPoint({self._host!r}, {self._port!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EndPoint):
            return NotImplemented
        return (
            self._host == other._host
            and self._port == other._port
            and self._packed == other._packed
        )

    def __lt__(self, other: "EndPoint") -> bool:
        if not isinstance(other, EndPoint):
            return NotImplemented
        return self._host < other._host and self._port < other._port

    def __hash__(self) -> int:
        return hash((self._host, self._port, self._packed))