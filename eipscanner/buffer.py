"""Little-endian encoding and decoding of CIP data types."""

from __future__ import annotations

import socket
import struct
from typing import Iterable

from .endpoint import EndPoint

_USINT = struct.Struct("<B")
_SINT = struct.Struct("<b")
_UINT = struct.Struct("<H")
_INT = struct.Struct("<h")
_UDINT = struct.Struct("<I")
_DINT = struct.Struct("<i")
_ULINT = struct.Struct("<Q")
_LINT = struct.Struct("<q")
_REAL = struct.Struct("<f")
_LREAL = struct.Struct("<d")
_NET_UINT = struct.Struct(">H")

_SOCKADDR_ZERO = bytes(8)


class Buffer:
    """A byte sequence with a read cursor.

    Writes append to the end. Reads advance the cursor; a read past the end
    yields zero bytes for the missing part and leaves the buffer invalid,
    which callers detect with ``is_valid``.
    """

    def __init__(self, data: bytes | bytearray | Iterable[int] = b"") -> None:
        self._data = bytearray(data)
        self._position = 0

    @property
    def data(self) -> bytes:
        return bytes(self._data)

    def __len__(self) -> int:
        return len(self._data)

    @property
    def pos(self) -> int:
        return self._position

    @property
    def is_valid(self) -> bool:
        """False once a read has gone past the end of the data."""
        return self._position <= len(self._data)

    @property
    def empty(self) -> bool:
        """True when nothing is left to read."""
        return self._position >= len(self._data)

    def _take(self, size: int) -> bytes:
        if size < 0:
            raise ValueError(f"cannot read a negative number of bytes: {size}")
        chunk = bytes(self._data[self._position:self._position + size])
        self._position += size
        return chunk.ljust(size, b"\0")

    def _write(self, fmt: struct.Struct, value) -> "Buffer":
        try:
            self._data += fmt.pack(value)
        except struct.error as exc:
            raise ValueError(f"{value!r} cannot be encoded as {fmt.format!r}") from exc
        return self

    def _read(self, fmt: struct.Struct):
        return fmt.unpack(self._take(fmt.size))[0]

    def write_usint(self, value: int) -> "Buffer":
        return self._write(_USINT, value)

    def read_usint(self) -> int:
        return self._read(_USINT)

    def write_sint(self, value: int) -> "Buffer":
        return self._write(_SINT, value)

    def read_sint(self) -> int:
        return self._read(_SINT)

    def write_uint(self, value: int) -> "Buffer":
        return self._write(_UINT, value)

    def read_uint(self) -> int:
        return self._read(_UINT)

    def write_int(self, value: int) -> "Buffer":
        return self._write(_INT, value)

    def read_int(self) -> int:
        return self._read(_INT)

    def write_udint(self, value: int) -> "Buffer":
        return self._write(_UDINT, value)

    def read_udint(self) -> int:
        return self._read(_UDINT)

    def write_dint(self, value: int) -> "Buffer":
        return self._write(_DINT, value)

    def read_dint(self) -> int:
        return self._read(_DINT)

    def write_ulint(self, value: int) -> "Buffer":
        return self._write(_ULINT, value)

    def read_ulint(self) -> int:
        return self._read(_ULINT)

    def write_lint(self, value: int) -> "Buffer":
        return self._write(_LINT, value)

    def read_lint(self) -> int:
        return self._read(_LINT)

    def write_real(self, value: float) -> "Buffer":
        return self._write(_REAL, value)

    def read_real(self) -> float:
        return self._read(_REAL)

    def write_lreal(self, value: float) -> "Buffer":
        return self._write(_LREAL, value)

    def read_lreal(self) -> float:
        return self._read(_LREAL)

    def write_bytes(self, value: bytes | bytearray | Iterable[int]) -> "Buffer":
        self._data += bytes(value)
        return self

    def read_bytes(self, size: int) -> bytes:
        return self._take(size)

    def write_uint_list(self, values: Iterable[int]) -> "Buffer":
        for value in values:
            self.write_uint(value)
        return self

    def read_uint_list(self, count: int) -> list[int]:
        return [self.read_uint() for _ in range(count)]

    def write_endpoint(self, endpoint: EndPoint) -> "Buffer":
        """Encode a socket address item: family, port, address, 8 zero bytes."""
        self._data += _NET_UINT.pack(socket.AF_INET)
        self._write(_NET_UINT, endpoint.port)
        self._data += endpoint.packed_address
        self._data += _SOCKADDR_ZERO
        return self

    def read_endpoint(self) -> EndPoint:
        """Decode a socket address item written by ``write_endpoint``."""
        self._take(2)
        port = _NET_UINT.unpack(self._take(2))[0]
        address = self._take(4)
        self._take(len(_SOCKADDR_ZERO))
        return EndPoint(socket.inet_ntoa(address), port)