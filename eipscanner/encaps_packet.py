"""EtherNet/IP encapsulation packets and their construction."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from .buffer import Buffer

HEADER_SIZE = 24


class EncapsCommands(IntEnum):
    """Encapsulation command codes."""

    NOP = 0
    LIST_SERVICES = 0x0004
    LIST_IDENTITY = 0x0063
    LIST_INTERFACES = 0x0064
    REGISTER_SESSION = 0x0065
    UN_REGISTER_SESSION = 0x0066
    SEND_RR_DATA = 0x006F
    SEND_UNIT_DATA = 0x0070
    INDICATE_STATUS = 0x0072
    CANCEL = 0x0073


class EncapsStatusCodes(IntEnum):
    """Encapsulation status codes."""

    SUCCESS = 0x0000
    UNSUPPORTED_COMMAND = 0x0001
    INSUFFICIENT_MEMORY = 0x0002
    INVALID_FORMAT_OR_DATA = 0x0003
    INVALID_SESSION_HANDLE = 0x0064
    UNSUPPORTED_PROTOCOL_VERSION = 0x0069


def _as_enum(enum_type, value: int):
    try:
        return enum_type(value)
    except ValueError:
        return value


@dataclass
class EncapsPacket:
    """An encapsulation packet: a 24-byte header followed by command data."""

    command: EncapsCommands | int = EncapsCommands.NOP
    session_handle: int = 0
    status_code: EncapsStatusCodes | int = EncapsStatusCodes.SUCCESS
    context: bytes = field(default=bytes(8))
    options: int = 0
    data: bytes = b""

    HEADER_SIZE = HEADER_SIZE

    def __post_init__(self) -> None:
        self.data = bytes(self.data)
        self.context = bytes(self.context)
        if len(self.context) != 8:
            raise ValueError("EncapsPacket sender context must be 8 bytes")

    @property
    def length(self) -> int:
        """Length of the command data in bytes."""
        return len(self.data)

    def pack(self) -> bytes:
        """Encode the header and data."""
        buffer = Buffer()
        buffer.write_uint(int(self.command))
        buffer.write_uint(self.length)
        buffer.write_udint(self.session_handle)
        buffer.write_udint(int(self.status_code))
        buffer.write_bytes(self.context)
        buffer.write_udint(self.options)
        buffer.write_bytes(self.data)
        return buffer.data

    @classmethod
    def expand(cls, data: bytes) -> "EncapsPacket":
        """Decode a packet; raise ValueError if the header or length is wrong."""
        data = bytes(data)
        if len(data) < HEADER_SIZE:
            raise ValueError(f"EncapsPacket header must be {HEADER_SIZE} bytes")

        buffer = Buffer(data)
        command = buffer.read_uint()
        length = buffer.read_uint()
        session_handle = buffer.read_udint()
        status_code = buffer.read_udint()
        context = buffer.read_bytes(8)
        options = buffer.read_udint()

        data_size = len(data) - HEADER_SIZE
        if data_size != length:
            raise ValueError(
                f"EncapsPacket data must be {length} but we have only {data_size} bytes"
            )

        return cls(
            command=_as_enum(EncapsCommands, command),
            session_handle=session_handle,
            status_code=_as_enum(EncapsStatusCodes, status_code),
            context=context,
            options=options,
            data=buffer.read_bytes(length),
        )


def length_from_header(data: bytes) -> int:
    """Read the data length field from an encapsulation header."""
    return Buffer(bytes(data)[2:4]).read_uint()


def create_register_session_packet() -> EncapsPacket:
    """A RegisterSession request with protocol version 1 and no options."""
    protocol_version = 1
    option_flags = 0
    body = Buffer().write_uint(protocol_version).write_uint(option_flags).data
    return EncapsPacket(command=EncapsCommands.REGISTER_SESSION, data=body)


def create_unregister_session_packet(session_handle: int) -> EncapsPacket:
    """An UnRegisterSession request for the given session."""
    return EncapsPacket(
        command=EncapsCommands.UN_REGISTER_SESSION, session_handle=session_handle
    )


def create_send_rr_data_packet(session_handle: int, timeout: int, data: bytes) -> EncapsPacket:
    """A SendRRData request carrying ``data`` after the interface handle and timeout."""
    interface_handle = 0
    body = (
        Buffer()
        .write_udint(interface_handle)
        .write_uint(timeout)
        .write_bytes(data)
        .data
    )
    return EncapsPacket(
        command=EncapsCommands.SEND_RR_DATA, session_handle=session_handle, data=body
    )


def create_list_identity_packet() -> EncapsPacket:
    """A ListIdentity request."""
    return EncapsPacket(command=EncapsCommands.LIST_IDENTITY, session_handle=0)