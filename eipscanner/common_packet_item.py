"""Items of the EtherNet/IP common packet format."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from .buffer import Buffer


class CommonPacketItemIds(IntEnum):
    """Type identifiers of common packet format items."""

    NULL_ADDR = 0x0000
    LIST_IDENTITY = 0x000C
    CONNECTION_ADDRESS_ITEM = 0x00A1
    CONNECTED_TRANSPORT_PACKET = 0x00B1
    UNCONNECTED_MESSAGE = 0x00B2
    O2T_SOCKADDR_INFO = 0x8000
    T2O_SOCKADDR_INFO = 0x8001
    SEQUENCED_ADDRESS_ITEM = 0x8002


def item_id(value: int) -> CommonPacketItemIds | int:
    """Return the known item id for ``value``, or the plain number if unknown."""
    try:
        return CommonPacketItemIds(value)
    except ValueError:
        return value


@dataclass(frozen=True)
class CommonPacketItem:
    """One typed item of a common packet: a type id followed by its data."""

    type_id: CommonPacketItemIds | int = CommonPacketItemIds.NULL_ADDR
    data: bytes = field(default=b"")

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", bytes(self.data))
        object.__setattr__(self, "type_id", item_id(int(self.type_id)))

    @property
    def length(self) -> int:
        """Number of data bytes in the item."""
        return len(self.data)

    def pack(self) -> bytes:
        """Encode the item as type id, length and data."""
        buffer = Buffer()
        buffer.write_uint(int(self.type_id)).write_uint(self.length)
        if self.length > 0:
            buffer.write_bytes(self.data)
        return buffer.data


def create_null_address_item() -> CommonPacketItem:
    """An address item for unconnected messages, carrying no data."""
    return CommonPacketItem()


def create_unconnected_data_item(data: bytes) -> CommonPacketItem:
    """A data item holding an unconnected message."""
    return CommonPacketItem(CommonPacketItemIds.UNCONNECTED_MESSAGE, data)


def create_connected_data_item(data: bytes) -> CommonPacketItem:
    """A data item holding a connected transport packet."""
    return CommonPacketItem(CommonPacketItemIds.CONNECTED_TRANSPORT_PACKET, data)


def create_sequence_address_item(connection_id: int, seq_number: int) -> CommonPacketItem:
    """An address item holding a connection id and a sequence number."""
    buffer = Buffer()
    buffer.write_udint(connection_id).write_udint(seq_number)
    return CommonPacketItem(CommonPacketItemIds.SEQUENCED_ADDRESS_ITEM, buffer.data)