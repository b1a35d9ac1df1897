"""The EtherNet/IP common packet format: a counted list of items."""

from __future__ import annotations

from typing import Iterable, Iterator

from .buffer import Buffer
from .common_packet_item import CommonPacketItem, item_id


class CommonPacket:
    """An ordered collection of common packet items."""

    def __init__(self, items: Iterable[CommonPacketItem] = ()) -> None:
        self._items = list(items)

    def append(self, item: CommonPacketItem) -> "CommonPacket":
        """Add an item to the end and return the packet."""
        self._items.append(item)
        return self

    @property
    def items(self) -> list[CommonPacketItem]:
        return list(self._items)

    def pack(self) -> bytes:
        """Encode the item count followed by every item."""
        buffer = Buffer()
        buffer.write_uint(len(self._items))
        for item in self._items:
            buffer.write_bytes(item.pack())
        return buffer.data

    @classmethod
    def expand(cls, data: bytes) -> "CommonPacket":
        """Decode a common packet; raise ValueError if the data is truncated."""
        buffer = Buffer(data)
        count = buffer.read_uint()
        items = []
        for _ in range(count):
            if buffer.empty:
                break
            type_id = buffer.read_uint()
            length = buffer.read_uint()
            item_data = buffer.read_bytes(length)
            if not buffer.is_valid:
                raise ValueError("Wrong Common Packet format")
            items.append(CommonPacketItem(item_id(type_id), item_data))
        return cls(items)

    def __iter__(self) -> Iterator[CommonPacketItem]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> CommonPacketItem:
        return self._items[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CommonPacket):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"CommonPacket({self._items!r})"