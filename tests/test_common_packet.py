import pytest

from eipscanner.common_packet import CommonPacket
from eipscanner.common_packet_item import (
    CommonPacketItemIds,
    create_null_address_item,
    create_unconnected_data_item,
)


def test_expand_from_data():
    item1 = create_null_address_item().pack()
    item2 = create_unconnected_data_item([0x0, 0x2]).pack()
    data = bytes([0x2, 0x0]) + item1 + item2

    cp = CommonPacket.expand(data)

    assert cp[0].type_id == CommonPacketItemIds.NULL_ADDR
    assert cp[1].type_id == CommonPacketItemIds.UNCONNECTED_MESSAGE
    assert cp[1].data == bytes([0x0, 0x2])


def test_expand_raises_on_invalid_data():
    item1 = create_unconnected_data_item(b"").pack()
    item2 = create_unconnected_data_item(b"").pack()
    invalid = (bytes([0x2, 0x0]) + item1 + item2)[:-1]

    with pytest.raises(ValueError):
        CommonPacket.expand(invalid)


def test_pack_expand_round_trip():
    packet = CommonPacket()
    packet.append(create_null_address_item()).append(
        create_unconnected_data_item(b"\x01\x02\x03")
    )
    restored = CommonPacket.expand(packet.pack())
    assert restored == packet
    assert len(restored) == 2
    assert list(restored) == packet.items


def test_pack_empty_packet():
    assert CommonPacket().pack() == bytes([0, 0])


def test_pack_starts_with_item_count():
    packet = CommonPacket([create_null_address_item()] * 3)
    assert packet.pack()[:2] == bytes([3, 0])


def test_expand_stops_when_data_runs_out():
    data = bytes([0x5, 0x0]) + create_null_address_item().pack()
    cp = CommonPacket.expand(data)
    assert len(cp) == 1