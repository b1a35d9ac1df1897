import pytest

from eipscanner.common_packet_item import (
    CommonPacketItem,
    CommonPacketItemIds,
    create_connected_data_item,
    create_null_address_item,
    create_sequence_address_item,
    create_unconnected_data_item,
)


def test_unconnected_data_item_packs():
    item = create_unconnected_data_item([1, 2, 3, 4])
    assert item.pack() == bytes([0xB2, 0, 4, 0, 1, 2, 3, 4])


def test_null_address_item_packs():
    assert create_null_address_item().pack() == bytes([0, 0, 0, 0])


def test_factory_creates_unconnected_data_item():
    data = bytes([1, 2, 3, 4])
    item = create_unconnected_data_item(data)
    assert item.type_id == CommonPacketItemIds.UNCONNECTED_MESSAGE
    assert item.length == len(data)
    assert item.data == data
    assert item.pack() == bytes([0xB2, 0, 4, 0, 1, 2, 3, 4])


def test_factory_creates_null_address_item():
    item = create_null_address_item()
    assert item.type_id == CommonPacketItemIds.NULL_ADDR
    assert item.length == 0


def test_connected_data_item_type():
    item = create_connected_data_item(b"\x07")
    assert item.type_id == CommonPacketItemIds.CONNECTED_TRANSPORT_PACKET
    assert item.pack() == bytes([0xB1, 0, 1, 0, 7])


def test_sequence_address_item():
    item = create_sequence_address_item(1, 2)
    assert item.type_id == CommonPacketItemIds.SEQUENCED_ADDRESS_ITEM
    assert item.data == bytes([1, 0, 0, 0, 2, 0, 0, 0])
    assert item.pack()[:4] == bytes([0x02, 0x80, 8, 0])


def test_equality_compares_type_and_data():
    assert create_unconnected_data_item(b"\x01") == CommonPacketItem(
        CommonPacketItemIds.UNCONNECTED_MESSAGE, [1]
    )
    assert create_unconnected_data_item(b"\x01") != create_connected_data_item(b"\x01")


@pytest.mark.parametrize("raw", [0x1234, 0x00B2])
def test_type_id_keeps_unknown_numbers(raw):
    item = CommonPacketItem(raw, b"")
    assert int(item.type_id) == raw