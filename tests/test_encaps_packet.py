import pytest

from eipscanner.encaps_packet import (
    EncapsCommands,
    EncapsPacket,
    EncapsStatusCodes,
    create_list_identity_packet,
    create_register_session_packet,
    create_send_rr_data_packet,
    create_unregister_session_packet,
    length_from_header,
)

HEADER = [0x6F, 0, 0xB, 0, 0xDD, 0xCC, 0xBB, 0xAA] + [0] * 16


def test_expand_data():
    data = bytes(HEADER + [0, 0, 0, 0, 0x64, 0, 1, 2, 3, 4, 5])
    packet = EncapsPacket.expand(data)

    assert packet.command == EncapsCommands.SEND_RR_DATA
    assert packet.length == 11
    assert packet.status_code == EncapsStatusCodes.SUCCESS
    assert packet.session_handle == 0xAABBCCDD
    assert packet.data == bytes([0, 0, 0, 0, 0x64, 0, 1, 2, 3, 4, 5])


def test_expand_raises_if_too_short():
    data = bytes(HEADER[:23])
    with pytest.raises(ValueError):
        EncapsPacket.expand(data)


def test_expand_raises_if_data_length_is_wrong():
    data = bytes(HEADER + [0, 0, 0, 0, 0x64, 0, 1, 2, 3, 4, 5, 10])
    with pytest.raises(ValueError):
        EncapsPacket.expand(data)


def test_create_register_session_packet():
    expected = bytes([0x65, 0, 4, 0] + [0] * 20 + [1, 0, 0, 0])
    assert create_register_session_packet().pack() == expected


def test_create_unregister_session_packet():
    expected = bytes([0x66, 0, 0, 0, 0xDD, 0xCC, 0xBB, 0xAA] + [0] * 16)
    assert create_unregister_session_packet(0xAABBCCDD).pack() == expected


def test_create_send_rr_data_packet():
    expected = bytes(HEADER + [0, 0, 0, 0, 0x64, 0, 1, 2, 3, 4, 5])
    packet = create_send_rr_data_packet(0xAABBCCDD, 100, bytes([1, 2, 3, 4, 5]))
    assert packet.pack() == expected


def test_create_list_identity_packet():
    expected = bytes([0x63, 0, 0, 0] + [0] * 20)
    assert create_list_identity_packet().pack() == expected


def test_pack_expand_round_trip():
    packet = create_send_rr_data_packet(7, 3, b"\x09\x08")
    assert EncapsPacket.expand(packet.pack()) == packet


def test_length_from_header():
    data = bytes(HEADER + [0] * 11)
    assert length_from_header(data) == 11


def test_length_follows_data():
    packet = EncapsPacket()
    packet.data = b"\x01\x02\x03"
    assert packet.length == 3
    assert length_from_header(packet.pack()) == 3


def test_default_packet_is_nop_header():
    assert EncapsPacket().pack() == bytes(EncapsPacket.HEADER_SIZE)


def test_context_must_be_eight_bytes():
    with pytest.raises(ValueError):
        EncapsPacket(context=b"\x00")