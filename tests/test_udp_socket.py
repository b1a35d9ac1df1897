import socket

import pytest

from eipscanner.endpoint import EndPoint
from eipscanner.udp_socket import UDPBoundSocket, UDPSocket


def _free_udp_port():
    probe = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    probe.bind(("127.0.0.1", 0))
    port = probe.getsockname()[1]
    probe.close()
    return port


@pytest.fixture
def bound():
    port = _free_udp_port()
    receiver = UDPBoundSocket(EndPoint("127.0.0.1", port))
    receiver.recv_timeout = 2.0
    yield receiver, port
    receiver.close()


def test_bound_socket_listens_on_its_port(bound):
    receiver, port = bound
    assert receiver._socket.getsockname()[1] == port


def test_send_and_receive_from(bound):
    receiver, port = bound
    with UDPSocket(EndPoint("127.0.0.1", port)) as sender:
        sender.send(b"hello")
        data, source = receiver.receive_from(5)
    assert data == b"hello"
    assert source.host == "127.0.0.1"
    assert source.port > 0


def test_receive_is_zero_filled_to_requested_size(bound):
    receiver, port = bound
    with UDPSocket(EndPoint("127.0.0.1", port)) as sender:
        sender.send(b"abc")
        data = receiver.receive(5)
    assert data == b"abc\0\0"
    assert len(data) == 5


def test_reply_reaches_sender(bound):
    receiver, port = bound
    with UDPSocket(EndPoint("127.0.0.1", port)) as sender:
        sender.recv_timeout = 2.0
        sender.send(b"ping")
        _, source = receiver.receive_from(4)
        with UDPSocket(source) as replier:
            replier.send(b"pong")
        assert sender.receive(4) == b"pong"


def test_receive_times_out(bound):
    receiver, _ = bound
    receiver.recv_timeout = 0.05
    with pytest.raises(TimeoutError):
        receiver.receive(4)


def test_remote_end_point_is_kept():
    end_point = EndPoint("127.0.0.1", 2222)
    with UDPSocket(end_point) as sock:
        assert sock.remote_end_point == end_point


def test_closed_socket_refuses_io():
    sock = UDPSocket(EndPoint("127.0.0.1", 2222))
    sock.close()
    assert sock.fileno() == -1
    with pytest.raises(OSError):
        sock.send(b"x")
    with pytest.raises(OSError):
        sock.receive_from(1)