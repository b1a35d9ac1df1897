# eipscanner

Building blocks for an EtherNet/IP scanner: little-endian CIP data encoding,
encapsulation packets, common packet format items, TCP/UDP sockets and a
small logging facility.

## Installation

```
pip install .
```

## Encoding CIP data

`eipscanner.buffer.Buffer` writes and reads CIP elementary types in
little-endian order. Every `write_*` method returns the buffer, so calls can
be chained; `data` is a property holding the bytes written so far.

```python
from eipscanner.buffer import Buffer

buf = Buffer()
buf.write_uint(0x0100).write_udint(0x05040302)
raw = buf.data            # b"\x00\x01\x02\x03\x04\x05"

reader = Buffer(raw)
reader.read_uint()        # 0x0100
reader.read_udint()       # 0x05040302
reader.empty              # True
```

Supported types: `usint`, `sint`, `uint`, `int`, `udint`, `dint`, `ulint`,
`lint`, `real` (32-bit float), `lreal` (64-bit float), raw bytes
(`write_bytes` / `read_bytes(size)`) and lists of `uint`
(`write_uint_list` / `read_uint_list(count)`).

A read past the end of the data yields zero bytes for the missing part and
leaves the buffer invalid; check `is_valid` afterwards. A value that does
not fit the type raises `ValueError`.

`write_endpoint` / `read_endpoint` encode an `EndPoint` in the socket
address layout used by EtherNet/IP items: family and port in network order,
four address bytes, then eight zero bytes.

## End points

`eipscanner.endpoint.EndPoint(host, port)` holds an IPv4 host and port.
`str(end_point)` gives `"host:port"`, `packed_address` gives the four
address bytes, and `sockaddr` gives a tuple usable with the `socket`
module. A host that is not an IPv4 address is kept as given, with an
all-zero packed address. The module also defines `DEFAULT_EXPLICIT_PORT`
(44818) and `DEFAULT_IMPLICIT_PORT` (2222).

## Encapsulation packets

`eipscanner.encaps_packet.EncapsPacket` is a dataclass with `command`,
`session_handle`, `status_code`, `context`, `options` and `data`; `length`
is derived from `data`. `pack()` encodes it and `EncapsPacket.expand(raw)`
decodes it, raising `ValueError` if the 24-byte header is incomplete or the
length field disagrees with the data.

```python
from eipscanner.encaps_packet import (
    EncapsPacket,
    create_register_session_packet,
    create_send_rr_data_packet,
    length_from_header,
)

wire = create_register_session_packet().pack()
packet = EncapsPacket.expand(wire)
length_from_header(wire)  # 4

request = create_send_rr_data_packet(0xAABBCCDD, 100, b"\x01\x02")
```

Other constructors: `create_unregister_session_packet(session_handle)` and
`create_list_identity_packet()`. Command and status codes are in the
`EncapsCommands` and `EncapsStatusCodes` enums.

## Common packet format

`eipscanner.common_packet_item.CommonPacketItem` is a frozen dataclass of
`type_id` and `data`; `CommonPacketItemIds` lists the known type ids.
Constructors: `create_null_address_item()`,
`create_unconnected_data_item(data)`, `create_connected_data_item(data)`
and `create_sequence_address_item(connection_id, seq_number)`.

`eipscanner.common_packet.CommonPacket` is an ordered collection of items
that can be iterated, indexed and appended to.

```python
from eipscanner.common_packet import CommonPacket
from eipscanner.common_packet_item import (
    create_null_address_item,
    create_unconnected_data_item,
)

cpf = CommonPacket([create_null_address_item(),
                    create_unconnected_data_item(b"\x0e\x03")])
payload = cpf.pack()
decoded = CommonPacket.expand(payload)   # ValueError if truncated
[item.type_id for item in decoded]
```

## Sessions

`eipscanner.session_info.SessionInfoInterface` is an abstract base class
describing an established session: `send_and_receive(packet)`, and the
`session_handle` and `remote_end_point` properties. The package provides no
implementation of it.

## Sockets

`TCPSocket` (`eipscanner.tcp_socket`), `UDPSocket` and `UDPBoundSocket`
(`eipscanner.udp_socket`) take an `EndPoint`, provide `send(data)` and
`receive(size)`, and can be used as context managers that close the
socket on exit.

- `TCPSocket(end_point, conn_timeout=1.0)` connects on construction;
  `receive(size)` reads until `size` bytes arrive or the peer closes, in
  which case the rest is zero-filled.
- `UDPSocket.receive_from(size)` returns the datagram and the sender's
  `EndPoint`.
- `UDPBoundSocket` additionally binds to the end point's port on all local
  interfaces.

`recv_timeout` (seconds, 0 meaning no limit) can be set on any socket.
`eipscanner.base_socket.select_sockets(sockets, timeout)` waits on several
sockets and calls the handler registered with `set_begin_receive_handler`
for each ready one, repeating until a wait finds none ready.

```python
from eipscanner.endpoint import EndPoint
from eipscanner.tcp_socket import TCPSocket

with TCPSocket(EndPoint("192.0.2.10", 44818)) as sock:
    sock.send(wire)
```

## Logging

```python
from eipscanner.logger import LogLevel, log, set_log_level

set_log_level(LogLevel.DEBUG)
log(LogLevel.INFO, "hello")   # prints "[INFO] hello"
```

Messages go to standard output through `ConsoleAppender` by default;
install a different `LogAppender` subclass with `set_appender`.
`LogLevel.OFF` silences everything.

## What this package does not do

It supplies the encoding and transport pieces only. It does not register
or manage sessions with a device, route CIP requests, discover devices on
the network, or model CIP objects such as identity, parameter or file
objects. There is no command-line tool.

## Running the tests

```
pip install .[test]
pytest
```