"""EtherNet/IP encapsulation, common packet format, CIP encoding, sockets and logging."""

__version__ = "0.1.0"