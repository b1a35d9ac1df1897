"""Interface of an established EtherNet/IP session."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .encaps_packet import EncapsPacket
from .endpoint import EndPoint


class SessionInfoInterface(ABC):
    """An EIP session able to exchange encapsulation packets with an adapter."""

    @abstractmethod
    def send_and_receive(self, packet: EncapsPacket) -> EncapsPacket:
        """Send an encapsulation packet and return the reply."""

    @property
    @abstractmethod
    def session_handle(self) -> int:
        """The handle of the current session."""

    @property
    @abstractmethod
    def remote_end_point(self) -> EndPoint:
        """The address of the adapter the session is established with."""