"""UDP socket transport for sACN datagrams."""

from __future__ import annotations

import socket
from typing import Optional

import structlog

from sacn_stream.core.exceptions import TransmissionError, TransportClosedError
from sacn_stream.transport.base import Address

logger = structlog.get_logger()


class UDPTransport:
    """
    UDP sender for sACN packets.

    Multicast TTL and the outgoing interface are set when the socket is
    opened. Unicast destinations work through the same socket.
    """

    def __init__(
        self,
        multicast_ttl: int = 1,
        bind_interface: Optional[str] = None,
    ):
        self.multicast_ttl = multicast_ttl
        self.bind_interface = bind_interface
        self._socket: socket.socket | None = None

    @property
    def is_open(self) -> bool:
        return self._socket is not None

    def open(self) -> None:
        if self._socket is not None:
            return
        sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM, socket.IPPROTO_UDP)
        sock.setsockopt(socket.IPPROTO_IP, socket.IP_MULTICAST_TTL, self.multicast_ttl)
        if self.bind_interface:
            sock.setsockopt(
                socket.IPPROTO_IP,
                socket.IP_MULTICAST_IF,
                socket.inet_aton(self.bind_interface),
            )
        self._socket = sock
        logger.info(
            "Opened sACN transport",
            ttl=self.multicast_ttl,
            interface=self.bind_interface,
        )

    def close(self) -> None:
        if self._socket is not None:
            self._socket.close()
            self._socket = None
            logger.info("Closed sACN transport")

    def send(self, data: bytes, address: Address) -> None:
        if self._socket is None:
            raise TransportClosedError(type(self).__name__)
        try:
            self._socket.sendto(data, address)
        except OSError as e:
            logger.error("sACN send failed", host=address[0], port=address[1], error=str(e))
            raise TransmissionError(address, str(e)) from e
