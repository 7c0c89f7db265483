"""Datagram transports for sACN packets."""

from sacn_stream.transport.base import Address, Transport
from sacn_stream.transport.udp import UDPTransport

__all__ = [
    "Address",
    "Transport",
    "UDPTransport",
]
